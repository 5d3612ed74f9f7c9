"""Package resolver engine — PURL batching and alert lookup."""

from socketwatch.engines.resolver.models import Finding, ResolvedPackage
from socketwatch.engines.resolver.purl import ECOSYSTEM_TO_PURL_TYPE, chunked, to_purl, unique_purls
from socketwatch.engines.resolver.resolver import parse_ndjson, parse_package_line, resolve_batch

__all__ = [
    "ECOSYSTEM_TO_PURL_TYPE",
    "Finding",
    "ResolvedPackage",
    "chunked",
    "parse_ndjson",
    "parse_package_line",
    "resolve_batch",
    "to_purl",
    "unique_purls",
]
