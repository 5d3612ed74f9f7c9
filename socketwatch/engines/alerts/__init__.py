"""Alert engine — finding filter and dedup ledger."""

from socketwatch.engines.alerts.filter import AlertFilter, is_actionable
from socketwatch.engines.alerts.ledger import DedupLedger, FindingIdentity, identity_for

__all__ = ["AlertFilter", "DedupLedger", "FindingIdentity", "identity_for", "is_actionable"]
