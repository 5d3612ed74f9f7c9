"""Poll-cycle engines: inventory, resolver, alerts, notification."""
