"""SocketWatch — poll Socket for new dependency alerts and forward them to Slack."""

__version__ = "1.0.0"
