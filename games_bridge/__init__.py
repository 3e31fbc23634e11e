"""Discord games bridge

Mirrors a Discord channel's archive uploads into a games list and serves it,
together with guild member statistics, over HTTP.
"""

__version__ = "1.0.0"
