from .yahoo_fantasy import YahooFantasyClient

__all__ = [
    "YahooFantasyClient",
]
