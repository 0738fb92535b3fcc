"""Wolf Dynasty API: dynasty fantasy league teams and Yahoo player metadata."""

__version__ = "0.1.0"
