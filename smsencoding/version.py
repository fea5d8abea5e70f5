"""Version information for smsencoding."""

__version__ = "0.1.0"
