"""Version information for ngramdet."""

__version__ = "0.1.0"
