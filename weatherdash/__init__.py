"""Weather dashboard: two upstream forecast APIs merged into one view."""

__version__ = "0.1.0"
