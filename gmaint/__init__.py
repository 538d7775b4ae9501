"""git-maint: routine maintenance for local Git working copies."""

__version__ = "0.1.0"
