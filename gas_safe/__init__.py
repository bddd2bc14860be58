"""Gas Safe Register scraper service."""

__version__ = "1.0.0"
