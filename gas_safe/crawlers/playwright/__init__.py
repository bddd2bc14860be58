"""Playwright module for the Gas Safe Register scraper."""

from .browser import BrowserSession, BrowserSessionManager, build_launch_args
from .pages import configure_page
from .search import SearchOutcome, SearchTimeouts, submit_search

__all__ = [
    "BrowserSession",
    "BrowserSessionManager",
    "build_launch_args",
    "configure_page",
    "SearchOutcome",
    "SearchTimeouts",
    "submit_search",
]
