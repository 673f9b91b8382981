"""Scraper module for downloading spreadsheet documents over HTTP."""

from column_extractor.scraper.downloader import fetch_bytes, fetch_bytes_sync

__all__ = [
    "fetch_bytes",
    "fetch_bytes_sync",
]
