"""
Business logic services for fetching store pages and extracting versions
"""

from .fetcher import DocumentFetcher, FetchedDocument
from .version_lookup import VersionLookup

__all__ = ["DocumentFetcher", "FetchedDocument", "VersionLookup"]
