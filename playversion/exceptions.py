"""Failure classes for a version lookup."""

from __future__ import annotations


class VersionLookupError(Exception):
    """A lookup ended without a version."""

    def __init__(self, message: str, identifier: str):
        self.identifier = identifier
        super().__init__(message)


class NotFound(VersionLookupError):
    """The Play Store reports no application for the identifier."""


class FetchError(VersionLookupError):
    """The store page could not be retrieved at all."""


class ParseFailed(VersionLookupError):
    """The page was retrieved but no strategy found a version in it."""
