import pytest

from tests.pages import document


class StubFetcher:
    """Fetcher double that serves one canned page, or raises, and records calls."""

    def __init__(self, html: str = "", error: Exception = None):
        self.html = html
        self.error = error
        self.calls = []
        self.closed = False

    def fetch(self, identifier):
        self.calls.append(identifier)
        if self.error is not None:
            raise self.error
        return document(self.html, identifier=identifier)

    def close(self):
        self.closed = True


@pytest.fixture
def make_fetcher():
    return StubFetcher
