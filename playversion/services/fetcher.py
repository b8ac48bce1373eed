import requests
import logging
from dataclasses import dataclass
from typing import Optional

from playversion.config import settings
from playversion.exceptions import NotFound, FetchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchedDocument:
    """Store page as returned by the Play Store."""

    identifier: str
    url: str
    status_code: int
    html: str


class DocumentFetcher:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = base_url if base_url is not None else settings.PLAY_STORE_URL
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        # Plain session: a lookup makes exactly one request, no retrying adapter
        self.session = requests.Session()
        self.headers = {
            'User-Agent': settings.USER_AGENT,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': settings.ACCEPT_LANGUAGE,
        }

    def build_url(self, identifier: str) -> str:
        """Identifier is appended verbatim"""
        return self.base_url + identifier

    def fetch(self, identifier: str) -> FetchedDocument:
        """
        Fetch the store page for an application

        Args:
            identifier: Application package name, e.g. com.example.app

        Returns:
            FetchedDocument: page body and status for any status below 500 except 404

        Raises:
            NotFound: the store answered 404
            FetchError: the store answered 5xx or the request failed in transport
        """
        url = self.build_url(identifier)
        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Error fetching {url}: {e}")
            raise FetchError(f"Error retrieving app information: {e}", identifier) from e

        if response.status_code == 404:
            raise NotFound("Package not found", identifier)
        if response.status_code >= 500:
            logger.error(f"Play Store returned {response.status_code} for {url}")
            raise FetchError(
                f"Error retrieving app information: upstream status {response.status_code}",
                identifier,
            )

        if response.status_code >= 400:
            logger.warning(f"Play Store returned {response.status_code} for {url}, parsing body anyway")

        return FetchedDocument(
            identifier=identifier,
            url=url,
            status_code=response.status_code,
            html=response.text,
        )

    def close(self):
        """Close the session"""
        if self.session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
