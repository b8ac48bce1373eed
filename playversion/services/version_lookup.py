from typing import Optional, Sequence, Tuple
import logging

from playversion.config import settings
from playversion.exceptions import ParseFailed
from playversion.services.extractors import DEFAULT_EXTRACTORS, Extractor
from playversion.services.fetcher import DocumentFetcher, FetchedDocument
from playversion.utils.parsing import ParsedDocument

logger = logging.getLogger(__name__)


class VersionLookup:
    def __init__(
            self,
            fetcher: Optional[DocumentFetcher] = None,
            extractors: Sequence[Tuple[str, Extractor]] = DEFAULT_EXTRACTORS
    ):
        self.fetcher = fetcher or DocumentFetcher()
        self.extractors = tuple(extractors)

    def normalize_version(self, version: str) -> str:
        """Map the "Varies with device" sentinel to the placeholder version"""
        version = version.strip()
        if version == settings.VARIES_WITH_DEVICE:
            return settings.VERSION_PLACEHOLDER
        return version

    def extract_version(self, document: FetchedDocument) -> str:
        """
        Run the extraction strategies in order and return the first hit

        Args:
            document: Store page returned by the fetcher

        Returns:
            str: Normalized version string

        Raises:
            ParseFailed: no strategy found a version on the page
        """
        parsed = ParsedDocument(document.html)

        for name, extractor in self.extractors:
            version = extractor(parsed)
            if version:
                logger.info(f"Resolved version of {document.identifier} via {name}: {version}")
                return self.normalize_version(version)
            logger.debug(f"Strategy {name} found no version for {document.identifier}")

        raise ParseFailed("Version not found (page layout may have changed)", document.identifier)

    def lookup_version(self, identifier: str) -> str:
        """Fetch the store page for an application and extract its current version"""
        logger.info(f"Looking up version for: {identifier}")
        document = self.fetcher.fetch(identifier)
        return self.extract_version(document)

    def close(self):
        self.fetcher.close()
