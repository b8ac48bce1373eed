from __future__ import annotations
import re
from typing import Iterable, Optional, Union
from bs4 import BeautifulSoup, Tag

WHITESPACE_RE = re.compile(r"\s+")


def safe_text(s: str, limit: int = 400) -> str:
    s = WHITESPACE_RE.sub(" ", s).strip()
    return s[:limit]


class ParsedDocument:
    """
    Read-only view over a parsed store page.

    Extractors only query the page through CSS selectors and trimmed text,
    so the underlying BeautifulSoup tree stays private to this class.
    """

    def __init__(self, html: Union[str, bytes], parser: str = "lxml"):
        self._soup = BeautifulSoup(html, parser)

    def find_all(self, selector: str, within: Optional[Tag] = None) -> list[Tag]:
        root = within if within is not None else self._soup
        return root.select(selector)

    def find_first(self, selector: str, within: Optional[Tag] = None) -> Optional[Tag]:
        root = within if within is not None else self._soup
        return root.select_one(selector)

    @staticmethod
    def text(elements: Union[Tag, Iterable[Tag], None]) -> str:
        """Concatenated text of one or more elements, trimmed. Empty for None."""
        if elements is None:
            return ""
        if isinstance(elements, Tag):
            return elements.get_text().strip()
        return "".join(el.get_text() for el in elements).strip()
