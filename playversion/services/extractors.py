"""
Version extraction strategies for Play Store pages.

Every strategy takes a ParsedDocument and returns the raw version text, or
None when the page does not carry the signal it looks for. None is a normal
outcome here; deciding that a page is unparseable is left to the caller.
"""

from __future__ import annotations
import json
import logging
from typing import Any, Callable, Iterable, Optional

from playversion.config import settings
from playversion.utils.parsing import ParsedDocument, safe_text

logger = logging.getLogger(__name__)

Extractor = Callable[[ParsedDocument], Optional[str]]

VERSION_FIELDS = ("softwareVersion", "version")


def _candidate_records(data: Any) -> Iterable[dict]:
    # ld+json holds either one record or a list of them
    nodes = data if isinstance(data, list) else [data]
    return [node for node in nodes if isinstance(node, dict)]


def _clean(value: Any) -> Optional[str]:
    # Falsy and boolean values carry no version
    if not value or isinstance(value, (bool, dict, list)):
        return None
    text = str(value).strip()
    return text or None


def extract_from_structured_data(document: ParsedDocument) -> Optional[str]:
    """Read softwareVersion / version from the page's ld+json blocks."""
    for script in document.find_all(settings.LD_JSON_SELECTOR):
        raw = ParsedDocument.text(script)
        if not raw:
            continue
        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as e:
            logger.debug(f"Skipping malformed ld+json block ({e}): {safe_text(raw, 120)}")
            continue

        for record in _candidate_records(data):
            for field in VERSION_FIELDS:
                value = _clean(record.get(field))
                if value:
                    return value
    return None


def is_version_label(label: str) -> bool:
    if label in settings.CURRENT_VERSION_LABELS:
        return True
    return "version" in label.lower()


def extract_from_labeled_field(document: ParsedDocument) -> Optional[str]:
    """Find the "Current Version" row of the additional information table."""
    for block in document.find_all(settings.FIELD_BLOCK_SELECTOR):
        label = ParsedDocument.text(document.find_all(settings.FIELD_LABEL_SELECTOR, within=block))
        if not label:
            continue
        if is_version_label(label):
            value = ParsedDocument.text(document.find_first(settings.FIELD_VALUE_SELECTOR, within=block))
            if value:
                return value
    return None


def extract_from_position(document: ParsedDocument, index: Optional[int] = None) -> Optional[str]:
    """
    Last resort: take the value cell at a fixed position on the page.

    Nothing ties the cell at this index to the version. It matched the
    layout the store served when the index was chosen and returns whatever
    sits there now.
    """
    if index is None:
        index = settings.POSITIONAL_FALLBACK_INDEX
    cells = document.find_all(settings.FIELD_VALUE_SELECTOR)
    if index < 0 or index >= len(cells):
        return None
    return ParsedDocument.text(cells[index]) or None


# Ordered from most to least structurally reliable
DEFAULT_EXTRACTORS: tuple[tuple[str, Extractor], ...] = (
    ("structured_data", extract_from_structured_data),
    ("labeled_field", extract_from_labeled_field),
    ("positional_fallback", extract_from_position),
)
