"""Builders for minimal Play Store pages used across the tests."""

import json

from playversion.services.fetcher import FetchedDocument


def ld_json(data) -> str:
    return f'<script type="application/ld+json">{json.dumps(data)}</script>'


def field_block(label: str, value: str) -> str:
    return (
        '<div class="hAyfc">'
        f'<div class="BgcNfc">{label}</div>'
        f'<span class="htlgb">{value}</span>'
        '</div>'
    )


def page(*parts: str) -> str:
    return "<html><head></head><body>" + "".join(parts) + "</body></html>"


def document(html: str, identifier: str = "com.example.app", status_code: int = 200) -> FetchedDocument:
    return FetchedDocument(
        identifier=identifier,
        url=f"https://play.google.com/store/apps/details?id={identifier}",
        status_code=status_code,
        html=html,
    )
