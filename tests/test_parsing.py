from playversion.utils.parsing import ParsedDocument, safe_text

from tests.pages import field_block, page


def test_find_all_returns_matches_in_document_order():
    doc = ParsedDocument(page(field_block("Updated", "May 1"), field_block("Size", "12M")))

    cells = doc.find_all(".htlgb")

    assert [ParsedDocument.text(c) for c in cells] == ["May 1", "12M"]


def test_find_all_and_find_first_scoped_to_element():
    doc = ParsedDocument(page(field_block("Updated", "May 1"), field_block("Size", "12M")))
    second = doc.find_all("div.hAyfc")[1]

    assert ParsedDocument.text(doc.find_all(".BgcNfc", within=second)) == "Size"
    assert ParsedDocument.text(doc.find_first(".htlgb", within=second)) == "12M"


def test_find_first_missing_is_none():
    doc = ParsedDocument(page("<p>nothing</p>"))

    assert doc.find_first(".htlgb") is None
    assert ParsedDocument.text(doc.find_first(".htlgb")) == ""


def test_text_trims_and_concatenates():
    doc = ParsedDocument(page('<span class="a">  1.</span><span class="a">2 </span>'))

    assert ParsedDocument.text(doc.find_all(".a")) == "1.2"
    assert ParsedDocument.text([]) == ""


def test_safe_text_collapses_whitespace_and_truncates():
    assert safe_text("  a \n\t b  ") == "a b"
    assert safe_text("abcdef", limit=3) == "abc"
