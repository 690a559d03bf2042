"""Test snippet generation."""

from datetime import date

import pytest

from boolsearch.document import Document
from boolsearch.search.snippet import choose_snippet_term, generate_snippet


def make_doc(content):
    return Document(1, "T", content, date(2024, 1, 1))


def strip_markers(snippet, ellipsis="..."):
    if snippet.startswith(ellipsis):
        snippet = snippet[len(ellipsis):]
    if snippet.endswith(ellipsis):
        snippet = snippet[: -len(ellipsis)]
    return snippet


class TestChooseSnippetTerm:
    """Test snippet term selection."""

    def test_prefers_first_phrase(self):
        assert choose_snippet_term('java "Search Engine" "other one"') == "search engine"

    def test_first_non_operator_term(self):
        assert choose_snippet_term("NOT Java OR python") == "java"

    def test_falls_back_to_raw_query(self):
        assert choose_snippet_term("  !!!  ") == "!!!"


class TestGenerateSnippet:
    """Test snippet windows."""

    def test_absent_term_short_content(self):
        doc = make_doc("short text")
        assert generate_snippet(doc, "missing", 120) == "short text"

    def test_absent_term_long_content(self):
        doc = make_doc("a" * 200)
        assert generate_snippet(doc, "missing", 120) == "a" * 120 + "..."

    def test_match_near_start_has_no_leading_marker(self):
        doc = make_doc("needle " + "x" * 200)
        snippet = generate_snippet(doc, "needle", 120)
        assert snippet.startswith("needle")
        assert snippet.endswith("...")

    def test_match_in_middle(self):
        content = "x" * 100 + "needle" + "y" * 100
        snippet = generate_snippet(make_doc(content), "needle", 120)
        assert snippet == "..." + content[70:176] + "..."

    def test_window_reaches_end(self):
        content = "x" * 100 + "needle end"
        snippet = generate_snippet(make_doc(content), "needle", 120)
        assert snippet == "..." + content[70:]

    def test_case_insensitive_match_keeps_original_case(self):
        snippet = generate_snippet(make_doc("Hello NEEDLE world"), "Needle", 120)
        assert snippet == "Hello NEEDLE world"

    def test_custom_window(self):
        content = "0123456789abcdef"
        snippet = generate_snippet(
            make_doc(content), "89", 120, before=2, after=1, ellipsis="~"
        )
        assert snippet == "~6789a~"

    @pytest.mark.parametrize("offset", [0, 10, 40, 95, 150, 194])
    def test_window_is_excerpt_containing_match(self, offset):
        """
        The excerpt between the markers is a slice of the content and holds
        the match. The markers themselves may push the result past the
        content length, so only the excerpt is bounded by it.
        """
        content = "z" * offset + "Needle" + "z" * (200 - offset)
        snippet = generate_snippet(make_doc(content), "needle", 120)
        body = strip_markers(snippet)
        assert body in content
        assert len(body) <= len(content)
        assert "needle" in body.lower()

    def test_leading_excerpt_adds_marker_past_content_length(self):
        """A missing term on 121 chars yields 120 chars plus the marker."""
        snippet = generate_snippet(make_doc("a" * 121), "missing", 120)
        assert len(snippet) == 123
        assert snippet == "a" * 120 + "..."

    def test_length_changing_lowercase_before_match(self):
        """Offsets come from the original content when lower() changes length."""
        content = "\u0130" * 40 + " needle " + "y" * 150
        doc = make_doc(content)
        assert len(doc.content_lower) != len(content)

        snippet = generate_snippet(doc, "needle", 120)
        assert "needle" in snippet
        assert snippet == "..." + content[11:117] + "..."

    def test_negative_max_length_rejected(self):
        with pytest.raises(ValueError):
            generate_snippet(make_doc("text"), "t", -1)
