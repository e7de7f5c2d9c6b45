from __future__ import annotations

from casebrowser.catalog.highlight import Segment, highlight, highlight_segments, render_html


def test_highlight_returns_text_unchanged_for_blank_term() -> None:
    for text in ["", "plain text", "<b>M&A</b> (EU)", "  spaced  "]:
        assert highlight(text, "") == text
        assert highlight(text, "   ") == text


def test_highlight_wraps_every_case_insensitive_match() -> None:
    rendered = highlight("Merger control: the merger was cleared. MERGER!", "merger")
    assert rendered == (
        "<mark>Merger</mark> control: the <mark>merger</mark> was cleared. <mark>MERGER</mark>!"
    )


def test_highlight_treats_metacharacters_literally() -> None:
    text = "Review of M&A (EU) cases; M&A EU is different. a.b+c? [x]"
    assert highlight(text, "M&A (EU)") == "Review of <mark>M&A (EU)</mark> cases; M&A EU is different. a.b+c? [x]"
    assert highlight(text, "a.b+c?") == "Review of M&A (EU) cases; M&A EU is different. <mark>a.b+c?</mark> [x]"
    # Unbalanced patterns must not raise
    assert highlight(text, "[x") == "Review of M&A (EU) cases; M&A EU is different. a.b+c? <mark>[x</mark>]"
    assert highlight(text, "(") == "Review of M&A <mark>(</mark>EU) cases; M&A EU is different. a.b+c? [x]"
    assert highlight(text, "\\") == text


def test_highlight_skips_falsy_text() -> None:
    assert highlight(None, "merger") == ""
    assert highlight("", "merger") == ""
    assert highlight_segments(None, "merger") == []


def test_highlight_segments_partition_text() -> None:
    segments = highlight_segments("abcABCabd", "abc")
    assert segments == [
        Segment("abc", emphasized=True),
        Segment("ABC", emphasized=True),
        Segment("abd"),
    ]
    assert "".join(s.text for s in segments) == "abcABCabd"


def test_render_html_escapes_record_text() -> None:
    text = "<script>alert('x')</script> Merger & Acquisitions"
    rendered = render_html(text, "merger & acq")
    assert "<script>" not in rendered
    assert "&lt;script&gt;" in rendered
    assert "<mark>Merger &amp; Acq</mark>uisitions" in rendered
