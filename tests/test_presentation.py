"""Tests for formatters and presenters."""

import io

from crosscheck.aggregator import build_summary
from crosscheck.data import Claim, ClaimReview, FactCheckSummary, SearchItem, SourceId
from crosscheck.presentation import (
    ConsolePresenter,
    RecordingPresenter,
    format_claim_summary,
    format_search_results,
    format_text_response,
    html_to_text,
    status_html,
)


class TestFormatters:
    def test_text_newlines_become_breaks(self) -> None:
        assert format_text_response("one\ntwo") == "one<br />two"

    def test_text_is_escaped(self) -> None:
        assert format_text_response("<b>a & b</b>") == "&lt;b&gt;a &amp; b&lt;/b&gt;"

    def test_empty_text(self) -> None:
        assert format_text_response("") == '<span class="status">No response.</span>'

    def test_search_results_list(self) -> None:
        items = [
            SearchItem(title="First", link="https://a.example", snippet="snip 1"),
            SearchItem(title="Second", link="https://b.example", snippet="snip 2"),
        ]
        html = format_search_results(items)
        assert html.startswith("<ul>") and html.endswith("</ul>")
        assert html.count("<li>") == 2
        assert '<a href="https://a.example" target="_blank" rel="noreferrer">First</a>' in html
        assert html.index("First") < html.index("Second")

    def test_no_search_results(self) -> None:
        assert format_search_results([]) == '<span class="status">No results.</span>'

    def test_claim_summary(self) -> None:
        summary = build_summary(
            [Claim(text="claim", review=ClaimReview(rating="False", publisher_name="AFP"))]
        )
        html = format_claim_summary(summary)
        assert "claim" in html
        assert "<strong>False</strong>" in html
        assert "(AFP)" in html

    def test_claim_summary_without_claims(self) -> None:
        assert format_claim_summary(build_summary([])) == status_html("No claims found.")

    def test_html_to_text(self) -> None:
        assert html_to_text("a<br />b") == "a\nb"
        assert html_to_text(status_html("No results.")) == "No results."
        text = html_to_text(format_search_results([SearchItem(title="T & U", snippet="s")]))
        assert text == "- T & U\ns"


class TestRecordingPresenter:
    def test_records_panels_and_events(self) -> None:
        presenter = RecordingPresenter()
        presenter.set_input_enabled(False)
        presenter.show_status(SourceId.GEMINI, "Loading Gemini response...")
        presenter.show_content(SourceId.GEMINI, "answer")
        presenter.show_status(SourceId.GOOGLE, "boom", error=True)
        presenter.set_input_enabled(True)

        assert presenter.input_enabled
        assert presenter.panels[SourceId.GEMINI].kind == "content"
        assert presenter.panels[SourceId.GEMINI].text == "answer"
        assert presenter.panels[SourceId.GOOGLE].kind == "error"
        assert presenter.events == [
            ("input", "disabled"),
            ("status", "gemini"),
            ("content", "gemini"),
            ("error", "google"),
            ("input", "enabled"),
        ]

    def test_fact_check_blocks(self) -> None:
        presenter = RecordingPresenter()
        summary = FactCheckSummary(truth_score=40, coverage_score="20%")
        presenter.show_fact_check(summary)

        assert presenter.fact_check.truth_score == "40%"
        assert presenter.fact_check.coverage_score == "20%"
        assert presenter.fact_check.summary == summary

        presenter.show_fact_check_status("Fact check unavailable.", error=True)
        assert presenter.fact_check.truth_score == "--"
        assert presenter.fact_check.coverage_score == "--"
        assert presenter.fact_check.claims == "Fact check unavailable."
        assert presenter.events[-1] == ("fact_check_error", "fact-check")


class TestConsolePresenter:
    def test_writes_content_and_errors(self) -> None:
        stream = io.StringIO()
        presenter = ConsolePresenter(stream)

        presenter.show_status(SourceId.CLAUDE, "Loading Claude response...")
        presenter.show_content(SourceId.CLAUDE, "one<br />two")
        presenter.show_status(SourceId.CHATGPT, "ChatGPT request failed.", error=True)

        output = stream.getvalue()
        assert "Loading Claude response..." not in output
        assert "== Claude ==\none\ntwo" in output
        assert "== ChatGPT ==\n[error] ChatGPT request failed." in output

    def test_writes_fact_check(self) -> None:
        stream = io.StringIO()
        presenter = ConsolePresenter(stream)
        summary = build_summary(
            [Claim(text="c", review=ClaimReview(rating="Mostly True", publisher_name="AP"))]
        )

        presenter.show_fact_check_status("Fetching fact checks...")
        presenter.show_fact_check(summary)

        output = stream.getvalue()
        assert "Fetching fact checks..." not in output
        assert "Truth score: 85%" in output
        assert "Coverage score: 10%" in output
        assert "- c (Mostly True, AP)" in output

    def test_writes_fact_check_error(self) -> None:
        stream = io.StringIO()
        ConsolePresenter(stream).show_fact_check_status("Fact check unavailable.", error=True)
        assert "Truth score: --" in stream.getvalue()
        assert "Fact check unavailable." in stream.getvalue()
