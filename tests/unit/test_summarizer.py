"""Tests for summary prompt construction and the chat-model wrapper."""
from types import SimpleNamespace
from unittest.mock import MagicMock

from feedback_aggregator.api.summarizer import (
    FeedbackSummarizer,
    build_feedback_lines,
    build_summary_prompt,
)

ROWS = [
    {"source": "Discord", "sentiment": "negative", "content": "Dashboard keeps timing out."},
    {"source": "Email", "sentiment": "positive", "content": "Great support response time."},
]


def test_one_line_per_row():
    assert build_feedback_lines(ROWS) == (
        "- [Discord] (negative) Dashboard keeps timing out.\n"
        "- [Email] (positive) Great support response time."
    )


def test_prompt_mentions_count_window_and_items():
    prompt = build_summary_prompt(ROWS, days=7)

    assert "following 2 feedback items from the past 7 days" in prompt
    assert "top 3-5 themes" in prompt
    assert "- [Email] (positive) Great support response time." in prompt
    assert prompt.rstrip().endswith("Summary:")


def test_model_is_not_built_until_needed():
    summarizer = FeedbackSummarizer(model_name="test-model", temperature=0)
    assert summarizer._model is None
    assert summarizer.model_name == "test-model"


def test_summarize_returns_stripped_text():
    summarizer = FeedbackSummarizer(model_name="test-model", temperature=0)
    summarizer._model = MagicMock()
    summarizer._model.invoke.return_value = SimpleNamespace(content="  Mostly positive.\n")

    assert summarizer.summarize("prompt text") == "Mostly positive."
    summarizer._model.invoke.assert_called_once_with("prompt text")
