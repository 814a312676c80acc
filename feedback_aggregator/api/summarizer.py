"""
Feedback Summarizer — hosted chat model
=======================================

Turns a batch of recent feedback rows into a short natural-language synthesis
plus the top themes.

Flow
----
1. `build_feedback_lines` renders each row as ``- [source] (sentiment) content``.
2. `SUMMARY_PROMPT` (a LangChain `PromptTemplate`) wraps those lines with the
   instruction.
3. `FeedbackSummarizer.summarize` sends the prompt to `ChatOpenAI` and returns
   the reply text untouched. No structure is parsed out of it.

Errors raised by the model client propagate to the caller. No retries.
"""

import logging
from typing import Iterable

from langchain_core.prompts import PromptTemplate
from langchain_openai import ChatOpenAI

from feedback_aggregator.database.config.config import settings

logger = logging.getLogger(__name__)

SUMMARY_PROMPT = PromptTemplate.from_template(
    """You are a product manager analysing customer feedback. Based on the following {count} feedback items from the past {days} days, provide a brief summary (2-3 sentences) of the overall sentiment and key themes. Then list the top 3-5 themes with approximate counts.

Feedback:
{feedback}

Summary:"""
)
"""Prompt sent to the chat model; fills `count`, `days` and `feedback`."""


def build_feedback_lines(rows: Iterable[dict]) -> str:
    """
    Render feedback rows one per line.

    Args:
        rows: Mappings with `source`, `sentiment` and `content` keys.

    Returns:
        str: Newline-joined ``- [source] (sentiment) content`` lines.
    """
    return "\n".join(f"- [{row['source']}] ({row['sentiment']}) {row['content']}" for row in rows)


def build_summary_prompt(rows: Iterable[dict], days: int) -> str:
    rows = list(rows)
    return SUMMARY_PROMPT.format(count=len(rows), days=days, feedback=build_feedback_lines(rows))


class FeedbackSummarizer:
    """
    Thin wrapper around the hosted chat model.

    The `ChatOpenAI` client is built on first use, so constructing a
    summarizer never touches credentials or the network.
    """

    def __init__(self, model_name: str | None = None, temperature: float | None = None):
        self.model_name = model_name or settings.OPEN_AI_MODEL
        self.temperature = settings.SUMMARY_TEMPERATURE if temperature is None else temperature
        self._model = None

    @property
    def model(self) -> ChatOpenAI:
        if self._model is None:
            self._model = ChatOpenAI(
                model=self.model_name,
                api_key=settings.API_KEY,
                base_url=settings.LLM_BASE_URL,
                temperature=self.temperature,
            )
        return self._model

    def summarize(self, prompt: str) -> str:
        """
        Send `prompt` to the chat model and return its reply as plain text.

        Args:
            prompt (str): Fully rendered summary prompt.

        Returns:
            str: The model's reply, stripped of surrounding whitespace.
        """
        logger.info("Requesting feedback summary from %s", self.model_name)
        response = self.model.invoke(prompt)
        return str(response.content).strip()
