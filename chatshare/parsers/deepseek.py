"""DeepSeek share-page parser.

A share page lists the user's prompts and the model's replies as two
independent runs of elements.  They are paired purely by position: the
*i*-th question goes with the *i*-th answer, and anything past the shorter
run is dropped.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from chatshare.parsers.models import Conversation, Message, Role, ShareMarkers
from chatshare.parsers.render import format_as_displayable_html
from chatshare.parsers.text import normalize_whitespace, strip_trailing_whitespace

logger = logging.getLogger(__name__)

MODEL_TAG = "deepSeek"
CODE_SEPARATOR = "\n---\n"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _answer_text(block: Tag, selector: str) -> str:
    """Return the normalized, non-empty paragraphs of *block* joined by newlines."""
    parts: List[str] = []
    for para in block.select(selector):
        text = normalize_whitespace(para.get_text())
        if text:
            parts.append(text)
    return "\n".join(parts)


def _answer_code(block: Tag, selector: str) -> Optional[str]:
    """Return the code blocks of *block* joined by ``---`` lines, or ``None``.

    Only trailing whitespace is removed; indentation is kept verbatim.
    """
    parts: List[str] = []
    for pre in block.select(selector):
        code = strip_trailing_whitespace(pre.get_text())
        if code:
            parts.append(code)
    return CODE_SEPARATOR.join(parts) if parts else None


def _utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. ``2025-01-02T03:04:05.678Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_messages(html: str, markers: Optional[ShareMarkers] = None) -> List[Message]:
    """Pull the question/answer sequence out of a share page.

    Empty questions are skipped, but their answer is still emitted.  Answers
    are always emitted, even when they have neither text nor code.

    Args:
        html: Raw HTML of the saved share page.
        markers: Selectors to locate the conversation; defaults to the
            configured DeepSeek markers.

    Returns:
        Messages in page order.
    """
    markers = markers or ShareMarkers.from_settings()
    soup = BeautifulSoup(html, "html5lib")

    questions = soup.select(markers.question)
    answers = soup.select(markers.answer)
    total_pairs = min(len(questions), len(answers))

    if len(questions) != len(answers):
        logger.debug(
            "Unbalanced share page: %d questions, %d answers; keeping %d pairs",
            len(questions), len(answers), total_pairs,
        )

    messages: List[Message] = []
    for question, answer in zip(questions, answers):
        question_text = normalize_whitespace(question.get_text())
        if question_text:
            messages.append(Message(role=Role.QUESTION, content=question_text))

        messages.append(
            Message(
                role=Role.ANSWER,
                content=_answer_text(answer, markers.paragraph),
                code=_answer_code(answer, markers.code_block),
            )
        )

    logger.debug("Extracted %d messages from %d pairs", len(messages), total_pairs)
    return messages


def parse_deepseek(html: str, markers: Optional[ShareMarkers] = None) -> Conversation:
    """Extract a DeepSeek share page into a :class:`Conversation`.

    The conversation's ``content`` is a standalone HTML rendering of the
    extracted messages.  Parser errors are not caught.
    """
    messages = extract_messages(html, markers)
    return Conversation(
        model=MODEL_TAG,
        content=format_as_displayable_html(messages),
        scraped_at=_utc_timestamp(),
        source_html_bytes=len(html.encode("utf-8")),
    )
