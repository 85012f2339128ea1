"""Data models for the share-page parsers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from chatshare.config import settings


class Role(str, Enum):
    """Who produced a message in a shared conversation."""

    QUESTION = "Question"
    ANSWER = "Answer"


@dataclass
class Message:
    """One extracted question or answer.

    ``code`` is only ever set on answers, and is ``None`` (not ``""``) when
    the answer contained no code blocks.
    """

    role: Role
    content: str
    code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"role": self.role.value, "content": self.content}
        if self.code is not None:
            data["code"] = self.code
        return data


@dataclass(frozen=True)
class Conversation:
    """The result of parsing a single share page."""

    model: str
    content: str
    scraped_at: str
    source_html_bytes: int

    def to_dict(self) -> Dict[str, Any]:
        """Return the conversation keyed the way downstream consumers expect."""
        return {
            "model": self.model,
            "content": self.content,
            "scrapedAt": self.scraped_at,
            "sourceHtmlBytes": self.source_html_bytes,
        }


@dataclass(frozen=True)
class ShareMarkers:
    """CSS selectors that locate the conversation inside a share page.

    These track the platform's markup and change whenever it ships a new
    build, so they are configuration rather than code.
    """

    question: str = "div.fbb737a4"
    answer: str = "div.ds-markdown.ds-markdown--block"
    paragraph: str = "p.ds-markdown-paragraph"
    code_block: str = "div.md-code-block pre"

    @classmethod
    def from_settings(cls) -> "ShareMarkers":
        return cls(
            question=settings.deepseek_question_selector,
            answer=settings.deepseek_answer_selector,
            paragraph=settings.deepseek_paragraph_selector,
            code_block=settings.deepseek_code_selector,
        )
