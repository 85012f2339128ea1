"""Runtime settings for chatshare.

Every field reads an environment variable when [`]Settings[`] is built, so a
[`].env[`] file next to the package (or the real environment) can retarget the
fetcher or swap the DeepSeek selectors when the share-page markup changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "CHATSHARE_USER_AGENT",
            "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/124.0 Safari/537.36",
        )
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("CHATSHARE_LOG_LEVEL", "WARNING")
    )

    # ------------------------------------------------------------------
    # DeepSeek share-page markers (CSS selectors)
    # ------------------------------------------------------------------
    deepseek_question_selector: str = field(
        default_factory=lambda: os.environ.get(
            "DEEPSEEK_QUESTION_SELECTOR", "div.fbb737a4"
        )
    )
    deepseek_answer_selector: str = field(
        default_factory=lambda: os.environ.get(
            "DEEPSEEK_ANSWER_SELECTOR", "div.ds-markdown.ds-markdown--block"
        )
    )
    deepseek_paragraph_selector: str = field(
        default_factory=lambda: os.environ.get(
            "DEEPSEEK_PARAGRAPH_SELECTOR", "p.ds-markdown-paragraph"
        )
    )
    deepseek_code_selector: str = field(
        default_factory=lambda: os.environ.get(
            "DEEPSEEK_CODE_SELECTOR", "div.md-code-block pre"
        )
    )


# Module-level singleton — import this everywhere:
#   from chatshare.config import settings
settings = Settings()
