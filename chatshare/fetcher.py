"""Share-page fetcher with a Playwright fallback for client-rendered pages."""

from __future__ import annotations

import logging

import httpx
from bs4 import BeautifulSoup

from chatshare.config import settings

logger = logging.getLogger(__name__)


def _lacks_conversation(html: str) -> bool:
    """Return ``True`` when *html* has no question or answer markup yet.

    Share pages are rendered client-side, so the first HTTP response is usually
    a bare application shell.
    """
    soup = BeautifulSoup(html, "html5lib")
    has_question = soup.select_one(settings.deepseek_question_selector) is not None
    has_answer = soup.select_one(settings.deepseek_answer_selector) is not None
    return not (has_question or has_answer)


def _fetch_with_playwright(url: str) -> str:
    """Render *url* in headless Chromium and return the resulting HTML.

    Playwright is imported lazily so it is only needed when a shell page is hit.
    """
    from playwright.sync_api import sync_playwright  # noqa: PLC0415

    with sync_playwright() as pw:
        browser = pw.chromium.launch(headless=True)
        try:
            page = browser.new_page(user_agent=settings.user_agent)
            page.goto(
                url,
                timeout=int(settings.request_timeout * 1000),
                wait_until="domcontentloaded",
            )
            page.wait_for_selector(
                settings.deepseek_answer_selector,
                timeout=int(settings.request_timeout * 1000),
            )
            html = page.content()
        finally:
            browser.close()

    return html


def fetch_share_page(url: str) -> str:
    """Fetch the share page at *url* and return its HTML.

    Falls back to a headless browser when the plain HTTP response carries no
    question or answer blocks.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
    """
    with httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as client:
        response = client.get(url)
        response.raise_for_status()
        html = response.text

    if _lacks_conversation(html):
        logger.info("%s has no conversation markup; rendering with Playwright", url)
        html = _fetch_with_playwright(url)

    return html
