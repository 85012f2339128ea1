"""Parsers package — share-page extraction & rendering."""

from chatshare.parsers.deepseek import extract_messages, parse_deepseek
from chatshare.parsers.models import Conversation, Message, Role, ShareMarkers
from chatshare.parsers.render import format_as_displayable_html

__all__ = [
    "parse_deepseek",
    "extract_messages",
    "format_as_displayable_html",
    "Conversation",
    "Message",
    "Role",
    "ShareMarkers",
]
