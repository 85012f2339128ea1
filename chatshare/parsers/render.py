"""Render extracted messages as a small standalone HTML page."""

from __future__ import annotations

from typing import List

from chatshare.parsers.models import Message

_PAGE_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Conversation from {source_name}</title>
  <style>
    body {{ font-family: Arial, sans-serif; padding: 2em; line-height: 1.6; background: #f9f9f9; }}
    .message {{ margin-bottom: 2em; }}
    .Question {{ color: #0b5394; font-weight: bold; }}
    .Answer {{ color: #38761d; font-weight: bold; }}
    pre {{ background: #eee; padding: 1em; border-radius: 5px; overflow-x: auto; }}
  </style>
</head>
<body>
  <h1>Parsed Conversation from {source_name}</h1>
  {messages}
</body>
</html>
"""


def _render_message(msg: Message) -> str:
    role = msg.role.value
    content = msg.content.replace("\n", "<br>")
    code = f"<pre>{msg.code}</pre>" if msg.code is not None else ""
    return (
        "\n"
        '    <div class="message">\n'
        f'      <div class="{role}">{role.upper()}:</div>\n'
        f"      <div>{content}</div>\n"
        f"      {code}\n"
        "    </div>\n"
        "  "
    )


def format_as_displayable_html(messages: List[Message], source_name: str = "DeepSeek") -> str:
    """Return a complete HTML document showing *messages* in order.

    Message content and code are inserted as-is; the caller is responsible
    for anything that needs escaping.
    """
    blocks = "\n".join(_render_message(msg) for msg in messages)
    return _PAGE_TEMPLATE.format(source_name=source_name, messages=blocks)
