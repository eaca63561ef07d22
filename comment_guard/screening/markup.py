"""
Markup stripping for display-safe comment text.

Keeps text content, drops every tag, comment and the bodies of
script/style elements, then normalises whitespace and control characters.
Output is HTML-escaped text, safe to interpolate as element content.

This only collects visible text. It is not an allow-list HTML sanitizer:
no markup survives, and the escaped output (quotes left as is) must not
be placed inside an attribute value.
"""
import html
import re
from html.parser import HTMLParser
from typing import Any, List

_DROPPED_CONTENT_TAGS = frozenset({"script", "style", "template", "noscript", "iframe", "object"})
_WHITESPACE_RE = re.compile(r"\s+")
_CONTROL_CHARS_RE = re.compile(r"[\u0000-\u001F\u007F-\u009F]")


class _TextCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.chunks: List[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag, attrs):  # noqa: ANN001
        if tag in _DROPPED_CONTENT_TAGS:
            self._skip_depth += 1

    def handle_endtag(self, tag):  # noqa: ANN001
        if tag in _DROPPED_CONTENT_TAGS and self._skip_depth > 0:
            self._skip_depth -= 1

    def handle_data(self, data):  # noqa: ANN001
        if self._skip_depth == 0:
            self.chunks.append(data)


def strip_markup(content: Any) -> str:
    """Return the visible text of *content* ("" for non-strings or empty input)."""
    if not content or not isinstance(content, str):
        return ""

    collector = _TextCollector()
    collector.feed(content)
    collector.close()

    text = html.escape("".join(collector.chunks), quote=False)
    text = _WHITESPACE_RE.sub(" ", text)
    text = _CONTROL_CHARS_RE.sub("", text)
    return text.strip()
