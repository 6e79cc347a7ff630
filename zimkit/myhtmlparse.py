"""HTML parser that extracts the title, description, keywords and plain text of a page."""

from __future__ import annotations

import re

from .htmlparse import HtmlParser, decode_entities

WHITESPACE = " \t\n\r"

_NOT_WHITESPACE = re.compile(r"[^ \t\n\r]")
_WHITESPACE = re.compile(r"[ \t\n\r]")
_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")
_FLOAT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_CHARSET_STOP = frozenset(';()<>@,:\\"/[]?={}')

# Tags that separate words when opened or closed.
_SPACING_OPEN = frozenset({
    "address", "blockquote", "br", "center", "dd", "dir", "div", "dl", "dt",
    "embed", "fieldset", "form", "iframe", "img", "isindex", "input", "keygen",
    "legend", "li", "listing", "marquee", "menu", "multicol", "ol", "option",
    "p", "pre", "plaintext", "q", "select", "table", "td", "textarea", "th",
    "ul", "xmp",
})
_SPACING_CLOSE = frozenset({
    "address", "blockquote", "br", "center", "dd", "dir", "div", "dl", "dt",
    "fieldset", "form", "iframe", "legend", "li", "listing", "marquee", "menu",
    "ol", "option", "p", "pre", "q", "select", "table", "td", "textarea", "th",
    "ul", "xmp",
})


class CharsetChanged(Exception):
    """The document declares a charset other than the one it was parsed with."""

    def __init__(self, charset: str):
        super().__init__(charset)
        self.charset = charset


class StopParsing(Exception):
    """Parsing ends early: the body is closed or indexing is forbidden."""


def _lower(text: str) -> str:
    return text.translate(_LOWER)


def _first_not_ws(text: str, pos: int) -> int:
    match = _NOT_WHITESPACE.search(text, pos)
    return match.start() if match else -1


def _first_ws(text: str, pos: int) -> int:
    match = _WHITESPACE.search(text, pos)
    return match.start() if match else -1


def _parse_float_prefix(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _is_heading_or_rule(tag: str) -> bool:
    return len(tag) == 2 and tag[0] == "h" and tag[1] in "r123456"


class MyHtmlParser(HtmlParser):
    """Collects the text of a page and the metadata useful for indexing it."""

    def __init__(self):
        super().__init__()
        self.reset()

    def reset(self) -> None:
        """Forget everything gathered so far."""
        self.in_script_tag = False
        self.in_style_tag = False
        self.pending_space = False
        self.indexing_allowed = True
        self.charset_from_meta = False
        self.latitude = 0.0
        self.longitude = 0.0
        self.has_geo_position = False
        self.title = ""
        self.sample = ""
        self.keywords = ""
        self.dump = ""

    def parse_html(self, text: str, charset: str = "", charset_from_meta: bool = False) -> None:
        """Parse ``text`` assumed to be in ``charset``.

        Raises CharsetChanged when the page declares another charset (unless
        ``charset_from_meta`` says the current one already came from the page)
        and StopParsing when the body ends or indexing is forbidden.
        """
        self.charset = charset
        self.charset_from_meta = charset_from_meta
        super().parse_html(text)

    def process_text(self, text: str) -> None:
        if not text or self.in_script_tag or self.in_style_tag:
            return
        b = _first_not_ws(text, 0)
        if b != 0:
            self.pending_space = True
        while b != -1:
            if self.pending_space and self.dump:
                self.dump += " "
            e = _first_ws(text, b)
            self.pending_space = e != -1
            if not self.pending_space:
                self.dump += text[b:]
                return
            self.dump += text[b:e]
            b = _first_not_ws(text, e + 1)

    def opening_tag(self, tag: str) -> None:
        if not tag:
            return
        if tag == "body":
            self.dump = ""
        elif tag == "meta":
            self._meta_tag()
        elif tag == "style":
            self.in_style_tag = True
        elif tag == "script":
            self.in_script_tag = True
        elif tag in _SPACING_OPEN or _is_heading_or_rule(tag):
            self.pending_space = True

    def closing_tag(self, tag: str) -> None:
        if not tag:
            return
        if tag == "body":
            raise StopParsing()
        if tag == "style":
            self.in_style_tag = False
        elif tag == "script":
            self.in_script_tag = False
        elif tag == "title":
            if not self.title:
                self.title, self.dump = self.dump, ""
        elif tag in _SPACING_CLOSE or _is_heading_or_rule(tag):
            self.pending_space = True

    def _meta_tag(self) -> None:
        content = self.get_parameter("content")
        if content is not None:
            name = self.get_parameter("name")
            if name is not None:
                self._named_meta(_lower(name), content)
                return
            if self.charset_from_meta:
                return
            header = self.get_parameter("http-equiv")
            if header is not None and _lower(header) == "content-type":
                new_charset = self._charset_from_content_type(_lower(content))
                if new_charset is not None and new_charset != self.charset:
                    raise CharsetChanged(new_charset)
            return
        if self.charset_from_meta:
            return
        declared = self.get_parameter("charset")
        if declared is not None:
            new_charset = _lower(declared)
            if new_charset != self.charset:
                raise CharsetChanged(new_charset)

    def _named_meta(self, name: str, content: str) -> None:
        if name == "description":
            if not self.sample:
                self.sample = decode_entities(content)
        elif name == "keywords":
            if self.keywords:
                self.keywords += " "
            self.keywords += decode_entities(content)
        elif name == "robots":
            content = _lower(decode_entities(content))
            if "none" in content or "noindex" in content:
                self.indexing_allowed = False
                raise StopParsing()
        elif name == "geo.position":
            sep = content.find(";")
            if sep >= 0:
                self.latitude = _parse_float_prefix(content[:sep])
                self.longitude = _parse_float_prefix(content[sep + 1:])
                self.has_geo_position = True

    @staticmethod
    def _charset_from_content_type(content: str) -> str | None:
        start = content.find("charset=")
        if start < 0:
            return None
        start += 8
        if start == len(content):
            return None
        end = start
        if content[start] != '"':
            while end < len(content):
                ch = content[end]
                if ord(ch) <= 32 or ord(ch) >= 127 or ch in _CHARSET_STOP:
                    break
                end += 1
        else:
            start += 1
            end += 1
            while end < len(content):
                ch = content[end]
                if ch == '"':
                    break
                if ch == "\\":
                    content = content[:end] + content[end + 1:]
                end += 1
        return content[start:end]