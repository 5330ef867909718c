"""Markdown link parser that keeps source offsets.

Only the parts of CommonMark that decide where links are matter here:
code (fenced and indented blocks, spans), HTML comments and tags, escapes,
reference definitions, autolinks and the bracket matching rules for
inline, reference, collapsed and shortcut links. Reference-shaped links
whose label has no definition are reported as broken links instead of
being dropped, because ``[std::option::Option]`` is the normal way of
writing a symbol link.
"""

import bisect
import re
from dataclasses import dataclass
from functools import lru_cache

from ..LinkType import LinkType
from .ParsedLink import ParsedLink

# Opening or closing code fence
FENCE_PATTERN = re.compile(r"^[ \t]*(`{3,}|~{3,})")
HTML_COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)
# Blockquote markers at the start of a line, nested quotes included
BLOCKQUOTE_PATTERN = re.compile(r"^(?: {0,3}> ?)+")
LIST_ITEM_PATTERN = re.compile(r"([-*+]|\d{1,9}[.)])([ \t]+|$)")
HEADING_PATTERN = re.compile(r"#{1,6}(?:[ \t]|$)")
# [label]: dest "title"
REFERENCE_DEFINITION_PATTERN = re.compile(
    r"^ {0,3}\[(?!\^)((?:[^\[\]\\]|\\.){1,999})\]:[ \t]*(<[^<>\n]*>|\S+)"
    r"(?:[ \t]+(\"(?:[^\"\\]|\\.)*\"|'(?:[^'\\]|\\.)*'|\((?:[^()\\]|\\.)*\)))?[ \t]*$"
)
AUTOLINK_PATTERN = re.compile(r"<([A-Za-z][A-Za-z0-9+.\-]{1,31}:[^<>\s]*)>")
EMAIL_PATTERN = re.compile(
    r"<([A-Za-z0-9.!#$%&'*+/=?^_`{|}~\-]+@[A-Za-z0-9](?:[A-Za-z0-9\-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9\-]{0,61}[A-Za-z0-9])?)*)>"
)
HTML_TAG_PATTERN = re.compile(r"</?[A-Za-z][A-Za-z0-9\-]*(?:\s[^<>]*)?/?>")
# Lines that start a new block; links never continue across them
BLOCK_START_PATTERN = re.compile(r"[ \t]*(?:\n|$|[-*+][ \t]|\d{1,9}[.)][ \t]|#{1,6}(?:[ \t]|\n|$)|>)")
BLANK_LINE_PATTERN = re.compile(r"\n[ \t]*\n")
TASK_MARKER_PATTERN = re.compile(r"^[ \t]*(?:[-*+]|\d{1,9}[.)])[ \t]+$")
UNESCAPED_BRACKET_PATTERN = re.compile(r"(?<!\\)[\[\]]")
ESCAPE_PATTERN = re.compile(r"\\([!-/:-@\[-`{-~])")
ESCAPABLE = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")
MAX_LABEL_LENGTH = 999


@lru_cache(maxsize=None)
def _code_span_closer(size: int) -> re.Pattern[str]:
    return re.compile(rf"(?<!`)`{{{size}}}(?!`)")


def _indentation(line: str) -> tuple[int, str]:
    """Return the indentation width in columns (tabs stop every 4) and the rest of the line."""
    width = 0
    for i, ch in enumerate(line):
        if ch == " ":
            width += 1
        elif ch == "\t":
            width += 4 - width % 4
        else:
            return width, line[i:]
    return width, ""


def _unescape(value: str) -> str:
    return ESCAPE_PATTERN.sub(r"\1", value)


def _normalize_label(label: str) -> str:
    return " ".join(label.split()).casefold()


def _is_valid_label(label: str) -> bool:
    return bool(label.strip()) and len(label) <= MAX_LABEL_LENGTH and not UNESCAPED_BRACKET_PATTERN.search(label)


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in " \t\n":
        pos += 1
    return pos


@dataclass
class _Opener:
    start: int
    image: bool = False
    active: bool = True


class MarkdownParser:
    """Find markdown links and their spans in a chapter."""

    def parse(self, text: str) -> list[ParsedLink]:
        """Return every link in ``text`` ordered by span start.

        Broken links are included with ``broken=True`` and their label as
        ``dest_url``. Images, footnote references and task list markers are
        not links and are never returned.
        """
        definitions, skip = self._scan_blocks(text)
        skip_starts = sorted(skip)
        links: list[ParsedLink] = []
        openers: list[_Opener] = []

        i = 0
        n = len(text)
        next_skip = 0
        while i < n:
            if next_skip < len(skip_starts) and i >= skip_starts[next_skip]:
                i = max(i, skip[skip_starts[next_skip]])
                next_skip += 1
                openers.clear()
                continue
            ch = text[i]
            if ch == "\\":
                i += 2 if i + 1 < n and text[i + 1] in ESCAPABLE else 1
            elif ch == "`":
                i = self._skip_code_span(text, i, skip_starts)
            elif ch == "\n":
                i += 1
                if BLOCK_START_PATTERN.match(text, i):
                    openers.clear()
            elif ch == "<":
                i = self._scan_angle(text, i, links)
            elif ch == "!" and text.startswith("[", i + 1):
                openers.append(_Opener(start=i, image=True))
                i += 2
            elif ch == "[":
                openers.append(_Opener(start=i))
                i += 1
            elif ch == "]" and openers:
                i = self._close(text, i, openers, definitions, links)
            else:
                i += 1

        return sorted(links, key=lambda link: link.start)

    def _scan_blocks(self, text: str) -> tuple[dict[str, tuple[str, str]], dict[int, int]]:
        """Collect reference definitions and the spans the inline scan must skip.

        Code (fenced or indented) is skipped whole. Definitions are matched
        after removing blockquote markers and list item markers, and their
        lines are skipped too.
        """
        spans: list[tuple[int, int]] = []
        definitions: dict[str, tuple[str, str]] = {}

        offset = 0
        fence: tuple[str, int, int] | None = None  # (fence char, length, start offset)
        code: list[int] | None = None  # [start, end] of the open indented code block
        list_indent = 0  # content column of the enclosing list item
        after_blank = True  # indented code cannot interrupt a paragraph

        for line in text.splitlines(keepends=True):
            line_offset = offset
            offset += len(line)
            body = line.rstrip("\r\n")
            rest = BLOCKQUOTE_PATTERN.sub("", body, count=1)
            indent, content = _indentation(rest)

            if fence is not None:
                match = FENCE_PATTERN.match(content)
                if (
                    match
                    and match.group(1)[0] == fence[0]
                    and len(match.group(1)) >= fence[1]
                    and not content[match.end() :].strip()
                ):
                    spans.append((fence[2], line_offset + len(body)))
                    fence = None
                    after_blank = True
                continue

            if not content:
                after_blank = True
                continue

            if code is not None:
                if indent >= list_indent + 4:
                    code[1] = line_offset + len(body)
                    continue
                spans.append((code[0], code[1]))
                code = None

            if list_indent and indent < list_indent and after_blank and not LIST_ITEM_PATTERN.match(content):
                list_indent = 0

            if indent >= list_indent + 4:
                if after_blank:
                    code = [line_offset, line_offset + len(body)]
                # Otherwise a lazy paragraph continuation
                continue

            item = LIST_ITEM_PATTERN.match(content)
            if item:
                padding = len(item.group(2))
                list_indent = indent + len(item.group(1)) + (padding if 1 <= padding <= 4 else 1)
                content = content[item.end() :]

            opener = FENCE_PATTERN.match(content)
            if opener:
                marker = opener.group(1)
                fence = (marker[0], len(marker), line_offset)
                continue

            match = REFERENCE_DEFINITION_PATTERN.match(content)
            if match:
                label, dest, title = match.group(1), match.group(2), match.group(3) or ""
                if dest.startswith("<"):
                    dest = dest[1:-1]
                if title:
                    title = title[1:-1]
                # First definition wins
                definitions.setdefault(_normalize_label(label), (_unescape(dest), _unescape(title)))
                spans.append((line_offset, line_offset + len(body)))

            after_blank = bool(HEADING_PATTERN.match(content))

        if fence is not None:
            # Unclosed fences run to the end of the document
            spans.append((fence[2], len(text)))
        if code is not None:
            spans.append((code[0], code[1]))

        def inside_code(pos: int) -> bool:
            return any(start <= pos < end for start, end in spans)

        for match in HTML_COMMENT_PATTERN.finditer(text):
            if not inside_code(match.start()):
                spans.append((match.start(), match.end()))

        skip: dict[int, int] = {}
        for start, end in sorted(spans):
            if start not in skip:
                skip[start] = end
        return definitions, skip

    def _skip_code_span(self, text: str, i: int, skip_starts: list[int]) -> int:
        run_end = i
        while run_end < len(text) and text[run_end] == "`":
            run_end += 1

        limit = len(text)
        blank = BLANK_LINE_PATTERN.search(text, run_end)
        if blank:
            limit = blank.start()
        next_skip = bisect.bisect_left(skip_starts, run_end)
        if next_skip < len(skip_starts):
            limit = min(limit, skip_starts[next_skip])

        match = _code_span_closer(run_end - i).search(text, run_end, limit)
        # An unmatched backtick run is literal text
        return match.end() if match else run_end

    def _scan_angle(self, text: str, i: int, links: list[ParsedLink]) -> int:
        for pattern, link_type in ((AUTOLINK_PATTERN, LinkType.AUTOLINK), (EMAIL_PATTERN, LinkType.EMAIL)):
            match = pattern.match(text, i)
            if match:
                links.append(ParsedLink(link_type, match.group(1), "", i, match.end()))
                return match.end()
        match = HTML_TAG_PATTERN.match(text, i)
        return match.end() if match else i + 1

    def _close(
        self,
        text: str,
        i: int,
        openers: list[_Opener],
        definitions: dict[str, tuple[str, str]],
        links: list[ParsedLink],
    ) -> int:
        """Handle ``]`` at ``i`` against the nearest opener; return the next scan position."""
        opener = openers.pop()
        if not opener.active:
            return i + 1
        label = text[opener.start + (2 if opener.image else 1) : i]
        after = i + 1

        if text.startswith("(", after):
            tail = self._parse_inline_tail(text, after)
            if tail is not None:
                dest, title, end = tail
                self._add(ParsedLink(LinkType.INLINE, dest, title, opener.start, end), opener, openers, links)
                return end

        if text.startswith("[", after):
            ref_end = self._label_end(text, after + 1)
            if ref_end is not None:
                ref = text[after + 1 : ref_end]
                link_type, key = (LinkType.REFERENCE, ref) if ref else (LinkType.COLLAPSED, label)
                if _is_valid_label(key):
                    self._add_reference(link_type, key, opener, ref_end + 1, definitions, openers, links)
                    return ref_end + 1

        if self._is_shortcut(text, opener, label):
            self._add_reference(LinkType.SHORTCUT, label, opener, after, definitions, openers, links)
        return after

    def _add_reference(
        self,
        link_type: LinkType,
        key: str,
        opener: _Opener,
        end: int,
        definitions: dict[str, tuple[str, str]],
        openers: list[_Opener],
        links: list[ParsedLink],
    ) -> None:
        definition = definitions.get(_normalize_label(key))
        if definition is None:
            link = ParsedLink(link_type, key, "", opener.start, end, broken=True)
        else:
            dest, title = definition
            link = ParsedLink(link_type, dest, title, opener.start, end)
        self._add(link, opener, openers, links)

    def _add(self, link: ParsedLink, opener: _Opener, openers: list[_Opener], links: list[ParsedLink]) -> None:
        if opener.image:
            return
        # Anything found inside the link text is part of this link now
        while links and links[-1].start > link.start:
            links.pop()
        links.append(link)
        if not link.broken:
            # Links cannot contain other links
            for outer in openers:
                if not outer.image:
                    outer.active = False

    def _is_shortcut(self, text: str, opener: _Opener, label: str) -> bool:
        if not _is_valid_label(label) or label.startswith("^"):
            return False
        if label in (" ", "x", "X"):
            line_start = text.rfind("\n", 0, opener.start) + 1
            if TASK_MARKER_PATTERN.match(text[line_start : opener.start]):
                return False
        return True

    def _label_end(self, text: str, pos: int) -> int | None:
        """Index of the ``]`` closing a link label that starts at ``pos``."""
        j = pos
        while j < len(text) and j - pos <= MAX_LABEL_LENGTH:
            c = text[j]
            if c == "\\":
                j += 2
                continue
            if c == "[":
                return None
            if c == "]":
                return j
            j += 1
        return None

    def _parse_inline_tail(self, text: str, pos: int) -> tuple[str, str, int] | None:
        """Parse ``(dest "title")`` starting at ``pos``; return (dest, title, end)."""
        n = len(text)
        q = _skip_whitespace(text, pos + 1)

        if q < n and text[q] == "<":
            close = text.find(">", q + 1)
            if close == -1 or "\n" in text[q + 1 : close] or "<" in text[q + 1 : close]:
                return None
            dest = text[q + 1 : close]
            q = close + 1
        else:
            start = q
            depth = 0
            while q < n:
                c = text[q]
                if c == "\\" and q + 1 < n:
                    q += 2
                    continue
                if c.isspace() or ord(c) < 0x20:
                    break
                if c == "(":
                    depth += 1
                elif c == ")":
                    if depth == 0:
                        break
                    depth -= 1
                q += 1
            if depth:
                return None
            dest = text[start:q]

        dest_end = q
        q = _skip_whitespace(text, q)
        title = ""
        if q < n and q > dest_end and text[q] in "\"'(":
            closer = ")" if text[q] == "(" else text[q]
            k = q + 1
            while k < n and text[k] != closer:
                k += 2 if text[k] == "\\" else 1
            if k >= n:
                return None
            title = text[q + 1 : k]
            q = _skip_whitespace(text, k + 1)

        if q < n and text[q] == ")":
            return _unescape(dest), _unescape(title), q + 1
        return None
