"""Line scanner that cuts fenced code regions out of a post body"""

import re
from dataclasses import dataclass

from postmatter.core.models import Block, BlockKind, FenceStyle


LIQUID_OPEN_RE = re.compile(r'^\s*\{%-?\s*highlight\b(?:\s+([^\s%]+))?[^%]*-?%\}\s*$')
LIQUID_CLOSE_RE = re.compile(r'^\s*\{%-?\s*endhighlight\s*-?%\}\s*$')
MD_OPEN_RE = re.compile(r'^ {0,3}(`{3,}|~{3,})\s*([^\s`]*)')
MD_CLOSE_RE = re.compile(r'^ {0,3}(`{3,}|~{3,})\s*$')


@dataclass
class TextSpan:
    """Run of body lines outside any fence."""
    start: int          # 0-based index into the body lines
    lines: list[str]    # lines with their line endings


def _open_fence(line: str) -> tuple[FenceStyle, str | None, str] | None:
    """Return (style, lang, marker) when line opens a fence, else None."""
    m = LIQUID_OPEN_RE.match(line)
    if m:
        return FenceStyle.liquid, m.group(1), ''
    m = MD_OPEN_RE.match(line)
    if m:
        marker, info = m.group(1), m.group(2)
        # a backtick fence info string may not itself contain backticks
        if marker[0] == '`' and '`' in line[m.end(1):]:
            return None
        style = FenceStyle.backtick if marker[0] == '`' else FenceStyle.tilde
        return style, info or None, marker
    return None


def _closes(line: str, style: FenceStyle, marker: str) -> bool:
    if style == FenceStyle.liquid:
        return bool(LIQUID_CLOSE_RE.match(line))
    m = MD_CLOSE_RE.match(line)
    return bool(m) and m.group(1)[0] == marker[0] and len(m.group(1)) >= len(marker)


def split_fences(lines: list[str], first_line: int = 1) -> list[TextSpan | Block]:
    """Split body lines into TextSpans and opaque code Blocks, in source order.

    first_line is the 1-based source line of lines[0]; a fence left open runs
    to the end of the body and is returned with closed=False.
    """
    parts: list[TextSpan | Block] = []
    text: list[str] = []
    text_start = 0
    i = 0

    while i < len(lines):
        opened = _open_fence(lines[i])
        if opened is None:
            if not text:
                text_start = i
            text.append(lines[i])
            i += 1
            continue

        if text:
            parts.append(TextSpan(start=text_start, lines=text))
            text = []

        style, lang, marker = opened
        end = i + 1
        while end < len(lines) and not _closes(lines[end], style, marker):
            end += 1
        closed = end < len(lines)
        stop = end + 1 if closed else len(lines)
        parts.append(Block(
            kind=BlockKind.code,
            content=''.join(lines[i:stop]).rstrip('\n'),
            line=first_line + i,
            lang=lang,
            fence=style,
            closed=closed,
        ))
        i = stop

    if text:
        parts.append(TextSpan(start=text_start, lines=text))
    return parts
