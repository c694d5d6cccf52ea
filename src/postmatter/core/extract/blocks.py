"""Split prose spans into heading and prose blocks using markdown-it source maps"""

from markdown_it import MarkdownIt

from postmatter.core.extract.fences import TextSpan
from postmatter.core.models import Block, BlockKind
from postmatter.core.utils.tokens import heading_level


def _prose_block(lines: list[str], start: int, first_line: int) -> Block | None:
    """Return a prose Block for lines with blank edges trimmed, or None if all blank."""
    i, j = 0, len(lines)
    while i < j and not lines[i].strip():
        i += 1
    while j > i and not lines[j - 1].strip():
        j -= 1
    if i == j:
        return None
    return Block(
        kind=BlockKind.prose,
        content=''.join(lines[i:j]).rstrip('\n'),
        line=first_line + start + i,
    )


def span_to_blocks(span: TextSpan, parser: MarkdownIt, first_line: int = 1) -> list[Block]:
    """Convert a TextSpan into heading blocks and the prose runs between them.

    Only headings at the root of the markdown tree count; a heading inside a
    blockquote or list item stays part of the surrounding prose.
    """
    tokens = parser.parse(''.join(span.lines))
    blocks: list[Block] = []
    cursor = 0

    def _flush(upto: int) -> None:
        block = _prose_block(span.lines[cursor:upto], span.start + cursor, first_line)
        if block:
            blocks.append(block)

    for tok in tokens:
        level = heading_level(tok)
        if level is None or tok.level != 0 or not tok.map:
            continue
        start, end = tok.map
        _flush(start)
        blocks.append(Block(
            kind=BlockKind.heading,
            content=''.join(span.lines[start:end]).rstrip(),
            line=first_line + span.start + start,
            level=level,
        ))
        cursor = end

    _flush(len(span.lines))
    return blocks
