"""Convert raw body text into the ordered block sequence of a Document"""

from postmatter.core.extract.blocks import span_to_blocks
from postmatter.core.extract.fences import TextSpan, split_fences
from postmatter.core.models import Block
from postmatter.core.utils.tokens import make_parser


def split_lines(text: str) -> list[str]:
    """Split on '\\n' only, keeping line endings (str.splitlines also breaks on \\f, \\u2028, ...)."""
    lines = [line + '\n' for line in text.split('\n')]
    lines[-1] = lines[-1][:-1]
    return lines if lines[-1] else lines[:-1]


def extract_blocks(body: str, first_line: int = 1, parser_config: str = 'commonmark') -> tuple[Block, ...]:
    """Split body into prose, heading, and code blocks in source order."""
    parser = make_parser(parser_config)
    blocks: list[Block] = []
    for part in split_fences(split_lines(body), first_line):
        if isinstance(part, TextSpan):
            blocks.extend(span_to_blocks(part, parser, first_line))
        else:
            blocks.append(part)
    return tuple(blocks)
