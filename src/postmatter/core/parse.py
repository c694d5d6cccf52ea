"""File discovery, front-matter extraction, and Document construction"""

import logging
import re
from pathlib import Path
from typing import Optional

import yaml

from postmatter.config import Settings
from postmatter.core.errors import (
    InvalidDateFormat,
    MalformedFrontMatter,
    MissingRequiredField,
    UnreadableDocument,
)
from postmatter.core.extract.extract import extract_blocks, split_lines
from postmatter.core.models import Document, FrontMatterEntry
from postmatter.core.utils.dates import parse_date


logger = logging.getLogger(__name__)

DELIMITER_RE = re.compile(r'^---\s*$')


def _split_front_matter(text: str, path: Optional[str]) -> tuple[str, str, int]:
    """Return (header, body, body_line) cut at the first two '---' lines."""
    lines = split_lines(text)
    if not lines or not DELIMITER_RE.match(lines[0]):
        raise MalformedFrontMatter("expected '---' front-matter delimiter on the first line", path, 1)
    for i in range(1, len(lines)):
        if DELIMITER_RE.match(lines[i]):
            return ''.join(lines[1:i]), ''.join(lines[i + 1:]), i + 2
    raise MalformedFrontMatter("front matter opened on line 1 is never closed with '---'", path, 1)


def _parse_entries(header: str, path: Optional[str]) -> list[FrontMatterEntry]:
    """Compose the header with PyYAML and return flat scalar entries, duplicates included.

    Composing (rather than loading) keeps each value as its raw scalar text and
    keeps every occurrence of a repeated key along with its line.
    """
    try:
        node = yaml.compose(header, Loader=yaml.SafeLoader)
    except yaml.MarkedYAMLError as e:
        line = e.problem_mark.line + 2 if e.problem_mark else 1
        raise MalformedFrontMatter(f"invalid YAML front matter: {e.problem or e}", path, line) from e
    except yaml.YAMLError as e:
        raise MalformedFrontMatter(f"invalid YAML front matter: {e}", path, 1) from e

    if node is None:
        return []
    if not isinstance(node, yaml.MappingNode):
        raise MalformedFrontMatter(
            f"front matter must be key: value pairs, got {node.id}", path, node.start_mark.line + 2
        )

    entries = []
    for key_node, value_node in node.value:
        line = key_node.start_mark.line + 2
        if not isinstance(key_node, yaml.ScalarNode):
            raise MalformedFrontMatter("front-matter keys must be plain strings", path, line)
        if not isinstance(value_node, yaml.ScalarNode):
            raise MalformedFrontMatter(
                f"value of '{key_node.value}' must be a scalar, got {value_node.id}", path, line
            )
        entries.append(FrontMatterEntry(key=key_node.value, value=value_node.value, line=line))
    return entries


def parse(raw_text: str, path: Optional[str | Path] = None, settings: Optional[Settings] = None) -> Document:
    """Parse raw post text into a Document.

    Raises MalformedFrontMatter, MissingRequiredField, or InvalidDateFormat,
    each carrying the source path and 1-based line number.
    """
    settings = settings or Settings()
    path = str(path) if path is not None else None
    text = raw_text.lstrip('\ufeff').replace('\r\n', '\n')

    header, body, body_line = _split_front_matter(text, path)
    entries = _parse_entries(header, path)
    front_matter = {e.key: e.value for e in entries}
    lines = {e.key: e.line for e in entries}

    for name in settings.required_fields:
        if name not in front_matter:
            raise MissingRequiredField(name, path, 1)

    if 'date' in front_matter:
        try:
            parse_date(front_matter['date'])
        except ValueError as e:
            raise InvalidDateFormat(front_matter['date'], path, lines['date']) from e

    blocks = extract_blocks(body, body_line, settings.parser_config)
    logger.debug("Parsed %s: %d front-matter keys, %d blocks", path or '<string>', len(front_matter), len(blocks))
    return Document(
        path=path,
        front_matter=front_matter,
        entries=tuple(entries),
        body=blocks,
        body_text=body,
        body_line=body_line,
    )


def parse_file(path: Path, settings: Optional[Settings] = None) -> Document:
    """Read a UTF-8 post file and parse it into a Document.

    Read and decode failures raise UnreadableDocument; a decode error is
    reported at the line holding the offending byte.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise UnreadableDocument(f"cannot read file: {e.strerror or e}", str(path), 1) from e
    try:
        text = data.decode('utf-8')
    except UnicodeDecodeError as e:
        line = data.count(b'\n', 0, e.start) + 1
        raise UnreadableDocument(f"not valid UTF-8: {e.reason} at byte {e.start}", str(path), line) from e
    return parse(text, path, settings)


def discover_files(path: Path, extensions: Optional[list[str]] = None) -> list[Path]:
    """Return sorted post files under path, or [path] if a single post file."""
    suffixes = {s.lower() for s in (extensions or Settings().extensions)}
    if path.is_file():
        return [path] if path.suffix.lower() in suffixes else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in suffixes)
