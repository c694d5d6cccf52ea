"""Front-matter date parsing for the formats static-site generators accept"""

import re
from datetime import datetime


DATE_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M",
)

# Trailing UTC offset such as +0000, -05:00 or Z
_OFFSET_RE = re.compile(r'\s*(Z|[+-]\d{2}:?\d{2})$')

# Zero-padded YYYY-MM-DD with optional HH:MM[:SS]
_SHAPE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}(?:[ T]\d{2}:\d{2}(?::\d{2})?)?$')


def parse_date(value: str) -> datetime:
    """Parse a post date string into a datetime.

    Accepts YYYY-MM-DD with an optional HH:MM[:SS] time (space or 'T'
    separated) and an optional UTC offset. Raises ValueError otherwise.
    """
    text = value.strip()
    offset = ''
    m = _OFFSET_RE.search(text)
    if m and len(text) > 10:
        offset = m.group(1)
        text = text[:m.start()]
    if not _SHAPE_RE.match(text):
        raise ValueError(f"unrecognized date {value!r}")

    for fmt in DATE_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        if not offset:
            return parsed
        if offset == 'Z':
            offset = '+0000'
        return datetime.strptime(
            f"{parsed:%Y-%m-%d %H:%M:%S} {offset.replace(':', '')}",
            "%Y-%m-%d %H:%M:%S %z",
        )
    raise ValueError(f"unrecognized date {value!r}")
