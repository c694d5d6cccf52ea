"""Re-serialize a Document's front matter and full source text"""

import yaml

from postmatter.core.models import Document


def dump_front_matter(doc: Document) -> str:
    """Return the front matter as a '---' delimited YAML block (key order kept, values as strings)."""
    if not doc.front_matter:
        return "---\n---\n"
    header = yaml.safe_dump(
        dict(doc.front_matter), default_flow_style=False, allow_unicode=True, sort_keys=False, width=1000
    )
    return f"---\n{header}---\n"


def render(doc: Document) -> str:
    """Return front matter followed by the verbatim body text."""
    return dump_front_matter(doc) + doc.body_text
