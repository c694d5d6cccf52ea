"""Non-fatal checks over a parsed Document"""

from typing import Optional

from postmatter.config import Settings
from postmatter.core.extract.fences import LIQUID_CLOSE_RE
from postmatter.core.models import BlockKind, Document, DocumentWarning, WarningCode


def _front_matter_warnings(doc: Document, settings: Settings) -> list[DocumentWarning]:
    warnings = []
    seen: dict[str, int] = {}
    for entry in doc.entries:
        if entry.key in seen:
            warnings.append(DocumentWarning(
                code=WarningCode.duplicate_key,
                message=f"'{entry.key}' already set on line {seen[entry.key]}; this value wins",
                path=doc.path, line=entry.line,
            ))
        elif settings.recognized_fields and entry.key not in settings.recognized_fields:
            warnings.append(DocumentWarning(
                code=WarningCode.unknown_key,
                message=f"unrecognized front-matter key '{entry.key}'",
                path=doc.path, line=entry.line,
            ))
        seen[entry.key] = entry.line

        if not entry.value.strip():
            warnings.append(DocumentWarning(
                code=WarningCode.empty_value,
                message=f"'{entry.key}' has an empty value",
                path=doc.path, line=entry.line,
            ))

    for name in settings.recommended_fields:
        if name not in doc.front_matter:
            warnings.append(DocumentWarning(
                code=WarningCode.missing_recommended,
                message=f"recommended field '{name}' is not set",
                path=doc.path, line=1,
            ))
    return warnings


def _body_warnings(doc: Document) -> list[DocumentWarning]:
    warnings = []
    for block in doc.body:
        if block.kind == BlockKind.code and not block.closed:
            warnings.append(DocumentWarning(
                code=WarningCode.unclosed_fence,
                message=f"{block.fence.value} code block is never closed",
                path=doc.path, line=block.line,
            ))
        elif block.kind == BlockKind.prose:
            for offset, text in enumerate(block.content.split('\n')):
                if LIQUID_CLOSE_RE.match(text):
                    warnings.append(DocumentWarning(
                        code=WarningCode.stray_fence_close,
                        message="endhighlight without a matching highlight tag",
                        path=doc.path, line=block.line + offset,
                    ))

    if not doc.body_text.strip():
        warnings.append(DocumentWarning(
            code=WarningCode.empty_body,
            message="post has no body content",
            path=doc.path, line=doc.body_line,
        ))
    return warnings


def validate(doc: Document, settings: Optional[Settings] = None) -> list[DocumentWarning]:
    """Return warnings for doc in source order; empty when clean. Never raises."""
    settings = settings or Settings()
    warnings = _front_matter_warnings(doc, settings) + _body_warnings(doc)
    return sorted(warnings, key=lambda w: w.line or 0)
