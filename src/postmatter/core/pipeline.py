"""Batch check driver: parse and validate every post under a path"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from postmatter.config import Settings
from postmatter.core.errors import DocumentError
from postmatter.core.models import Document, DocumentWarning
from postmatter.core.parse import discover_files, parse_file
from postmatter.core.validate import validate


logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Outcome of checking one post; exactly one of document/error is set."""
    path:     Path
    strict:   bool = False
    document: Optional[Document] = None
    error:    Optional[DocumentError] = None
    warnings: list[DocumentWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        if self.error is not None:
            return False
        return not (self.strict and self.warnings)


def check_file(path: Path, settings: Settings) -> CheckResult:
    """Parse and validate a single post. Parse errors are captured, not raised."""
    logger.debug("Checking %s", path)
    result = CheckResult(path=path, strict=settings.strict)
    try:
        result.document = parse_file(path, settings)
    except DocumentError as e:
        logger.warning("Failed to parse %s: %s", path, e.message)
        result.error = e
        return result

    result.warnings = validate(result.document, settings)
    for w in result.warnings:
        logger.warning("%s", w)
    return result


def run_check(path: str | Path, settings: Settings) -> list[CheckResult]:
    """Check every post file under path; one failing post never stops the batch."""
    files = discover_files(Path(path), settings.extensions)
    results = [check_file(p, settings) for p in files]
    failed = sum(1 for r in results if not r.ok)
    logger.info("Checked %d post(s), %d failed", len(results), failed)
    return results
