"""Parse failures raised for posts that cannot become a Document"""

from typing import Optional


class DocumentError(ValueError):
    """Base class for fatal parse errors; carries source path and 1-based line."""
    code = "document_error"

    def __init__(self, message: str, path: Optional[str] = None, line: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.line = line

    def __str__(self) -> str:
        if self.path is None and self.line is None:
            return self.message
        return f"{self.path or '<string>'}:{self.line or 0}: {self.message}"


class MalformedFrontMatter(DocumentError):
    """Delimiters missing or unbalanced, or the header is not a flat mapping."""
    code = "malformed_front_matter"


class MissingRequiredField(DocumentError):
    code = "missing_required_field"

    def __init__(self, field: str, path: Optional[str] = None, line: Optional[int] = None):
        super().__init__(f"missing required field '{field}'", path, line)
        self.field = field


class InvalidDateFormat(DocumentError):
    code = "invalid_date_format"

    def __init__(self, value: str, path: Optional[str] = None, line: Optional[int] = None):
        super().__init__(f"invalid date {value!r}", path, line)
        self.value = value


class UnreadableDocument(DocumentError):
    """The file could not be read or is not valid UTF-8."""
    code = "unreadable_document"
