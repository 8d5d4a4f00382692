"""Error taxonomy for fail-fast extraction paths."""

from typing import Any, Optional


class ExtractionError(ValueError):
    """
    Base exception for values that cannot be extracted and must not be defaulted.

    Attributes:
        message: Error description
        field_name: Canonical record key being parsed (e.g., 'workingHours')
        raw_value: The raw value that failed to parse
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        raw_value: Optional[Any] = None,
    ):
        self.message = message
        self.field_name = field_name
        self.raw_value = raw_value

        # Build enhanced error message
        parts = [message]

        if field_name:
            parts.append(f"Field: {field_name}")

        if raw_value is not None:
            snippet = str(raw_value)
            snippet = snippet[:120] + "..." if len(snippet) > 120 else snippet
            parts.append(f"Raw value: {snippet!r}")

        super().__init__("\n".join(parts))


class InvalidFormatError(ExtractionError):
    """
    Raised when a time phrase is not in the expected "H시 M분" form.

    Malformed working hours point at upstream data corruption, so this path
    raises instead of defaulting.
    """

    pass


class InvalidIdentifierError(ExtractionError):
    """
    Raised when a record identifier is not numeric.
    """

    pass
