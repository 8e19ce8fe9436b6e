"""Exceptions raised while scraping the progress page."""

from typing import Any, Optional


class ParsingError(ValueError):
    """Error parsing HTML content."""

    pass


class ProgressFormatError(ParsingError):
    """The progress page no longer matches the expected markup.

    Carries the listing being built (``kind``), the 1-based position that was
    being filled when the problem was found and the offending fragment.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: str,
        position: Optional[int] = None,
        fragment: Any = None,
    ):
        self.kind = kind
        self.position = position
        self.fragment = fragment
        super().__init__(self._format(message))

    def _format(self, message: str) -> str:
        location = self.kind if self.position is None else f"{self.kind} {self.position}"
        text = f"{message} ({location})"
        if self.fragment is not None:
            text += f": {str(self.fragment)!r}"
        return text


class LinkIndexError(ProgressFormatError):
    """Index could not be read from a relative link."""


class FormatError(LinkIndexError):
    """Link does not split into exactly a prefix and an index."""


class NumericError(LinkIndexError):
    """Trailing part of a link is not a non-negative integer."""


class SequenceGapError(ProgressFormatError):
    """Index read from a link is not the next expected one."""

    def __init__(self, message: str, *, expected: int, found: int, **kwargs: Any):
        self.expected = expected
        self.found = found
        super().__init__(message, **kwargs)


class MissingAttributeError(ProgressFormatError):
    """Element lacks a required attribute."""


class UnrecognizedLevelStructureError(ProgressFormatError):
    """Level anchor does not have the expected marker/description pair."""


class UnrecognizedCompletionMarkerError(ProgressFormatError):
    """Completion marker of a level is not one of the known tags."""


class UnrecognizedDescriptionFormatError(ProgressFormatError):
    """Description block of a level has an unexpected shape."""


class UnrecognizedCellStructureError(ProgressFormatError):
    """Problem cell does not wrap exactly one anchor."""


class AmbiguousOrMissingStatusError(ProgressFormatError):
    """Problem cell carries both status classes or neither."""


class ProgressFetchError(Exception):
    """Progress page could not be retrieved."""

    pass


class SessionNotFoundError(ProgressFetchError):
    """No session id was given or configured."""

    pass
