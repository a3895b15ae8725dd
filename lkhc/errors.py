from __future__ import annotations

from typing import Optional


class LkhcError(Exception):
    """Base error for everything the extractor refuses to turn into a record.

    ``field``, ``row`` and ``week`` are filled in as the error travels up
    through the table extractor and the week assembler, so a single line in
    the diagnostics says where the archive stopped making sense.
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        row: Optional[int] = None,
        week: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.row = row
        self.week = week

    def __str__(self) -> str:
        context = []
        if self.week is not None:
            context.append(f"week {self.week}")
        if self.row is not None:
            context.append(f"row {self.row}")
        if self.field is not None:
            context.append(f"field {self.field}")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


class FormatError(LkhcError):
    """Document structure does not have the expected fixed shape."""
    pass


class ParseError(LkhcError):
    """A text field failed numeric conversion."""
    pass


class NotFoundError(LkhcError):
    """An expected element is missing from a document."""
    pass


class NoResultsError(LkhcError):
    """Not a single week of a year could be assembled."""
    pass
