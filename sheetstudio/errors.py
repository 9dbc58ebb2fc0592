"""Recoverable error kinds raised by the ingest pipeline."""

from __future__ import annotations

from typing import Iterable


class SheetStudioError(Exception):
    """Base class for errors reported to the user without stopping the app."""


class FormatRejected(SheetStudioError):
    """The file name does not carry one of the accepted extensions."""

    def __init__(self, file_name: str, accepted: Iterable[str]) -> None:
        self.file_name = file_name
        self.accepted = tuple(accepted)
        super().__init__(
            f"File '{file_name}' is not a supported spreadsheet "
            f"(expected {', '.join(self.accepted)})"
        )


class DecodeFailure(SheetStudioError):
    """The spreadsheet codec could not parse the supplied bytes."""

    def __init__(self, file_name: str, reason: str) -> None:
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"Unable to decode '{file_name}': {reason}")


__all__ = ["SheetStudioError", "FormatRejected", "DecodeFailure"]
