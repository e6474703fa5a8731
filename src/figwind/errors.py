"""Error hierarchy for figwind."""
from __future__ import annotations


class FigwindError(Exception):
    """Base error for all figwind errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Pipeline validation errors
# ---------------------------------------------------------------------------


class EmptyInputError(FigwindError):
    """The stylesheet text is blank."""

    def __init__(self, message: str = "No CSS content provided") -> None:
        super().__init__(message)


class NoDeclarationBlockError(FigwindError):
    """The stylesheet text contains no brace-balanced block."""

    def __init__(self, message: str = "No valid CSS block found") -> None:
        super().__init__(message)


# ---------------------------------------------------------------------------
# Figma errors
# ---------------------------------------------------------------------------


class InvalidFigmaUrlError(FigwindError):
    """The URL does not point at a Figma file."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid Figma URL: {url!r}")
        self.url = url


class FigmaApiError(FigwindError):
    """The Figma REST API returned an error or could not be reached."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
