"""Unified conversion exception taxonomy.

Provides a shared base exception hierarchy for every conversion stage
(markup parsing, path data, transforms, curve flattening, projection).
Every domain exception inherits from ``SvgPlotterError`` and carries
structured context fields so callers can tell a malformed document
apart from a misused API.

Taxonomy categories
-------------------
- ``ValidationError``: the input document is malformed.
- ``ContractError``: the caller violated an API precondition.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging and CLI output.
"""

from __future__ import annotations


class SvgPlotterError(Exception):
    """Base exception for all conversion-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Conversion stage where the error occurred
            (e.g. ``"parse_svg"``, ``"flatten_curve"``).
        code: Machine-readable error code (e.g. ``"SVG_METADATA_MISSING"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "internal"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(SvgPlotterError):
    """The input document (markup, attributes, path data) is malformed."""


class ContractError(SvgPlotterError):
    """An API precondition was violated by the caller."""
