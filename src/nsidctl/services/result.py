"""ServiceResult and ServiceError — the contract between services and interfaces.

INVARIANT: Every public ValidateService method returns ServiceResult and
never raises for malformed input. The CLI and any other front end only
ever consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from nsidctl.domain.errors import ParseError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_parse_error(cls, exc: ParseError) -> ServiceError:
        """Map a domain parse error onto its stable error code."""
        return cls(
            code=exc.code,
            message=str(exc),
            detail={"input": str(exc.text), "reason": str(exc.reason)},
        )


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether every input passed validation.
        op: Name of the operation (``"check"``, ``"parse_reference"``, ...).
        data: Operation-specific payload. Failed ``check`` results still
            carry the per-input breakdown here.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing, counts).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
