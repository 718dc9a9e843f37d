"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: Every ConvertService method returns ServiceResult; conversion
exceptions never cross the service boundary.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from tzstamp.domain.errors import ConversionError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` is the :class:`~tzstamp.domain.types.ErrorKind` value
    (``"InvalidMonth"``, ``"InvalidTimezone"``, ...).
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: ConversionError) -> ServiceError:
        return cls(code=str(exc.kind), message=exc.message, detail=exc.detail)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"convert"``, ``"now"``, ...).
        data: Operation-specific payload on success.
        warnings: Non-fatal notes about the conversion.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans when verbose).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: ConversionError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
