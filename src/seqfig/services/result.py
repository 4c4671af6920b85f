"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: Service operations report fatal diagram conditions through
``ServiceResult.error`` instead of raising. Only the CLI boundary turns a
failed result into a non-zero exit status.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"render"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues (skipped directives, empty groups).
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (source counts, config path, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
