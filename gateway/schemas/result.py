"""
OperationResult - the uniform envelope every adapter operation returns.
Callers look at status_code only; upstream status quirks stay inside the repositories.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class ErrorDetail(BaseModel):
    """Upstream error body, passed through untouched (errors is opaque)."""

    model_config = ConfigDict(extra="allow")

    status: int | None = None
    instance: str | None = None
    title: str | None = None
    type: str | None = None
    errors: Any = None


class OperationResult(BaseModel, Generic[T]):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = False
    message: str = ""
    status_code: int = Field(alias="statusCode")
    data: T | None = None
    errors: ErrorDetail | None = None

    @model_validator(mode="after")
    def _no_errors_on_success(self) -> "OperationResult[T]":
        if self.success and self.errors is not None:
            raise ValueError("a successful result cannot carry errors")
        return self

    def to_body(self) -> dict[str, Any]:
        """JSON-ready body with camelCase statusCode."""
        return self.model_dump(mode="json", by_alias=True)


def ok(data: Any = None, message: str = "", status_code: int = 200) -> OperationResult:
    return OperationResult(success=True, message=message, status_code=status_code, data=data)


def fail(
    status_code: int,
    message: str,
    errors: ErrorDetail | None = None,
    data: Any = None,
) -> OperationResult:
    return OperationResult(
        success=False, message=message, status_code=status_code, errors=errors, data=data
    )
