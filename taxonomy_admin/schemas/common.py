"""Common schemas for API requests and responses."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class ActionResult(BaseModel):
    """Result of a taxonomy mutation.

    Expected failures (duplicate code, bad ordering, database errors) come
    back as ``success=False`` with a message instead of raising.
    """

    success: bool = Field(description="Whether the action completed successfully")
    data: dict[str, Any] | None = Field(default=None, description="Action result data")
    error: str | None = Field(default=None, description="Error message if failed")

    model_config = {"extra": "forbid"}

    @classmethod
    def ok(cls, **data: Any) -> "ActionResult":
        return cls(success=True, data=data or None)

    @classmethod
    def fail(cls, error: str) -> "ActionResult":
        return cls(success=False, error=error)


class DeleteResult(BaseModel):
    """Result of a delete request: hard delete or soft archive."""

    success: bool
    action: Literal["deleted", "archived"] | None = Field(
        default=None,
        description="'deleted' when the row was removed, 'archived' when deprecated",
    )
    error: str | None = None

    model_config = {"extra": "forbid"}


class UsageResult(BaseModel):
    """References to an item from planning and sourcing tables."""

    in_use: bool
    usage_count: int = 0
    usage_description: str = ""

    model_config = {"extra": "forbid"}


class ErrorResponse(BaseModel):
    """Standard error response."""

    success: bool = Field(default=False)
    error: str = Field(description="Error message")
    error_type: str = Field(description="Error type/class name")

    model_config = {"extra": "forbid"}


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Health status (healthy, degraded)")
    version: str = Field(description="Service version")
    environment: str = Field(description="Environment name")
    checks: dict[str, bool] = Field(default_factory=dict, description="Individual health checks")

    model_config = {"extra": "forbid"}
