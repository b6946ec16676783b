from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

SUCCESS = "success"
NOT_IMPLEMENTED = "not_implemented"


class MethodResult(BaseModel):
    """Outcome of a method call: a success carrying a payload, or not implemented."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success", "not_implemented"] = Field(..., description="Call outcome.")
    result: dict[str, Any] | None = Field(default=None, description="Payload, present on success only.")

    @classmethod
    def success(cls, payload: dict[str, Any]) -> MethodResult:
        return cls(status=SUCCESS, result=payload)

    @classmethod
    def not_implemented(cls) -> MethodResult:
        return cls(status=NOT_IMPLEMENTED)

    @property
    def is_success(self) -> bool:
        return self.status == SUCCESS

    def to_response(self) -> dict[str, Any]:
        """Wire representation; the not implemented signal carries no payload."""
        return self.model_dump(exclude_none=True)
