"""Pydantic model for the uniform outcome of a gateway call."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CallResult(BaseModel):
    """Outcome of a single downstream HTTP call.

    ``success`` decides which payload field is meaningful: ``data`` carries the
    response body of a successful call, ``error`` carries either the remote
    error body or a local message when no response was received.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool
    status_code: Optional[int] = Field(default=None, alias="statusCode")
    data: Any = None
    error: Any = None

    @model_validator(mode="after")
    def _check_payload(self) -> "CallResult":
        if self.success and self.error is not None:
            raise ValueError("successful result cannot carry an error")
        if not self.success:
            if self.data is not None:
                raise ValueError("failed result cannot carry data")
            if self.error is None or self.error == "":
                raise ValueError("failed result requires an error")
        return self

    @classmethod
    def ok(cls, status_code: int, data: Any) -> "CallResult":
        """Build a successful result."""
        return cls(success=True, status_code=status_code, data=data)

    @classmethod
    def fail(cls, error: Any, status_code: Optional[int] = None) -> "CallResult":
        """Build a failed result."""
        return cls(success=False, status_code=status_code, error=error)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize into the wire shape, omitting the unused payload field."""
        payload: Dict[str, Any] = {
            "success": self.success,
            "statusCode": self.status_code,
        }
        if self.success:
            payload["data"] = self.data
        else:
            payload["error"] = self.error
        return payload
