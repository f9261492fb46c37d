"""Common schemas used across API endpoints.

Every schema serializes with camelCase aliases and accepts either the alias
or the field name on input.

Schemas:
    CamelModel: Base model with camelCase aliases
    OperationErrorResponse: One entry of an envelope's error list
    OperationResultResponse: Success envelope wrapping endpoint data
    ErrorResponse: Body of every non-2xx response
"""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.core.result import OperationResult

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OperationErrorResponse(CamelModel):
    """Single envelope error.

    Attributes:
        code: Error kind (e.g., "BadRequest", "NotFound").
        message: Human-readable message.
    """

    code: str = Field(..., description="Error kind", examples=["BadRequest"])
    message: str = Field(..., description="Human-readable message")


class OperationResultResponse(CamelModel, Generic[T]):
    """Operation result envelope.

    Attributes:
        data: Payload (undefined when is_error is True).
        is_error: True if any error was recorded.
        errors: Recorded errors.

    Example:
        >>> OperationResultResponse[str].success("Create product success").model_dump(
        ...     by_alias=True
        ... )
        {'data': 'Create product success', 'isError': False, 'errors': []}
    """

    data: T | None = Field(None, description="Operation payload")
    is_error: bool = Field(False, description="Whether any error was recorded")
    errors: list[OperationErrorResponse] = Field(
        default_factory=list, description="Recorded errors"
    )

    @classmethod
    def success(cls, data: T) -> "OperationResultResponse[T]":
        """Wrap a payload in a successful envelope."""
        return cls(data=data)

    @classmethod
    def from_operation_result(
        cls, envelope: OperationResult[T]
    ) -> "OperationResultResponse[T]":
        """Convert the core envelope to its wire schema."""
        return cls(
            data=envelope.data,
            is_error=envelope.is_error,
            errors=[
                OperationErrorResponse(code=error.kind.label, message=error.message)
                for error in envelope.errors
            ],
        )


class ErrorResponse(CamelModel):
    """Body of every error response.

    Attributes:
        status_code: HTTP status code.
        status_phrase: Human-readable status (e.g., "Bad request").
        errors: Every error message.
        time_stamp: UTC time the response was built.
    """

    status_code: int = Field(..., description="HTTP status code", examples=[400])
    status_phrase: str = Field(..., description="Status phrase", examples=["Bad request"])
    errors: list[str] = Field(..., description="Error messages")
    time_stamp: datetime = Field(..., description="Response timestamp (UTC)")
