"""
Base Schemas.

Shared Pydantic configuration for the JSON surface and the RFC 7807
problem document returned for every failed request.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PROBLEM_TYPE_BASE = "https://httpstatuses.com/"
PROBLEM_MEDIA_TYPE = "application/problem+json"


class CamelModel(BaseModel):
    """Base for API schemas: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class FieldError(BaseModel):
    """One failed field in a malformed request."""

    field: str
    message: str
    type: str


class ProblemDetail(CamelModel):
    """
    RFC 7807 problem document.

    ``trace_id`` is the request correlation id. ``exception`` and
    ``stack_trace`` are only filled in when detailed errors are enabled.
    """

    type: str = Field(description="URI identifying the problem type")
    title: str = Field(description="Short human-readable summary")
    status: int = Field(description="HTTP status code")
    detail: str = Field(description="Explanation of this occurrence")
    instance: str = Field(description="Request path")
    trace_id: str | None = None
    code: str | None = None
    errors: list[FieldError] | None = None
    exception: str | None = None
    stack_trace: str | None = None

    def to_content(self) -> dict[str, Any]:
        """Serialize for a JSON response, dropping unset extensions."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
