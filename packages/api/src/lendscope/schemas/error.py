# This project was developed with assistance from AI tools.
"""RFC 7807 Problem Details error body returned by every failing route."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Problem Details for HTTP APIs (https://datatracker.ietf.org/doc/html/rfc7807)."""

    type: str = "about:blank"
    title: str
    status: int
    detail: str = ""
    request_id: str = Field(default="", description="Echo of X-Request-ID, or a generated UUID.")
    instance: str = Field(default="", description="Path of the request that failed.")
