"""
Output models for API Gateway proxy responses.
"""

from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Response(BaseModel):
    """API Gateway proxy response."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: Annotated[int, Field(
        alias='statusCode',
        description='HTTP status code',
        examples=[200, 400, 500]
    )]

    body: Annotated[str, Field(
        description='JSON encoded response body'
    )]

    headers: Annotated[Dict[str, str], Field(
        default_factory=dict,
        description='Response headers'
    )]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize into the shape API Gateway expects from a proxy integration."""
        return self.model_dump(by_alias=True)


class ErrorMessage(BaseModel):
    """Error body returned to the caller."""

    message: Annotated[str, Field(
        description='Human-readable error message',
        examples=['Bad Request', 'Not Found', 'Internal Server Error']
    )]

    details: Annotated[Optional[str], Field(
        description='What was wrong with the request, for client errors only'
    )] = None
