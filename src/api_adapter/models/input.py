"""
Input model handed to business functions by the API Gateway adapter.
"""

from typing import Annotated, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from api_adapter.handlers.utils.observability import ContextLogger

T = TypeVar('T')


class HandlerInput(BaseModel, Generic[T]):
    """Everything a business function gets for one invocation."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    user_id: Annotated[Optional[str], Field(
        description='Cognito identity id of the caller, when the request is IAM authorized'
    )] = None

    request_id: Annotated[str, Field(
        description='API Gateway request id',
        examples=['c6af9ac6-7b61-11e6-9a41-93e8deadbeef']
    )]

    logger: Annotated[ContextLogger, Field(
        description='Logger bound to this request'
    )]

    data: Annotated[T, Field(
        description='Validated request'
    )]
