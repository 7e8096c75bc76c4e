"""
Request models for the three validated parts of an API Gateway request.

``Request`` is the path/body/query triple handed to validators, and
``APISchema`` declares the rules each of those parts must satisfy.
"""

from typing import Annotated, Any, Generic, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

P = TypeVar('P')
B = TypeVar('B')
Q = TypeVar('Q')

# A rule set is a pydantic model, or a mapping of field name to an annotation
# or to an (annotation, default) tuple.
PartSchema = Union[Type[BaseModel], Mapping[str, Any]]


class Request(BaseModel, Generic[P, B, Q]):
    """Path parameters, body and query string of one request."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    params: Annotated[Optional[P], Field(
        description='Path parameters'
    )] = None

    body: Annotated[Optional[B], Field(
        description='Request body, parsed from JSON'
    )] = None

    query: Annotated[Optional[Q], Field(
        description='Query string parameters'
    )] = None


class APISchema(BaseModel):
    """Optional rule set per request part. A missing rule set accepts anything."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra='forbid')

    params: Annotated[Optional[PartSchema], Field(
        description='Rules for the path parameters'
    )] = None

    body: Annotated[Optional[PartSchema], Field(
        description='Rules for the request body'
    )] = None

    query: Annotated[Optional[PartSchema], Field(
        description='Rules for the query string parameters'
    )] = None
