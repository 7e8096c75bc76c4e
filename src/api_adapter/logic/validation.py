"""
Request validation against an ``APISchema``.

Each part of the request (body, params, query) is validated by its own pydantic
model. Parts are checked in that order and the first failing part is reported
as a bad request; parts without rules pass through unchanged.
"""

from typing import Any, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, ValidationError, create_model

from api_adapter.models.request import APISchema, PartSchema, Request
from api_adapter.models.result import Result, StatusError

PART_ORDER: Tuple[str, ...] = ('body', 'params', 'query')


def compile_part(name: str, schema: Optional[PartSchema]) -> Optional[Type[BaseModel]]:
    """Turn a rule set into a pydantic model; ``None`` means no rules."""
    if schema is None:
        return None
    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return schema
    fields = {
        field: definition if isinstance(definition, tuple) else (definition, ...)
        for field, definition in schema.items()
    }
    return create_model(
        f'{name.capitalize()}Schema',
        __config__=ConfigDict(extra='forbid'),
        **fields,
    )


def describe_error(error: ValidationError) -> str:
    """Flatten pydantic errors into one human-readable line."""
    messages = []
    for detail in error.errors():
        location = '.'.join(str(part) for part in detail['loc'])
        messages.append(f"{location}: {detail['msg']}" if location else detail['msg'])
    return '; '.join(messages)


def validate_part(data: Any, model: Optional[Type[BaseModel]]) -> Result[Any]:
    if model is None:
        return Result.of(data)
    try:
        return Result.of(model.model_validate(data))
    except ValidationError as exc:
        return Result.failure(StatusError.bad_request().with_details(describe_error(exc)))


class Validator:
    """Validates a raw ``Request`` against a compiled ``APISchema``."""

    def __init__(self, schema: APISchema):
        self.schema = schema
        self.models: Mapping[str, Optional[Type[BaseModel]]] = {
            part: compile_part(part, getattr(schema, part)) for part in PART_ORDER
        }

    def __call__(self, request: Request) -> Result[Request]:
        validated = {}
        for part in PART_ORDER:
            outcome = validate_part(getattr(request, part), self.models[part])
            if not outcome.is_success:
                return outcome
            validated[part] = outcome.unwrap()
        return Result.of(Request(**validated))


class NoValidation(Validator):
    """Accepts every request unchanged."""

    def __init__(self):
        super().__init__(APISchema())

    def __call__(self, request: Request) -> Result[Request]:
        return Result.of(request)


def validator(schema: Optional[APISchema] = None, **parts: PartSchema) -> Validator:
    """
    Build a validator from a schema, or from ``params``/``body``/``query`` keyword rule sets.

    Example:
        validate = validator(body={'name': str, 'count': (int, 1)}, params=PathModel)
    """
    if schema is None:
        schema = APISchema(**parts)
    elif parts:
        raise TypeError('Pass either an APISchema or per-part rule sets, not both')
    return Validator(schema)


no_validation = NoValidation()
