"""
API Gateway handler adapter.

Turns a business function that takes a validated, typed request and returns a
``Result`` into an AWS Lambda handler for API Gateway proxy integrations:

- logic: request validation with pydantic
- handlers: the Lambda entry point, configuration and logging
- models: request, result and response models
"""

__version__ = "1.0.0"

from api_adapter.models.result import Failure, Result, StatusError, Success
from api_adapter.models.request import APISchema, Request
from api_adapter.models.input import HandlerInput
from api_adapter.models.output import Response
from api_adapter.logic.validation import NoValidation, Validator, no_validation, validator
from api_adapter.handlers.api_gateway import ApiGatewayHandler, api_gateway_handler
from api_adapter.handlers.utils.observability import ContextLogger, build_logger, child_logger, get_logger

__all__ = [
    "APISchema",
    "ApiGatewayHandler",
    "ContextLogger",
    "Failure",
    "HandlerInput",
    "NoValidation",
    "Request",
    "Response",
    "Result",
    "StatusError",
    "Success",
    "Validator",
    "api_gateway_handler",
    "build_logger",
    "child_logger",
    "get_logger",
    "no_validation",
    "validator",
]
