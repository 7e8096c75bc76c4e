"""
Models Package

Request and schema models, the result type shared by validators and business
functions, the handler input and the API Gateway response.
"""

from .result import Failure, Result, StatusError, Success
from .request import APISchema, Request
from .input import HandlerInput
from .output import ErrorMessage, Response

__all__ = [
    # Results
    "Result",
    "Success",
    "Failure",
    "StatusError",

    # Input models
    "Request",
    "APISchema",
    "HandlerInput",

    # Output models
    "Response",
    "ErrorMessage",
]
