"""
API Gateway adapter - binds a validator and a business function into a Lambda handler.

Every invocation parses the proxy event, validates it, calls the business function
with a ``HandlerInput`` and maps the returned ``Result`` to a proxy response.
Uncontrolled exceptions are logged and answered with a generic 500, so the
Lambda invocation itself never fails.
"""

import asyncio
import base64
import binascii
import inspect
import json
from http import HTTPStatus
from typing import Any, Awaitable, Callable, Dict, Generic, Mapping, Optional, TypeVar, Union

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic_core import to_jsonable_python

from api_adapter.handlers.models.env_vars import get_adapter_env_vars
from api_adapter.handlers.utils import observability
from api_adapter.handlers.utils.observability import ContextLogger, child_logger
from api_adapter.logic.validation import Validator
from api_adapter.models.input import HandlerInput
from api_adapter.models.output import ErrorMessage, Response
from api_adapter.models.request import Request
from api_adapter.models.result import Result, StatusError

T = TypeVar('T', bound=Request)
V = TypeVar('V')

JSON_HEADERS = {'content-type': 'application/json'}

BusinessFunction = Callable[[HandlerInput], Union[Result[V], Awaitable[Result[V]]]]


def parse_body(event: APIGatewayProxyEvent) -> Any:
    """JSON body of the event; missing, null or malformed bodies become ``{}``."""
    body = event.body
    if body is None:
        return {}
    try:
        if event.is_base64_encoded:
            body = base64.b64decode(body).decode('utf-8')
        parsed = json.loads(body)
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return {}
    return {} if parsed is None else parsed


def get_request_context(event: APIGatewayProxyEvent) -> Dict[str, Any]:
    return event.get('requestContext') or {}


def get_trace_request_id(event: APIGatewayProxyEvent) -> Optional[str]:
    """Extended request id when API Gateway provides one, else the request id."""
    context = get_request_context(event)
    return context.get('extendedRequestId') or context.get('requestId')


def get_user_id(event: APIGatewayProxyEvent) -> Optional[str]:
    """Cognito identity id of an IAM authorized caller, if any."""
    context = get_request_context(event)
    iam = (context.get('authorizer') or {}).get('iam') or {}
    identity_id = (iam.get('cognitoIdentity') or {}).get('identityId')
    if identity_id:
        return identity_id
    return (context.get('identity') or {}).get('cognitoIdentityId')


def build_request(event: APIGatewayProxyEvent) -> Request:
    return Request(
        body=parse_body(event),
        params=event.path_parameters or {},
        query=event.query_string_parameters or {},
    )


class ApiGatewayHandler(Generic[T, V]):
    """Lambda entry point for an API Gateway proxy integration."""

    def __init__(
        self,
        validator: Validator,
        func: BusinessFunction,
        logger: Optional[Logger] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        self.validator = validator
        self.func = func
        self._logger = logger
        if headers is None:
            headers = get_adapter_env_vars().default_headers()
        self.headers = {**headers, **JSON_HEADERS}

    @property
    def logger(self) -> Logger:
        """Injected base logger, or the default one, built on first use."""
        if self._logger is None:
            self._logger = observability.get_logger()
        return self._logger

    def _response(self, status_code: int, payload: Any) -> Response:
        return Response(
            status_code=status_code,
            body=json.dumps(payload, default=to_jsonable_python),
            headers=self.headers,
        )

    def _validation_error_response(self, error: StatusError, logger: ContextLogger) -> Response:
        logger.info('Request validation failed', extra={'status': error.status, 'details': error.details})
        message = ErrorMessage(message=error.message, details=error.details)
        return self._response(error.status, message.model_dump())

    def _error_response(self, error: StatusError) -> Response:
        # details are echoed for validation errors only
        message = ErrorMessage(message=error.message)
        return self._response(error.status, message.model_dump(exclude_none=True))

    async def handle(self, event: Union[Dict[str, Any], APIGatewayProxyEvent]) -> Response:
        if not isinstance(event, APIGatewayProxyEvent):
            event = APIGatewayProxyEvent(event)
        logger = child_logger(self.logger, request_id=get_trace_request_id(event))

        try:
            request = self.validator(build_request(event))
            if not request.is_success:
                return self._validation_error_response(request.error, logger)

            handler_input = HandlerInput(
                user_id=get_user_id(event),
                request_id=get_request_context(event).get('requestId') or get_trace_request_id(event) or '',
                logger=logger,
                data=request.value,
            )
            outcome = self.func(handler_input)
            if inspect.isawaitable(outcome):
                outcome = await outcome
            if not isinstance(outcome, Result):
                raise TypeError(f'Handler returned {type(outcome).__name__}, expected a Result')
            return outcome.fold(
                lambda value: self._response(HTTPStatus.OK.value, value),
                self._error_response,
            )
        except Exception as exc:
            logger.exception('Uncontrolled error caught in wrapper', extra={'error': str(exc)})
            return self._response(
                HTTPStatus.INTERNAL_SERVER_ERROR.value,
                ErrorMessage(message=StatusError.internal().message).model_dump(exclude_none=True),
            )

    def __call__(self, event: Dict[str, Any], context: Optional[LambdaContext] = None) -> Dict[str, Any]:
        return asyncio.run(self.handle(event)).to_dict()


def api_gateway_handler(
    validator: Validator,
    func: Optional[BusinessFunction] = None,
    *,
    logger: Optional[Logger] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Union[ApiGatewayHandler, Callable[[BusinessFunction], ApiGatewayHandler]]:
    """
    Wrap a business function into an API Gateway Lambda handler.

    Can be called directly or used as a decorator:

        @api_gateway_handler(validator(body=CreateItem))
        async def create_item(event: HandlerInput) -> Result[dict]:
            ...

    Args:
        validator: Validator run on every request before the function
        func: Business function receiving a ``HandlerInput``
        logger: Base logger; defaults to ``get_logger()``, built on first use
        headers: Extra response headers; defaults to the configured ones

    Returns:
        ``ApiGatewayHandler``, or a decorator producing one when ``func`` is omitted
    """
    if func is None:
        return lambda wrapped: ApiGatewayHandler(validator, wrapped, logger=logger, headers=headers)
    return ApiGatewayHandler(validator, func, logger=logger, headers=headers)
