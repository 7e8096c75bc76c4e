"""
Result and status error types shared by validators and business functions.

A ``Result`` is either a ``Success`` carrying a value or a ``Failure`` carrying
a ``StatusError``. Expected failures travel as values; only unexpected errors
are raised.
"""

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar('T')
U = TypeVar('U')
R = TypeVar('R')


def _reason_phrase(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return 'Error'


class StatusError(Exception):
    """Error with an HTTP status, a client-facing message and optional details."""

    def __init__(self, status: int, message: Optional[str] = None, details: Optional[str] = None):
        self.status = int(status)
        self.message = message if message is not None else _reason_phrase(self.status)
        self.details = details
        super().__init__(self.message)

    def with_details(self, details: Optional[str]) -> 'StatusError':
        return StatusError(self.status, self.message, details)

    def to_dict(self) -> Dict[str, Any]:
        return {'status': self.status, 'message': self.message, 'details': self.details}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatusError):
            return NotImplemented
        return (self.status, self.message, self.details) == (other.status, other.message, other.details)

    def __hash__(self) -> int:
        return hash((self.status, self.message, self.details))

    def __repr__(self) -> str:
        return f'StatusError(status={self.status!r}, message={self.message!r}, details={self.details!r})'

    @classmethod
    def bad_request(cls, message: Optional[str] = None) -> 'StatusError':
        return cls(HTTPStatus.BAD_REQUEST, message)

    @classmethod
    def unauthorized(cls, message: Optional[str] = None) -> 'StatusError':
        return cls(HTTPStatus.UNAUTHORIZED, message)

    @classmethod
    def forbidden(cls, message: Optional[str] = None) -> 'StatusError':
        return cls(HTTPStatus.FORBIDDEN, message)

    @classmethod
    def not_found(cls, message: Optional[str] = None) -> 'StatusError':
        return cls(HTTPStatus.NOT_FOUND, message)

    @classmethod
    def conflict(cls, message: Optional[str] = None) -> 'StatusError':
        return cls(HTTPStatus.CONFLICT, message)

    @classmethod
    def internal(cls, message: Optional[str] = None) -> 'StatusError':
        return cls(HTTPStatus.INTERNAL_SERVER_ERROR, message)


class Result(Generic[T]):
    """Outcome of an operation: ``Success`` XOR ``Failure``."""

    @staticmethod
    def of(value: U) -> 'Success[U]':
        return Success(value)

    @staticmethod
    def failure(error: StatusError) -> 'Failure[Any]':
        return Failure(error)

    @property
    def is_success(self) -> bool:
        raise NotImplementedError

    def fold(self, on_success: Callable[[T], R], on_failure: Callable[[StatusError], R]) -> R:
        raise NotImplementedError

    def map(self, fn: Callable[[T], U]) -> 'Result[U]':
        return self.fold(lambda value: Success(fn(value)), Failure)

    def unwrap(self) -> T:
        """Return the success value, or raise the carried ``StatusError``."""

        def _raise(error: StatusError) -> T:
            raise error

        return self.fold(lambda value: value, _raise)


@dataclass(frozen=True)
class Success(Result[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def fold(self, on_success: Callable[[T], R], on_failure: Callable[[StatusError], R]) -> R:
        return on_success(self.value)


@dataclass(frozen=True)
class Failure(Result[T]):
    error: StatusError

    @property
    def is_success(self) -> bool:
        return False

    def fold(self, on_success: Callable[[T], R], on_failure: Callable[[StatusError], R]) -> R:
        return on_failure(self.error)
