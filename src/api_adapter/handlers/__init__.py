"""
Lambda handler layer: the API Gateway entry point, its configuration and logging.

``api_gateway`` is not re-exported here because the models import the logging
utilities from this package.
"""

from api_adapter.handlers.utils.observability import ContextLogger, child_logger, get_logger

__all__ = [
    "ContextLogger",
    "child_logger",
    "get_logger",
]
