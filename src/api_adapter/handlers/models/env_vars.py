"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables read by the
API Gateway adapter.
"""

from typing import Annotated, Any, Dict

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field, field_validator


class AdapterEnvVars(BaseModel):
    """Environment variables for the API Gateway adapter."""

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        description='Service name for AWS Powertools',
        min_length=1
    )] = 'api-adapter'

    # Log level for AWS Powertools Logger
    LOG_LEVEL: Annotated[str, Field(
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    # Empty means no CORS header
    CORS_ALLOW_ORIGIN: Annotated[str, Field(
        description='Value of the Access-Control-Allow-Origin response header'
    )] = ''

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        """Accept lowercase levels, as powertools does."""
        return v.upper() if isinstance(v, str) else v

    def default_headers(self) -> Dict[str, str]:
        """Headers added to every response on top of the content type."""
        if not self.CORS_ALLOW_ORIGIN:
            return {}
        return {'Access-Control-Allow-Origin': self.CORS_ALLOW_ORIGIN}


def get_adapter_env_vars() -> AdapterEnvVars:
    """
    Get typed environment variables for the adapter.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=AdapterEnvVars)
