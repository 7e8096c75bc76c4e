"""
Pytest configuration and shared fixtures for the API Gateway adapter.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import os
from typing import Any, Dict
from unittest.mock import Mock

import pytest


# Test environment configuration
@pytest.fixture(scope="session", autouse=True)
def test_environment():
    """Set up test environment variables."""
    os.environ.update({
        "POWERTOOLS_SERVICE_NAME": "test-api-adapter",
        "LOG_LEVEL": "DEBUG",
        # re-read the environment on every get_environment_variables call
        "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",
    })


@pytest.fixture
def base_logger() -> Mock:
    """Stand-in for the powertools base logger."""
    return Mock(name="base_logger")


@pytest.fixture
def api_gateway_event() -> Dict[str, Any]:
    """Create a sample API Gateway REST proxy event for testing."""
    return {
        "resource": "/items/{item_id}",
        "path": "/items/item-42",
        "httpMethod": "POST",
        "headers": {
            "Content-Type": "application/json",
            "User-Agent": "test-agent/1.0",
        },
        "body": '{"name": "Widget", "quantity": 3}',
        "requestContext": {
            "requestId": "test-request-id-123",
            "accountId": "123456789012",
            "stage": "test",
            "httpMethod": "POST",
            "path": "/test/items/item-42",
            "protocol": "HTTP/1.1",
            "requestTime": "01/Jan/2024:12:00:00 +0000",
            "requestTimeEpoch": 1704110400000,
            "identity": {
                "sourceIp": "127.0.0.1",
                "userAgent": "test-agent/1.0",
            },
        },
        "pathParameters": {"item_id": "item-42"},
        "queryStringParameters": {"limit": "10"},
        "multiValueQueryStringParameters": {"limit": ["10"]},
        "stageVariables": None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-lambda-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-lambda-function"
    context.memory_limit_in_mb = "512"
    context.aws_request_id = "lambda-request-id-456"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
