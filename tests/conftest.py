"""
pytest configuration and fixtures.
"""

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from restassert.http import HTTPStatus, InMemoryHttpResponse, ResponseBuilder


@pytest.fixture
def builder() -> ResponseBuilder:
    """Fresh response builder, 200 OK by default."""
    return ResponseBuilder()


@pytest.fixture
def json_response() -> InMemoryHttpResponse:
    """Typical JSON API response."""
    return (ResponseBuilder()
        .status(HTTPStatus.OK)
        .json({"id": 1, "name": "john", "roles": ["admin", "dev"]})
        .header("ETag", '"abc"')
        .header("Cache-Control", "no-cache, no-store")
        .header("X-Content-Type-Options", "nosniff")
        .build())


@pytest.fixture
def secured_response() -> InMemoryHttpResponse:
    """Response carrying the usual security headers."""
    return (ResponseBuilder()
        .html("<html></html>")
        .header("X-Frame-Options", "SAMEORIGIN")
        .header("X-XSS-Protection", "1; mode=block")
        .header("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        .header("Content-Security-Policy", "default-src 'self'; script-src 'self' https://cdn.example.com")
        .build())


@pytest.fixture
def cookie_response() -> InMemoryHttpResponse:
    """Response setting two cookies."""
    return (ResponseBuilder()
        .cookie("id=42; Domain=example.com; Path=/; Secure; HttpOnly; Max-Age=3600")
        .cookie("theme=dark; Path=/")
        .build())


@pytest.fixture
def empty_response() -> InMemoryHttpResponse:
    """Response without any header."""
    return InMemoryHttpResponse()
