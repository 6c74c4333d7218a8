"""
Unit tests for the endpoint builder.
"""

from enum import Enum

import pytest

from signed_rest import Endpoint, InvalidURLError


class Version(Enum):
    V1 = "v1"


class Controller(Enum):
    USERS = "users"


class TestEndpoint:
    """Test endpoint building and validation."""

    def test_path_parameters(self):
        """Test placeholder substitution in paths."""
        endpoint = Endpoint().with_path("v1/users/{id}", {"id": "42"})

        assert endpoint.build() == "/v1/users/42"

    def test_version_and_controller(self):
        """Test version and controller segments."""
        endpoint = Endpoint().with_version("v1").with_controller("users").with_path("{id}", {"id": "7"})

        assert endpoint.build() == "/v1/users/7"

    def test_enum_segments(self):
        """Test string-valued enum members as segments."""
        endpoint = Endpoint().with_version(Version.V1).with_controller(Controller.USERS)

        assert endpoint.build() == "/v1/users"

    def test_query(self):
        """Test query parameters are appended and encoded."""
        endpoint = Endpoint().with_path("search").with_query({"q": "ann smith", "page": "2"})

        assert endpoint.build() == "/search?q=ann+smith&page=2"

    def test_builder_is_immutable(self):
        """Test that each step returns a new endpoint."""
        base = Endpoint().with_version("v1")
        users = base.with_controller("users")
        orders = base.with_controller("orders")

        assert base.url == "/v1"
        assert users.url == "/v1/users"
        assert orders.url == "/v1/orders"

    def test_finalize_alias(self):
        """Test finalize is the same as build."""
        endpoint = Endpoint("/health")
        assert endpoint.finalize() == endpoint.build() == "/health"
        assert str(endpoint) == "/health"

    def test_empty_endpoint(self):
        """Test an empty endpoint builds to an empty path."""
        assert Endpoint().build() == ""

    @pytest.mark.parametrize("url", [
        "/users/{id}",
        "/users/a b",
        "/users/\n",
        "/users/%zz",
        "/users/<script>",
        "http://[::1/users",
        "http://host:port/users",
    ])
    def test_invalid_url(self, url):
        """Test that malformed URLs fail to build."""
        with pytest.raises(InvalidURLError) as exc_info:
            Endpoint(url).build()

        assert exc_info.value.url == url

    def test_unreplaced_placeholder(self):
        """Test that a missing path parameter makes the URL invalid."""
        endpoint = Endpoint().with_path("users/{id}", {"other": "1"})

        with pytest.raises(InvalidURLError):
            endpoint.build()
