"""Tests for route configuration."""

import pytest
from pydantic import ValidationError

from reqview.models.route import RouteConfig


class TestRouteConfig:
    """Tests for RouteConfig construction."""

    def test_from_template(self) -> None:
        """Verify placeholders map to their segment index."""
        config = RouteConfig.from_template("/users/:id/profile")
        assert config.request_params == {"id": 2}
        assert config.template == "/users/:id/profile"

    def test_multiple_placeholders(self) -> None:
        """Verify every placeholder is recorded."""
        config = RouteConfig.from_template("/orgs/:org/repos/:repo")
        assert config.request_params == {"org": 2, "repo": 4}

    def test_static_template(self) -> None:
        """Verify templates without placeholders give an empty mapping."""
        assert RouteConfig.from_template("/health").request_params == {}

    def test_index_of(self) -> None:
        """Verify lookups by name."""
        config = RouteConfig.from_template("/users/:id")
        assert config.index_of("id") == 2
        assert config.index_of("missing") is None

    def test_duplicate_placeholder(self) -> None:
        """Verify duplicate names are rejected."""
        with pytest.raises(ValueError, match="Duplicate placeholder"):
            RouteConfig.from_template("/a/:id/b/:id")

    def test_empty_placeholder(self) -> None:
        """Verify a bare ':' segment is rejected."""
        with pytest.raises(ValueError, match="Empty placeholder"):
            RouteConfig.from_template("/a/:/b")

    def test_negative_index_rejected(self) -> None:
        """Verify indexes must be non-negative."""
        with pytest.raises(ValidationError):
            RouteConfig(request_params={"id": -1})
