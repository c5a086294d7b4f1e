"""Tests for the application factory and its startup checks."""

import pytest
from unittest.mock import MagicMock, patch
from fastapi.testclient import TestClient

from api import create_app
from shared.config import Settings
from shared.exceptions import ConfigurationError


def configured_settings(**overrides):
    values = {"mongo_url": "mongodb://localhost:27017", "jwt_secret": "s3cret"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestCreateApp:
    def test_mounts_route_groups(self):
        paths = {route.path for route in create_app().routes}
        assert "/api/health" in paths
        assert "/api/v1/auth/login" in paths
        assert "/api/v1/auth/order-status/{order_id}" in paths
        assert "/api/v1/user/all-users" in paths
        assert "/api/v1/category/get-category" in paths
        assert "/api/v1/product/product-photo/{pid}" in paths

    def test_docs_only_in_debug(self):
        with patch("api.app.get_settings", return_value=configured_settings(debug=True)):
            app = create_app()
        assert app.docs_url == "/api/docs"
        with patch("api.app.get_settings", return_value=configured_settings(debug=False)):
            app = create_app()
        assert app.docs_url is None


class TestLifespan:
    @patch("api.app.get_container")
    @patch("api.app.get_settings")
    def test_startup_creates_indexes(self, mock_settings, mock_container):
        mock_settings.return_value = configured_settings()
        container = MagicMock()
        mock_container.return_value = container

        with TestClient(create_app()) as client:
            assert client.get("/api/health").status_code == 200

        container.user_repository.ensure_indexes.assert_called_once()
        container.category_repository.ensure_indexes.assert_called_once()

    @patch("api.app.get_container")
    @patch("api.app.get_settings")
    def test_missing_configuration_is_fatal(self, mock_settings, mock_container):
        mock_settings.return_value = configured_settings(jwt_secret="")

        with pytest.raises(ConfigurationError):
            with TestClient(create_app()):
                pass

        mock_container.assert_not_called()
