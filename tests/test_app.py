"""Tests for settings, logging setup and the fixed records."""

import pydantic
import pytest
from fastapi.testclient import TestClient

from hello_api.core.config import Settings
from hello_api.core.logging import setup_logging
from hello_api import main
from hello_api.main import create_application
from hello_api.models.schemas.order import Order
from hello_api.services.catalog import ORDERS, USERS, get_orders, get_users


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("HELLO_API_PORT", raising=False)
        config = Settings(_env_file=None)
        assert config.PORT == 3000
        assert config.API_PREFIX == "/api"
        assert config.LOG_FILE is None

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("HELLO_API_LOG_LEVEL", "DEBUG")
        assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"


class TestLifespan:

    def test_startup_announces_port(self, log_messages):
        app = create_application(Settings(_env_file=None, PORT=3000))
        with TestClient(app):
            assert "Application is running on port 3000" in log_messages

    def test_shutdown_is_logged(self, log_messages):
        app = create_application(Settings(_env_file=None, PROJECT_NAME="Test API"))
        with TestClient(app):
            pass
        assert log_messages[-1] == "Test API shutting down..."


class TestLogging:

    def test_file_sink(self, tmp_path):
        log_file = tmp_path / "hello_api.log"
        logger = setup_logging(level="INFO", log_file=str(log_file))
        try:
            logger.info("written to file")
            logger.complete()
            assert "written to file" in log_file.read_text()
        finally:
            setup_logging()


class TestCatalog:

    def test_collections_are_fixed(self):
        assert get_users() is USERS
        assert get_orders() is ORDERS
        assert isinstance(USERS, tuple)
        assert isinstance(ORDERS, tuple)

    def test_records_are_immutable(self):
        with pytest.raises(pydantic.ValidationError):
            USERS[0].name = "changed"
        with pytest.raises(pydantic.ValidationError):
            ORDERS[0].quantity = 10

    def test_order_accepts_aliases(self):
        order = Order(id=9, userId=1, productId=2, quantity=3)
        assert order.user_id == 1
        assert order.model_dump(by_alias=True) == {
            "id": 9, "userId": 1, "productId": 2, "quantity": 3,
        }


class TestRun:

    def test_run_serves_app_without_access_log(self, monkeypatch):
        calls = []
        monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
        main.run()
        assert len(calls) == 1
        args, kwargs = calls[0]
        assert args == (main.app,)
        assert kwargs["port"] == main.settings.PORT
        assert kwargs["access_log"] is False
