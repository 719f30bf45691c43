"""요청 로깅 미들웨어 테스트.

Request logging middleware tests — masking and the standard-logger
fallback used when Axiom is not configured.
"""

import logging

import pytest
from httpx import AsyncClient

from scheduling_api.middleware.request_logging import mask_sensitive

LOGGER = "scheduling_api.requests"


class TestMaskSensitive:
    """민감 필드 마스킹 테스트."""

    def test_masks_nested_keys(self):
        data = {
            "username": "maria",
            "password": "secret",
            "profile": {"api_key": "abc", "name": "Maria"},
            "items": [{"access_token": "t"}],
        }
        assert mask_sensitive(data) == {
            "username": "maria",
            "password": "***",
            "profile": {"api_key": "***", "name": "Maria"},
            "items": [{"access_token": "***"}],
        }

    def test_non_container_passthrough(self):
        assert mask_sensitive("plain") == "plain"
        assert mask_sensitive(42) == 42


class TestRequestLogging:
    """표준 로거로 요청 이벤트 기록."""

    async def test_failed_login_is_logged_masked(self, client: AsyncClient, caplog: pytest.LogCaptureFixture):
        """실패한 요청은 WARNING, 비밀번호는 마스킹."""
        caplog.set_level(logging.INFO, logger=LOGGER)
        res = await client.post("/api/auth/login", json={"username": "nobody", "password": "pw"})
        assert res.status_code == 401

        records = [r for r in caplog.records if r.name == LOGGER]
        assert len(records) == 1
        record = records[0]
        assert record.levelno == logging.WARNING
        assert record.event["path"] == "/api/auth/login"
        assert record.event["status_code"] == 401
        assert record.event["request_body"] == {"username": "nobody", "password": "***"}
        assert record.event["error"] == "Invalid credentials"

    async def test_health_is_not_logged(self, client: AsyncClient, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.INFO, logger=LOGGER)
        await client.get("/health")
        assert not [r for r in caplog.records if r.name == LOGGER]

    async def test_success_is_info(self, client: AsyncClient, headers, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.INFO, logger=LOGGER)
        res = await client.get("/api/departments", params={"search": "cut"}, headers=headers)
        assert res.status_code == 200

        record = next(r for r in caplog.records if r.name == LOGGER)
        assert record.levelno == logging.INFO
        assert record.event["query_params"] == {"search": "cut"}
        assert "error" not in record.event
