from __future__ import annotations

from typing import Any

import pytest
import resend
from loguru import logger


@pytest.fixture
def mail_env(monkeypatch):
    monkeypatch.setenv("RESEND_API_KEY", "re_test_key")
    monkeypatch.setenv("PLAN_MAIL_FROM", "plans@example.com")
    monkeypatch.delenv("PLAN_MAIL_SUBJECT", raising=False)
    monkeypatch.delenv("PLAN_MAIL_BCC", raising=False)
    monkeypatch.delenv("PLAN_MAIL_REPLY_TO", raising=False)


@pytest.fixture
def sent_emails(monkeypatch, mail_env) -> list[dict[str, Any]]:
    sent: list[dict[str, Any]] = []

    def fake_send(params):
        sent.append(params)
        return {"id": f"email_{len(sent)}"}

    monkeypatch.setattr(resend.Emails, "send", staticmethod(fake_send))
    return sent


@pytest.fixture
def failing_resend(monkeypatch, mail_env) -> list[dict[str, Any]]:
    attempts: list[dict[str, Any]] = []

    def fake_send(params):
        attempts.append(params)
        raise RuntimeError("422 validation_error: invalid from address")

    monkeypatch.setattr(resend.Emails, "send", staticmethod(fake_send))
    return attempts


@pytest.fixture
def log_records():
    records: list[Any] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
