"""Shared fixtures for contact form tests."""

import json
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest

from contact_form.captcha import CaptchaResult
from contact_form.config import ContactFormConfig
from contact_form.handler import ContactFormHandler


def _make_event(
    body: Optional[Dict[str, Any]] = None,
    method: str = "POST",
    origin: Optional[str] = "https://example.com",
    raw_body: Optional[str] = None,
) -> Dict[str, Any]:
    """Build an HTTP API (payload v2) proxy event."""
    headers = {"content-type": "application/json"}
    if origin is not None:
        headers["origin"] = origin

    return {
        "headers": headers,
        "requestContext": {"http": {"method": method}},
        "body": raw_body if raw_body is not None else json.dumps(body or {}),
        "isBase64Encoded": False,
    }


@pytest.fixture
def valid_body() -> Dict[str, Any]:
    return {
        "name": "Jan Kowalski",
        "email": "jan@example.com",
        "subject": "Oferta",
        "message": "Dzień dobry,\nproszę o kontakt.",
        "cf-turnstile-response": "token-123",
        "privacy_policy": True,
    }


@pytest.fixture
def config() -> ContactFormConfig:
    return ContactFormConfig(
        sender_email="noreply@example.com",
        recipient_email="office@example.com",
        captcha_secret="secret-key",
        region="eu-west-1",
        environment="prod",
    )


@pytest.fixture
def verifier() -> MagicMock:
    mock = MagicMock()
    mock.verify.return_value = CaptchaResult(success=True, raw={"success": True})
    return mock


@pytest.fixture
def sender() -> MagicMock:
    mock = MagicMock()
    mock.send.return_value = "message-id-1"
    return mock


@pytest.fixture
def handler(config, verifier, sender) -> ContactFormHandler:
    return ContactFormHandler(config, verifier=verifier, sender=sender)


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so boto3 never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")


@pytest.fixture
def make_event():
    return _make_event
