"""
Bot Webhook Tests

End-to-end flow: signed Slack request → parse → executor → Block Kit response.
"""

import json
from urllib.parse import urlencode
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bot import CommandExecutor, StubCommandExecutor
from main import app
from transport.slack import SlackAdapter, UsageCatalog, compute_signature, create_slack_verifier
from webhook.bot import create_bot_router

SECRET = "test_secret"
NOW = 1_700_000_000


def build_client(executor: CommandExecutor = None) -> TestClient:
    verifier = create_slack_verifier(SECRET, clock=lambda: NOW)
    adapters = {"slack": SlackAdapter(verifier, UsageCatalog())}
    test_app = FastAPI()
    test_app.include_router(create_bot_router(adapters, executor or StubCommandExecutor()))
    return TestClient(test_app)


def signed_post(client: TestClient, body: bytes, secret: str = SECRET, path="/webhook/slack"):
    ts = str(NOW)
    return client.post(
        path,
        content=body,
        headers={
            "Content-Type": "application/x-www-form-urlencoded",
            "X-Slack-Request-Timestamp": ts,
            "X-Slack-Signature": compute_signature(secret, ts, body),
        },
    )


def block_text(response) -> str:
    return json.loads(response.content)["blocks"][0]["text"]["text"]


@pytest.fixture
def client():
    return build_client()


class TestCommandFlow:
    """Successful commands reach the executor."""

    def test_subscribe(self, client):
        body = urlencode({"channel_name": "general", "text": "subscribe app:guestbook"}).encode()

        response = signed_post(client, body)

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert block_text(response) == (
            ":white_check_mark: Channel `general` subscribed to "
            "application `guestbook` (all triggers)."
        )

    def test_executor_receives_command(self):
        executor = MagicMock(spec=CommandExecutor)
        executor.execute.return_value = "done"
        client = build_client(executor)
        body = urlencode({"channel_name": "ops", "text": "unsubscribe proj:default on-deployed"}).encode()

        response = signed_post(client, body)

        assert block_text(response) == "done"
        command = executor.execute.call_args.args[0]
        assert command.service == "slack"
        assert command.recipient == "ops"
        assert command.unsubscribe.project == "default"
        assert command.unsubscribe.trigger == "on-deployed"


class TestUsageFlow:
    """Usage errors are rendered, not failed."""

    def test_empty_text_returns_help(self, client):
        body = urlencode({"channel_name": "general", "text": "", "command": "/argocd"}).encode()

        response = signed_post(client, body)

        assert response.status_code == 200
        assert block_text(response).startswith(":wave: Need some help with `/argocd`?")

    def test_bad_argument_returns_command_help(self, client):
        body = urlencode({"channel_name": "general", "text": "subscribe cluster:x"}).encode()

        response = signed_post(client, body)

        assert response.status_code == 200
        assert block_text(response).startswith("incorrect name argument: cluster:x\n")


class TestErrorFlow:
    """Failures map to generic HTTP errors."""

    def test_invalid_signature_returns_401(self, client):
        body = urlencode({"channel_name": "general", "text": "list-subscriptions"}).encode()

        response = signed_post(client, body, secret="wrong")

        assert response.status_code == 401
        assert response.json() == {"detail": "Request verification failed"}

    def test_missing_channel_returns_400(self, client):
        body = urlencode({"text": "list-subscriptions"}).encode()

        response = signed_post(client, body)

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid request"}

    def test_malformed_body_returns_400(self, client):
        response = signed_post(client, b"channel_name=general&text=%zz")

        assert response.status_code == 400

    def test_unknown_adapter_returns_404(self, client):
        body = urlencode({"channel_name": "general", "text": "list-subscriptions"}).encode()

        response = signed_post(client, body, path="/webhook/teams")

        assert response.status_code == 404

    def test_executor_failure_returns_500(self):
        executor = MagicMock(spec=CommandExecutor)
        executor.execute.side_effect = RuntimeError("storage unavailable")
        client = build_client(executor)
        body = urlencode({"channel_name": "general", "text": "list-subscriptions"}).encode()

        response = signed_post(client, body)

        assert response.status_code == 500
        assert response.json() == {"detail": "Command execution failed"}


class TestApplication:
    """Application wiring."""

    def test_health_live(self):
        response = TestClient(app).get("/health/live")

        assert response.status_code == 200
        assert response.json() == {"status": "alive"}

    def test_slack_route_mounted(self):
        """Unsigned requests to the real app are rejected, not 404."""
        response = TestClient(app).post(
            "/webhook/slack",
            content=b"channel_name=general&text=list-subscriptions",
        )

        assert response.status_code == 401
