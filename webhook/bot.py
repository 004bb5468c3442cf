"""
Bot Webhook Handler

Receives chat platform slash commands and runs them through the executor.

Security:
  - Every adapter verifies its own request signature
  - Verification failures are logged and never retried

Request Flow:
  webhook → adapter.parse → executor.execute → adapter.send_response
"""

import logging
from typing import Mapping, Optional

from fastapi import APIRouter, HTTPException, Request, Response, status
from fastapi.concurrency import run_in_threadpool

from bot import (
    AuthenticationError,
    BufferedResponseWriter,
    ChatAdapter,
    CommandExecutor,
    MalformedRequestError,
    MissingChannelError,
    RequestIOError,
    StubCommandExecutor,
    UsageError,
)
from config import Config
from transport.slack import SlackAdapter, UsageCatalog, create_slack_verifier

logger = logging.getLogger(__name__)


def create_bot_router(
    adapters: Mapping[str, ChatAdapter],
    executor: CommandExecutor,
) -> APIRouter:
    """
    Build the webhook router.

    Args:
        adapters: Adapter per path segment, e.g. {"slack": SlackAdapter(...)}
        executor: Performs parsed commands

    Returns:
        APIRouter exposing POST /webhook/{adapter_name}
    """
    router = APIRouter(prefix="/webhook", tags=["Bot"])

    @router.post("/{adapter_name}")
    async def bot_webhook(adapter_name: str, request: Request) -> Response:
        """
        Receive a slash command.

        Returns:
            The adapter's rendered response (usage text or command result)

        Raises:
            HTTPException(404): Unknown adapter
            HTTPException(401): Request verification failed
            HTTPException(400): Unreadable or incomplete request
            HTTPException(500): Executor failed
        """
        adapter = adapters.get(adapter_name)
        if adapter is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown adapter: {adapter_name}"
            )

        writer = BufferedResponseWriter()

        try:
            command = await adapter.parse(request)
        except UsageError as e:
            adapter.send_response(e.usage, writer)
            return writer.to_response()
        except AuthenticationError as e:
            logger.warning(
                f"Rejected {adapter_name} request: {e}",
                extra={"adapter": adapter_name, "client": _client_host(request)},
            )
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Request verification failed"
            )
        except (MissingChannelError, MalformedRequestError, RequestIOError) as e:
            logger.warning(f"Invalid {adapter_name} request: {e}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid request"
            )

        try:
            result = await run_in_threadpool(executor.execute, command)
        except Exception as e:
            logger.error(f"Command execution failed: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Command execution failed"
            )

        logger.info(
            "Command executed",
            extra={
                "adapter": adapter_name,
                "service": command.service,
                "recipient": command.recipient,
            },
        )
        adapter.send_response(result, writer)
        return writer.to_response()

    return router


def _client_host(request: Request) -> Optional[str]:
    return request.client.host if request.client else None


def create_default_adapters(catalog: UsageCatalog) -> dict[str, ChatAdapter]:
    """Adapters configured from environment."""
    verifier = create_slack_verifier(
        Config.SLACK_SIGNING_SECRET,
        service=Config.SLACK_SERVICE_NAME,
        max_age_seconds=Config.SLACK_REQUEST_MAX_AGE,
    )
    return {
        "slack": SlackAdapter(verifier, catalog, default_bot_command=Config.BOT_COMMAND),
    }


# Built once at import; a broken usage template fails startup
usage_catalog = UsageCatalog()
router = create_bot_router(create_default_adapters(usage_catalog), StubCommandExecutor())
