"""
Slack Slash Command Parser

Turns a verified Slack slash command request into a Command.

Flow:
  read body → verify signature → decode form → channel → tokenize → Command

Grammar:
  list-subscriptions
  subscribe   [app:|proj:]<name> [trigger]
  unsubscribe [app:|proj:]<name> [trigger]
"""

import logging
import re
from typing import Dict, List, Optional
from urllib.parse import parse_qs

from fastapi import Request

from bot.adapter import ChatAdapter, ResponseWriter
from bot.command import (
    AppTarget,
    Command,
    ListSubscriptions,
    ProjectTarget,
    Subscribe,
    Unsubscribe,
    UpdateSubscription,
)
from bot.errors import (
    AuthenticationError,
    MalformedRequestError,
    MissingChannelError,
    RequestIOError,
    UsageError,
)

from .response import send_response
from .schemas import VerifiedQuery
from .security import RequestVerifier
from .usage import DEFAULT_BOT_COMMAND, UsageCatalog, usage_instructions

logger = logging.getLogger(__name__)

LIST_SUBSCRIPTIONS = "list-subscriptions"
SUBSCRIBE = "subscribe"
UNSUBSCRIBE = "unsubscribe"

_INVALID_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_form(body: bytes) -> Dict[str, List[str]]:
    """
    Decode an application/x-www-form-urlencoded body.

    Raises:
        MalformedRequestError: Not UTF-8, bad percent escape or `;` separator
    """
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedRequestError(f"request body is not valid UTF-8: {e}")

    if ";" in text:
        raise MalformedRequestError("invalid semicolon separator in request body")

    match = _INVALID_ESCAPE.search(text)
    if match:
        raise MalformedRequestError(
            f"invalid URL escape {text[match.start():match.start() + 3]!r}"
        )

    try:
        return parse_qs(text, keep_blank_values=True, errors="strict")
    except (UnicodeDecodeError, ValueError) as e:
        raise MalformedRequestError(f"invalid form encoding: {e}")


class SlackAdapter(ChatAdapter):
    """
    Slack slash command adapter.

    The verifier and usage catalog are injected so tests can substitute
    deterministic stubs.
    """

    def __init__(
        self,
        verifier: RequestVerifier,
        catalog: UsageCatalog,
        default_bot_command: str = DEFAULT_BOT_COMMAND,
    ):
        self.verifier = verifier
        self.catalog = catalog
        self.default_bot_command = default_bot_command

    def usage(
        self,
        query: VerifiedQuery,
        command: str = "",
        error: Optional[Exception] = None,
    ) -> UsageError:
        return UsageError(
            usage_instructions(
                query, command, error, self.catalog, self.default_bot_command
            )
        )

    async def parse_query(self, request: Request) -> VerifiedQuery:
        """
        Read, verify and decode the request body.

        Raises:
            RequestIOError: Body could not be read
            AuthenticationError: Verifier rejected the request
            MalformedRequestError: Body is not form encoded
        """
        try:
            body = await request.body()
        except Exception as e:
            raise RequestIOError(f"failed to read request body: {e}") from e

        try:
            service = self.verifier(body, request.headers)
        except Exception as e:
            raise AuthenticationError(f"failed to verify request signature: {e}") from e

        return VerifiedQuery(service=service, values=decode_form(body))

    async def parse(self, request: Request) -> Command:
        """
        Parse a Slack slash command request.

        Returns:
            Command with recipient and exactly one action

        Raises:
            UsageError: Empty, unknown or malformed command (show verbatim)
            MissingChannelError: No channel_name
            AuthenticationError, RequestIOError, MalformedRequestError
        """
        query = await self.parse_query(request)

        channel = query.get("channel_name")
        if not channel:
            raise MissingChannelError("request does not have channel")

        parts = query.get("text").split()
        if not parts:
            raise self.usage(query)

        command = parts[0]

        if command == LIST_SUBSCRIPTIONS:
            action = ListSubscriptions()
        elif command in (SUBSCRIBE, UNSUBSCRIBE):
            update = self._parse_update(query, command, parts)
            if command == SUBSCRIBE:
                action = Subscribe(update=update)
            else:
                action = Unsubscribe(update=update)
        else:
            raise self.usage(query)

        logger.info(
            "Parsed slash command",
            extra={
                "service": query.service,
                "channel": channel,
                "command": command,
            },
        )

        return Command(service=query.service, recipient=channel, action=action)

    def _parse_update(
        self,
        query: VerifiedQuery,
        command: str,
        parts: List[str],
    ) -> UpdateSubscription:
        if len(parts) < 2:
            raise self.usage(
                query, command, ValueError("at least one argument expected")
            )

        name_arg = parts[1]
        name_parts = name_arg.split(":")
        if len(name_parts) == 1:
            name_parts = ["app"] + name_parts
        kind, name = name_parts[0], name_parts[1]

        if not name or kind not in ("app", "proj"):
            raise self.usage(
                query, command, ValueError(f"incorrect name argument: {name_arg}")
            )

        target = AppTarget(name=name) if kind == "app" else ProjectTarget(name=name)
        trigger = parts[2] if len(parts) > 2 else ""
        return UpdateSubscription(target=target, trigger=trigger)

    def send_response(self, content: str, writer: ResponseWriter) -> None:
        send_response(content, writer)
