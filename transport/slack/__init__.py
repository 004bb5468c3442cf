"""Slack Transport Layer - Module Exports"""

from bot.errors import (
    AuthenticationError,
    CommandParseError,
    MalformedRequestError,
    MissingChannelError,
    RequestIOError,
    UsageError,
)
from .parser import SlackAdapter, decode_form
from .response import send_response
from .schemas import BlocksMessage, SectionBlock, TextObject, VerifiedQuery
from .security import RequestVerifier, compute_signature, create_slack_verifier
from .usage import (
    DEFAULT_BOT_COMMAND,
    DEFAULT_USAGE_TEMPLATES,
    UsageCatalog,
    usage_instructions,
)

__all__ = [
    # Errors
    "CommandParseError",
    "AuthenticationError",
    "RequestIOError",
    "MalformedRequestError",
    "MissingChannelError",
    "UsageError",
    # Schemas
    "VerifiedQuery",
    "BlocksMessage",
    "SectionBlock",
    "TextObject",
    # Security
    "RequestVerifier",
    "create_slack_verifier",
    "compute_signature",
    # Usage
    "UsageCatalog",
    "usage_instructions",
    "DEFAULT_USAGE_TEMPLATES",
    "DEFAULT_BOT_COMMAND",
    # Adapter
    "SlackAdapter",
    "decode_form",
    "send_response",
]
