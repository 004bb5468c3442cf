"""
Slack Response Formatter

Wraps plain text in a Block Kit message and writes it out.
No retries. Never raises: something is always written.
"""

import logging

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from bot.adapter import ResponseWriter

from .schemas import BlocksMessage, SectionBlock, TextObject

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json"


def render_blocks(content: str) -> bytes:
    """Serialize content as a single mrkdwn section block."""
    message = BlocksMessage(
        blocks=[SectionBlock(text=TextObject(type="mrkdwn", text=content))]
    )
    return message.model_dump_json().encode("utf-8")


def send_response(content: str, writer: ResponseWriter) -> None:
    """
    Write content to Slack as a Block Kit message.

    Args:
        content: Slack mrkdwn text
        writer: Outbound channel (headers + body)
    """
    writer.headers["Content-Type"] = CONTENT_TYPE
    try:
        data = render_blocks(content)
    except (ValidationError, PydanticSerializationError, UnicodeError) as e:
        logger.error(f"Failed to serialize Slack response: {e}", exc_info=True)
        writer.write(str(e).encode("utf-8", errors="replace"))
        return
    writer.write(data)
