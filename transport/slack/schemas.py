"""
Slack Transport Layer - Schemas

PURE DATA MODELS - NO LOGIC
Inbound: the verified, decoded slash command form.
Outbound: the Block Kit message envelope.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Literal

from pydantic import BaseModel, Field


# ============================================================================
# VERIFIED QUERY (INPUT)
# ============================================================================

@dataclass(frozen=True)
class VerifiedQuery:
    """
    Form parameters of a request whose signature has been verified.

    Multi-valued: a parameter sent twice keeps both values in order.
    Scoped to one request.
    """

    service: str
    values: Dict[str, List[str]] = field(default_factory=dict)

    def get(self, name: str) -> str:
        """First value of a parameter, or "" when absent."""
        values = self.values.get(name)
        if not values:
            return ""
        return values[0]


# ============================================================================
# BLOCK KIT MESSAGE (OUTPUT)
# ============================================================================

class TextObject(BaseModel):
    """Block Kit text object."""
    type: Literal["mrkdwn", "plain_text"] = "mrkdwn"
    text: str


class SectionBlock(BaseModel):
    """Block Kit section block."""
    type: Literal["section"] = "section"
    text: TextObject


class BlocksMessage(BaseModel):
    """
    Message body Slack renders in the channel.

    ref: https://api.slack.com/reference/block-kit/blocks
    """
    blocks: List[SectionBlock] = Field(..., description="Message blocks")
