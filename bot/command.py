"""
Bot Command Model

PURE DATA MODELS - NO LOGIC

The structured result of one inbound chat command. Every chat adapter
produces a Command; the executor consumes it. Payloads are tagged unions
so "exactly one action" and "exactly one target" hold structurally.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# SUBSCRIPTION TARGETS
# ============================================================================

class AppTarget(BaseModel):
    """Subscription scoped to a single application."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["app"] = "app"
    name: str = Field(..., min_length=1, description="Application name")


class ProjectTarget(BaseModel):
    """Subscription scoped to every application of a project."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["proj"] = "proj"
    name: str = Field(..., min_length=1, description="Project name")


SubscriptionTarget = Annotated[
    Union[AppTarget, ProjectTarget],
    Field(discriminator="kind"),
]


class UpdateSubscription(BaseModel):
    """Subscribe/unsubscribe payload: one target plus an optional trigger."""

    model_config = ConfigDict(frozen=True)

    target: SubscriptionTarget
    trigger: str = Field(
        default="",
        description="Trigger name. Empty means all triggers.",
    )

    @property
    def app(self) -> Optional[str]:
        return self.target.name if isinstance(self.target, AppTarget) else None

    @property
    def project(self) -> Optional[str]:
        return self.target.name if isinstance(self.target, ProjectTarget) else None


# ============================================================================
# ACTIONS
# ============================================================================

class ListSubscriptions(BaseModel):
    """List subscriptions of the recipient channel."""

    model_config = ConfigDict(frozen=True)

    action: Literal["list-subscriptions"] = "list-subscriptions"


class Subscribe(BaseModel):
    """Subscribe the recipient channel."""

    model_config = ConfigDict(frozen=True)

    action: Literal["subscribe"] = "subscribe"
    update: UpdateSubscription


class Unsubscribe(BaseModel):
    """Unsubscribe the recipient channel."""

    model_config = ConfigDict(frozen=True)

    action: Literal["unsubscribe"] = "unsubscribe"
    update: UpdateSubscription


CommandAction = Annotated[
    Union[ListSubscriptions, Subscribe, Unsubscribe],
    Field(discriminator="action"),
]


# ============================================================================
# COMMAND (THE CONTRACT)
# ============================================================================

class Command(BaseModel):
    """
    A parsed chat command.

    Created fresh per request and handed straight to the executor.
    The executor never knows which chat platform it came from beyond
    the verified service identity.
    """

    model_config = ConfigDict(frozen=True)

    service: str = Field(..., description="Identity of the calling integration")
    recipient: str = Field(..., min_length=1, description="Target channel name")
    action: CommandAction

    @property
    def list_subscriptions(self) -> Optional[ListSubscriptions]:
        return self.action if isinstance(self.action, ListSubscriptions) else None

    @property
    def subscribe(self) -> Optional[UpdateSubscription]:
        return self.action.update if isinstance(self.action, Subscribe) else None

    @property
    def unsubscribe(self) -> Optional[UpdateSubscription]:
        return self.action.update if isinstance(self.action, Unsubscribe) else None
