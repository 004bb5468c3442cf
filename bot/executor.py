"""
Command executor abstract interface.

The executor owns subscription storage. This package only defines the
boundary and a deterministic stub for tests and offline development.
"""

import logging
from abc import ABC, abstractmethod

from .command import Command, UpdateSubscription

logger = logging.getLogger(__name__)


class CommandExecutor(ABC):
    """Performs a parsed Command and returns the text to show the user."""

    @abstractmethod
    def execute(self, command: Command) -> str:
        """
        Execute a command.

        Args:
            command: Fully validated Command

        Returns:
            Human-readable result (Slack mrkdwn)
        """
        raise NotImplementedError


def describe_subscription(update: UpdateSubscription) -> str:
    """Render a subscription target the way users type it."""
    if update.project is not None:
        target = f"project `{update.project}`"
    else:
        target = f"application `{update.app}`"
    trigger = f"trigger `{update.trigger}`" if update.trigger else "all triggers"
    return f"{target} ({trigger})"


class StubCommandExecutor(CommandExecutor):
    """
    Deterministic fake executor for testing and CI.

    Confirms the requested action without persisting anything.
    """

    def execute(self, command: Command) -> str:
        logger.debug(
            "Stub executing command",
            extra={
                "service": command.service,
                "recipient": command.recipient,
                "action": command.action.action,
            },
        )

        if command.list_subscriptions is not None:
            return f"No subscriptions recorded for channel `{command.recipient}`."

        if command.subscribe is not None:
            return (
                f":white_check_mark: Channel `{command.recipient}` subscribed to "
                f"{describe_subscription(command.subscribe)}."
            )

        return (
            f":white_check_mark: Channel `{command.recipient}` unsubscribed from "
            f"{describe_subscription(command.unsubscribe)}."
        )
