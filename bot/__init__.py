"""Bot core - Module Exports"""

from .adapter import BufferedResponseWriter, ChatAdapter, ResponseWriter
from .command import (
    AppTarget,
    Command,
    ListSubscriptions,
    ProjectTarget,
    Subscribe,
    Unsubscribe,
    UpdateSubscription,
)
from .errors import (
    AuthenticationError,
    CommandParseError,
    MalformedRequestError,
    MissingChannelError,
    RequestIOError,
    UsageError,
)
from .executor import CommandExecutor, StubCommandExecutor

__all__ = [
    # Model
    "Command",
    "ListSubscriptions",
    "Subscribe",
    "Unsubscribe",
    "UpdateSubscription",
    "AppTarget",
    "ProjectTarget",
    # Errors
    "CommandParseError",
    "AuthenticationError",
    "RequestIOError",
    "MalformedRequestError",
    "MissingChannelError",
    "UsageError",
    # Adapter
    "ChatAdapter",
    "ResponseWriter",
    "BufferedResponseWriter",
    # Executor
    "CommandExecutor",
    "StubCommandExecutor",
]
