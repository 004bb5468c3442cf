"""
Chat command parsing errors.

Only UsageError is meant for the chat channel. Every other error means
the request could not be serviced at all.
"""


class CommandParseError(Exception):
    """Base class for everything Parse can raise."""
    pass


class AuthenticationError(CommandParseError):
    """Signature, timestamp or shared-secret check failed. Never retried."""
    pass


class RequestIOError(CommandParseError, IOError):
    """Request body could not be read."""
    pass


class MalformedRequestError(CommandParseError):
    """Request body is not valid form encoding."""
    pass


class MissingChannelError(CommandParseError):
    """Request has no channel_name."""
    pass


class UsageError(CommandParseError):
    """
    Designed user-facing outcome.

    The message is the complete, rendered help text to show verbatim.
    """

    def __init__(self, usage: str):
        super().__init__(usage)
        self.usage = usage
