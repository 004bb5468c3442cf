"""
Chat adapter abstract interface.

Role: chat platform request → Command, text → chat platform response.

Rules:
- No subscription state
- No retries
- Failures are explicit and typed
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, MutableMapping, Protocol

from fastapi import Request, Response

from .command import Command


class ResponseWriter(Protocol):
    """Outbound channel an adapter writes its rendered response to."""

    headers: MutableMapping[str, str]

    def write(self, data: bytes) -> None:
        ...


@dataclass
class BufferedResponseWriter:
    """
    ResponseWriter that collects headers and body in memory.

    Converted into a FastAPI Response once the adapter is done writing.
    """

    status_code: int = 200
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytearray = field(default_factory=bytearray)

    def write(self, data: bytes) -> None:
        self.body.extend(data)

    def to_response(self) -> Response:
        headers = dict(self.headers)
        media_type = headers.pop("Content-Type", None)
        return Response(
            content=bytes(self.body),
            status_code=self.status_code,
            headers=headers,
            media_type=media_type,
        )


class ChatAdapter(ABC):
    """
    Abstract chat platform boundary.
    The bot server depends ONLY on this interface.
    """

    @abstractmethod
    async def parse(self, request: Request) -> Command:
        """
        Authenticate and parse an inbound webhook request.

        Raises:
            CommandParseError subclasses. UsageError carries text meant
            to be shown to the user verbatim.
        """
        raise NotImplementedError

    @abstractmethod
    def send_response(self, content: str, writer: ResponseWriter) -> None:
        """Render content in the platform's message format and write it."""
        raise NotImplementedError
