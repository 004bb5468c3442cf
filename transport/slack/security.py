"""
Slack Request Verification

SECURITY BOUNDARY - Verify Slack signing-secret signature.
No command parsing. No retries.
"""

import hashlib
import hmac
import time
from typing import Callable, Mapping

from bot.errors import AuthenticationError

# verify(raw_body, headers) -> service identity; raises AuthenticationError
RequestVerifier = Callable[[bytes, Mapping[str, str]], str]

SIGNATURE_HEADER = "X-Slack-Signature"
TIMESTAMP_HEADER = "X-Slack-Request-Timestamp"
SIGNATURE_VERSION = "v0"
DEFAULT_MAX_AGE_SECONDS = 300


def _header(headers: Mapping[str, str], name: str) -> str:
    value = headers.get(name)
    if value is None:
        lowered = name.lower()
        for key, candidate in headers.items():
            if key.lower() == lowered:
                return candidate
        return ""
    return value


def compute_signature(signing_secret: str, timestamp: str, body: bytes) -> str:
    """
    Compute the Slack v0 signature for a request.

    basestring = "v0:{timestamp}:{body}", signed with HMAC-SHA256.
    """
    basestring = f"{SIGNATURE_VERSION}:{timestamp}:".encode("utf-8") + body
    digest = hmac.new(
        key=signing_secret.encode("utf-8"),
        msg=basestring,
        digestmod=hashlib.sha256,
    ).hexdigest()
    return f"{SIGNATURE_VERSION}={digest}"


def create_slack_verifier(
    signing_secret: str,
    service: str = "slack",
    max_age_seconds: int = DEFAULT_MAX_AGE_SECONDS,
    clock: Callable[[], float] = time.time,
) -> RequestVerifier:
    """
    Build a RequestVerifier for Slack's signing secret scheme.

    Args:
        signing_secret: App signing secret from the Slack dashboard
        service: Identity returned for verified requests
        max_age_seconds: Allowed clock skew for X-Slack-Request-Timestamp
        clock: Time source (seconds since epoch)

    Returns:
        verify(raw_body, headers) -> service
    """

    def verify(body: bytes, headers: Mapping[str, str]) -> str:
        if not signing_secret:
            raise AuthenticationError("signing secret not configured")

        timestamp = _header(headers, TIMESTAMP_HEADER)
        signature = _header(headers, SIGNATURE_HEADER)
        if not timestamp or not signature:
            raise AuthenticationError(
                f"missing {TIMESTAMP_HEADER} or {SIGNATURE_HEADER} header"
            )

        try:
            request_time = int(timestamp)
        except ValueError:
            raise AuthenticationError(f"invalid timestamp: {timestamp}")

        if abs(clock() - request_time) > max_age_seconds:
            raise AuthenticationError("request timestamp is too old")

        expected = compute_signature(signing_secret, timestamp, body)
        # Constant-time comparison
        if not hmac.compare_digest(signature, expected):
            raise AuthenticationError("invalid signature")

        return service

    return verify
