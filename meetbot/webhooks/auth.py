"""Shared-secret webhook authentication."""

import hashlib
import hmac

from fastapi import Query

from ..errors import AuthenticationError


def verify_secret(provided: str | None, expected: str) -> bool:
    """Compare secrets in constant time.

    Both sides are reduced to SHA-256 digests first so the comparison
    covers a fixed number of bytes whatever the input lengths. A missing
    caller secret counts as the empty string; an empty expected secret
    never matches.
    """
    if not expected:
        return False

    provided_digest = hashlib.sha256((provided or "").encode("utf-8")).digest()
    expected_digest = hashlib.sha256(expected.encode("utf-8")).digest()
    return hmac.compare_digest(provided_digest, expected_digest)


class WebhookSecretDependency:
    """FastAPI dependency rejecting requests whose ``secret`` does not match."""

    def __init__(self, expected: str):
        self._expected = expected

    async def __call__(self, secret: str = Query("")) -> None:
        if not verify_secret(secret, self._expected):
            raise AuthenticationError()
