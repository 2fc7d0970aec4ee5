"""JWT signing and verification."""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from src.services.errors import SigningError, VerificationError

logger = logging.getLogger(__name__)

DEFAULT_EXPIRES_IN = timedelta(days=1)
REGISTERED_CLAIMS = ("exp", "iat")


class TokenCodec:
    """Signs and verifies time-limited claim sets with a shared secret."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = DEFAULT_EXPIRES_IN,
    ):
        self._secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    def sign(self, claims: Mapping[str, Any]) -> str:
        """Encode ``claims`` into a signed token valid for ``expires_in``."""
        if not self._secret:
            raise SigningError("Failed to sign token")
        if not isinstance(claims, Mapping):
            raise SigningError("Failed to sign token")

        to_encode = dict(claims)
        to_encode["exp"] = datetime.now(UTC) + self.expires_in
        try:
            return jwt.encode(to_encode, self._secret, algorithm=self.algorithm)
        except (JWTError, TypeError, ValueError) as e:
            logger.error(f"Failed to sign token: {e}")
            raise SigningError("Failed to sign token") from e

    def verify(self, token: str) -> dict[str, Any]:
        """Decode a token and return the claim set it was signed with.

        Raises VerificationError on a bad signature, malformed token or
        expired token.
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except (JWTError, AttributeError, TypeError) as e:
            logger.warning(f"Failed to verify token: {e}")
            raise VerificationError("Failed to verify token") from e

        return {key: value for key, value in payload.items() if key not in REGISTERED_CLAIMS}
