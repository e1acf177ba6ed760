"""Access-code check and signed, expiring session tokens."""

import time
from dataclasses import dataclass

import jwt

ALGORITHM = "HS256"
MAX_CODE_LENGTH = 80


def validate_code(submitted, expected: str, max_len: int = MAX_CODE_LENGTH) -> bool:
    """Exact, case-sensitive match after capping length and trimming. Empty never matches."""
    if not isinstance(submitted, str) or not isinstance(expected, str):
        return False
    code = submitted[:max_len].strip()
    if not code:
        return False
    return code == expected


@dataclass(frozen=True)
class IssuedSession:
    token: str
    expires_at: int
    max_age: int  # seconds


class SessionGate:
    """Issues and checks session tokens signed with a process-wide secret."""

    def __init__(self, secret: str, ttl_minutes: int = 60):
        if not secret:
            raise ValueError("SessionGate requires a non-empty signing secret")
        self._secret = secret
        self.ttl_minutes = ttl_minutes

    @property
    def ttl_seconds(self) -> int:
        return self.ttl_minutes * 60

    def issue_session(self, now: int | None = None) -> IssuedSession:
        now = int(time.time()) if now is None else now
        exp = now + self.ttl_seconds
        token = jwt.encode({"exp": exp}, self._secret, algorithm=ALGORITHM)
        return IssuedSession(token=token, expires_at=exp, max_age=self.ttl_seconds)

    def check_session(self, token, now: int | None = None) -> bool:
        """
        True only for a token we signed whose exp is still in the future.
        Missing, tampered, undecodable or expired tokens are all False.
        """
        if not token or not isinstance(token, str):
            return False
        try:
            # exp is compared below against the (injectable) clock
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"verify_exp": False, "require": ["exp"]},
            )
        except (jwt.InvalidTokenError, ValueError, TypeError):
            return False

        exp = payload.get("exp") if isinstance(payload, dict) else None
        if isinstance(exp, bool) or not isinstance(exp, (int, float)):
            return False
        now = time.time() if now is None else now
        return now < exp
