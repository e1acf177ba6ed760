"""Process-wide configuration, read once from the environment at startup."""

import logging
import os
import secrets
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_ACCESS_CODE = "ROME-PROMPT-01"
DEFAULT_SESSION_MINUTES = 60
DEFAULT_PORT = 3000

log = logging.getLogger("automarker")


@dataclass(frozen=True)
class Settings:
    access_code: str = DEFAULT_ACCESS_CODE
    cookie_secret: str = ""
    session_minutes: int = DEFAULT_SESSION_MINUTES
    course_back_url: str = ""
    next_lesson_url: str = ""
    cookie_secure: bool = True
    port: int = DEFAULT_PORT
    # True when cookie_secret was generated for this process only.
    secret_is_ephemeral: bool = False


def _int_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _bool_env(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    return raw not in ("0", "false", "no", "off")


def load_settings() -> Settings:
    """
    Build Settings from environment variables (.env supported).

    If COOKIE_SECRET is unset a random secret is generated. Sessions signed
    with it do not survive a restart and are not accepted by other instances.
    """
    load_dotenv()

    secret = (os.getenv("COOKIE_SECRET") or "").strip()
    ephemeral = not secret
    if ephemeral:
        secret = secrets.token_hex(32)
        log.warning(
            "COOKIE_SECRET not set - using a per-process secret; sessions will not survive a restart "
            "or be shared between instances"
        )

    return Settings(
        access_code=os.getenv("ACCESS_CODE") or DEFAULT_ACCESS_CODE,
        cookie_secret=secret,
        session_minutes=_int_env("SESSION_MINUTES", DEFAULT_SESSION_MINUTES),
        course_back_url=os.getenv("COURSE_BACK_URL") or os.getenv("BACK_URL") or "",
        next_lesson_url=os.getenv("NEXT_LESSON_URL") or "",
        cookie_secure=_bool_env("COOKIE_SECURE", True),
        port=_int_env("PORT", DEFAULT_PORT),
        secret_is_ephemeral=ephemeral,
    )
