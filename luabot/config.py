import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
if LOG_LEVEL not in _VALID_LOG_LEVELS:
  LOG_LEVEL = "INFO"

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("luabot")

TARGET_LANGUAGE = "lua"
DEFAULT_API_BASE_URL = "https://discord.com/api/v10"


def _env_flag(name: str, default: str) -> bool:
  return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
  raw = os.getenv(name)
  if not raw:
    return default
  try:
    return float(raw)
  except ValueError:
    logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
    return default


def _env_int(name: str, default: int) -> int:
  raw = os.getenv(name)
  if not raw:
    return default
  try:
    return int(raw)
  except ValueError:
    logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
    return default


@dataclass(frozen=True)
class Settings:
  token: Optional[str]
  api_base_url: str = DEFAULT_API_BASE_URL
  http_timeout: float = 15.0
  report_enabled: bool = True
  host: str = "0.0.0.0"
  port: int = 8000


def load_settings() -> Settings:
  token = os.getenv("DISCORD_TOKEN") or os.getenv("BOT_TOKEN")
  return Settings(
    token=(token or "").strip() or None,
    api_base_url=os.getenv("DISCORD_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
    http_timeout=_env_float("HTTP_TIMEOUT_SECONDS", 15.0),
    report_enabled=_env_flag("CLASSIFY_REPORT_ENABLED", "true"),
    host=os.getenv("HOST", "0.0.0.0"),
    port=_env_int("PORT", 8000),
  )


def require_token(token: Optional[str]) -> str:
  if not token:
    logger.critical("Expected a token in the environment (DISCORD_TOKEN)")
    raise SystemExit("Missing DISCORD_TOKEN.")
  return token
