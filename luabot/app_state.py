from dataclasses import dataclass
from typing import Optional

from .config import Settings, require_token
from .segmenter import Reporter, report_classification
from .transport import ChatClient


@dataclass(frozen=True)
class AppState:
  settings: Settings
  chat_client: ChatClient
  report: Optional[Reporter]


def build_app_state(settings: Settings, chat_client: Optional[ChatClient] = None) -> AppState:
  token = require_token(settings.token)
  if chat_client is None:
    chat_client = ChatClient(token, settings.api_base_url, timeout=settings.http_timeout)
  return AppState(
    settings=settings,
    chat_client=chat_client,
    report=report_classification if settings.report_enabled else None,
  )
