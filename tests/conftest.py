"""Shared fixtures: settings and a chat client backed by httpx.MockTransport."""

from typing import Callable, List, Optional

import httpx
import pytest

from luabot.config import Settings
from luabot.transport import ChatClient

BASE_URL = "https://discord.test/api/v10"


class RecordingHandler:
  """Answers every request with a canned response and keeps the requests."""

  def __init__(self) -> None:
    self.requests: List[httpx.Request] = []
    self.responder: Optional[Callable[[httpx.Request], httpx.Response]] = None

  def __call__(self, request: httpx.Request) -> httpx.Response:
    self.requests.append(request)
    if self.responder is not None:
      return self.responder(request)
    if request.method == "GET" and request.url.path.endswith("/users/@me"):
      return httpx.Response(200, json={"id": "42", "username": "luabot"})
    if request.method == "DELETE":
      return httpx.Response(204)
    return httpx.Response(200, json={"id": "100"})

  def calls(self) -> List[tuple]:
    return [(request.method, request.url.path) for request in self.requests]


@pytest.fixture
def settings() -> Settings:
  return Settings(token="test-token", api_base_url=BASE_URL, report_enabled=False)


@pytest.fixture
def recorder() -> RecordingHandler:
  return RecordingHandler()


@pytest.fixture
def chat_client(recorder: RecordingHandler) -> ChatClient:
  return ChatClient("test-token", BASE_URL, transport=httpx.MockTransport(recorder))
