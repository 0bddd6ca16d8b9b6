from typing import Any, Optional

import httpx

from .config import DEFAULT_API_BASE_URL, logger


def build_headers(token: str) -> dict[str, str]:
  return {
    "Content-Type": "application/json",
    "Authorization": f"Bot {token}",
  }


class ChatClient:
  """Minimal REST client for posting and deleting channel messages.

  Failures are logged and reported through the return value; nothing here is
  retried.
  """

  def __init__(
    self,
    token: str,
    base_url: str = DEFAULT_API_BASE_URL,
    timeout: float = 15.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
  ):
    self._client = httpx.AsyncClient(
      base_url=base_url.rstrip("/"),
      headers=build_headers(token),
      timeout=httpx.Timeout(timeout),
      transport=transport,
    )

  async def aclose(self) -> None:
    await self._client.aclose()

  async def _request(self, method: str, path: str, **kwargs: Any) -> Optional[httpx.Response]:
    try:
      response = await self._client.request(method, path, **kwargs)
    except httpx.HTTPError as exc:
      logger.warning("%s %s failed: %s", method, path, exc)
      return None
    if response.status_code >= 400:
      details = response.text
      logger.warning("Upstream error %s on %s %s: %s", response.status_code, method, path, details)
      return None
    return response

  async def fetch_current_user(self) -> Optional[dict]:
    response = await self._request("GET", "/users/@me")
    if response is None:
      return None
    try:
      data = response.json()
    except ValueError:
      logger.warning("Invalid JSON in current user response")
      return None
    return data if isinstance(data, dict) else None

  async def send_message(self, channel_id: str, content: str, reply_to: Optional[str] = None) -> bool:
    payload: dict[str, Any] = {"content": content}
    if reply_to:
      payload["message_reference"] = {"message_id": reply_to}
    response = await self._request(
      "POST",
      f"/channels/{channel_id}/messages",
      json=payload,
    )
    if response is None:
      logger.error("Error sending message to channel %s", channel_id)
      return False
    return True

  async def delete_message(self, channel_id: str, message_id: str) -> bool:
    response = await self._request("DELETE", f"/channels/{channel_id}/messages/{message_id}")
    if response is None:
      logger.error("Could not delete message %s in channel %s", message_id, channel_id)
      return False
    return True
