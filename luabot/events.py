from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping


@dataclass(frozen=True)
class MessageAuthor:
  id: str
  name: str
  bot: bool = False


@dataclass(frozen=True)
class MessageEvent:
  id: str
  channel_id: str
  content: str
  author: MessageAuthor

  @classmethod
  def from_payload(cls, payload: Mapping[str, Any]) -> "MessageEvent":
    """Build an event from a Discord-shaped message object."""
    message_id = payload.get("id")
    channel_id = payload.get("channel_id")
    if message_id in (None, "") or channel_id in (None, ""):
      raise ValueError("Message id and channel_id are required.")

    author_data = payload.get("author")
    if not isinstance(author_data, Mapping):
      author_data = {}
    author = MessageAuthor(
      id=str(author_data.get("id") or ""),
      name=str(author_data.get("username") or author_data.get("name") or ""),
      bot=bool(author_data.get("bot", False)),
    )
    content = payload.get("content")
    return cls(
      id=str(message_id),
      channel_id=str(channel_id),
      content=content if isinstance(content, str) else "",
      author=author,
    )

  @property
  def lines(self) -> List[str]:
    return split_lines(self.content)


def split_lines(content: str) -> List[str]:
  return content.split("\n")
