import pytest

from luabot.events import MessageEvent, split_lines


def test_from_payload():
  event = MessageEvent.from_payload({
    "id": 10,
    "channel_id": "20",
    "content": "x = 1\nprint(x)",
    "author": {"id": "3", "username": "bob", "bot": False},
  })
  assert event.id == "10"
  assert event.channel_id == "20"
  assert event.author.name == "bob"
  assert event.author.bot is False
  assert event.lines == ["x = 1", "print(x)"]


def test_bot_flag():
  event = MessageEvent.from_payload({"id": "1", "channel_id": "2", "author": {"bot": True}})
  assert event.author.bot is True
  assert event.content == ""


@pytest.mark.parametrize("payload", [{}, {"id": "1"}, {"channel_id": "2"}, {"id": "", "channel_id": "2"}])
def test_missing_ids(payload):
  with pytest.raises(ValueError):
    MessageEvent.from_payload(payload)


def test_split_lines_keeps_empty_segments():
  assert split_lines("a\n\nb\n") == ["a", "", "b", ""]
  assert split_lines("") == [""]
