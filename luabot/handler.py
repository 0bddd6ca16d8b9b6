from enum import Enum
from typing import Optional

from .config import logger
from .events import MessageEvent
from .formatter import format_reply
from .segmenter import Reporter, get_blocks, report_classification
from .transport import ChatClient

PING_COMMAND = "::ping"


class HandleResult(str, Enum):
  IGNORED = "ignored"
  PING = "ping"
  NO_CODE = "no_code"
  FORMATTED = "formatted"
  SEND_FAILED = "send_failed"


async def handle_ping(event: MessageEvent, client: ChatClient) -> None:
  await client.send_message(event.channel_id, "Pong!", reply_to=event.id)
  await client.send_message(event.channel_id, "Hello")


async def handle_message(
  event: MessageEvent,
  client: ChatClient,
  report: Optional[Reporter] = report_classification,
) -> HandleResult:
  # Bots are ignored so the reply never triggers another reply.
  if event.author.bot:
    return HandleResult.IGNORED

  if event.content == PING_COMMAND:
    await handle_ping(event, client)
    return HandleResult.PING

  blocks = get_blocks(event.lines, report=report)
  if not blocks:
    return HandleResult.NO_CODE

  reply = format_reply(event.author.name, blocks)
  logger.info("Re-formatting message %s from %s", event.id, event.author.name)
  if not await client.send_message(event.channel_id, reply):
    # Keep the original so the author's text is not lost.
    return HandleResult.SEND_FAILED
  await client.delete_message(event.channel_id, event.id)
  return HandleResult.FORMATTED
