import re
from typing import Iterable

from .config import TARGET_LANGUAGE
from .segmenter import FENCE, LabeledLine

_MARKDOWN_SPECIAL = re.compile(r"([\\*_~`|])")


def escape_markdown(text: str) -> str:
  return _MARKDOWN_SPECIAL.sub(r"\\\1", text or "")


def build_attribution(author_name: str) -> str:
  return (
    f"**{escape_markdown(author_name)}** dont know how to format.\n"
    "But don't worry, I am here !\n\n"
  )


def format_blocks(blocks: Iterable[LabeledLine], language: str = TARGET_LANGUAGE) -> str:
  parts: list[str] = []
  in_code = False
  for block in blocks:
    if block.is_code and not in_code:
      parts.append(f"{FENCE}{language}\n")
    elif not block.is_code and in_code:
      parts.append(f"{FENCE}\n")
    in_code = block.is_code
    parts.append(f"{block.text}\n")
  if in_code:
    parts.append(f"{FENCE}\n")
  return "".join(parts)


def format_reply(author_name: str, blocks: Iterable[LabeledLine], language: str = TARGET_LANGUAGE) -> str:
  return build_attribution(author_name) + format_blocks(blocks, language)
