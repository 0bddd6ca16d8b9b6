"""Turn the lines of a chat message into code / non-code labels.

Lines inside a fence already tagged ``lua`` are dropped untouched. Every
other line is classified; a blank line keeps the label of the line before
it, so blank lines inside a snippet do not split it in two.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator, List, Optional

from .config import TARGET_LANGUAGE
from .recognizers import Classification, classify

FENCE = "```"

_GREEN = "\x1b[32m"
_RED = "\x1b[31m"
_RESET = "\x1b[m"

Reporter = Callable[[str, Classification], None]


class FenceState(Enum):
  OUTSIDE = "outside"
  SKIPPING_FOREIGN_FENCE = "skipping_foreign_fence"


@dataclass(frozen=True)
class LabeledLine:
  text: str
  is_code: bool

  def __iter__(self) -> Iterator[object]:
    yield self.text
    yield self.is_code


def is_fence_open(line: str, language: str = TARGET_LANGUAGE) -> bool:
  return f"{FENCE}{language}" in line


def is_fence_close(line: str) -> bool:
  """A bare delimiter with nothing but whitespace after it."""
  if FENCE not in line:
    return False
  return not line.rsplit(FENCE, 1)[1].strip()


def is_fence_marker(line: str) -> bool:
  return FENCE in line


def report_classification(line: str, classification: Classification) -> None:
  symbol = classification.symbol
  if classification is Classification.CONFIDENT:
    symbol = f"{_GREEN}{symbol}{_RESET}"
  elif classification is Classification.NOT_CODE:
    symbol = f"{_RED}{symbol}{_RESET}"
  print(f"  {symbol} {line}", flush=True)


def get_blocks(
  lines: Iterable[str],
  report: Optional[Reporter] = report_classification,
  language: str = TARGET_LANGUAGE,
) -> List[LabeledLine]:
  """Label each line outside ``lua`` fences as code or not.

  Returns an empty list when no line was labeled as code, meaning there is
  nothing to re-format.
  """
  blocks: List[LabeledLine] = []
  state = FenceState.OUTSIDE
  previous = False
  found_code = False

  for line in lines:
    if state is FenceState.SKIPPING_FOREIGN_FENCE:
      if is_fence_close(line):
        state = FenceState.OUTSIDE
      continue
    if is_fence_open(line, language):
      state = FenceState.SKIPPING_FOREIGN_FENCE
      continue
    if is_fence_marker(line):
      # Stray close, or a fence of another language: nothing to balance.
      continue

    classification = classify(line)
    if report is not None:
      report(line, classification)

    is_code = classification is Classification.CONFIDENT or (
      classification is Classification.AMBIGUOUS and previous
    )
    found_code = found_code or is_code
    blocks.append(LabeledLine(line, is_code))
    previous = is_code

  if not found_code:
    return []
  return blocks
