"""Line-shape recognizers for Lua source.

Every pattern is compiled once at import; a malformed pattern fails the
import instead of a single line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class Classification(Enum):
  CONFIDENT = "confident"
  AMBIGUOUS = "ambiguous"
  NOT_CODE = "not_code"

  @property
  def symbol(self) -> str:
    return _SYMBOLS[self]


_SYMBOLS = {
  Classification.CONFIDENT: "✔",
  Classification.AMBIGUOUS: "?",
  Classification.NOT_CODE: "✘",
}


@dataclass(frozen=True)
class Recognizer:
  name: str
  pattern: re.Pattern

  def matches(self, line: str) -> bool:
    return self.pattern.match(line) is not None


def _compile(name: str, pattern: str) -> Recognizer:
  return Recognizer(name, re.compile(pattern))


# Order only matters for speed: the first hit wins.
CONFIDENT_RECOGNIZERS: Tuple[Recognizer, ...] = (
  _compile("assignment", r"^`?\s*(?:local\s+)?(?:\w+[:.])*\w+\s*[+\-*/]?=\s*.+$"),
  _compile("local_declaration", r"^`?\s*local\s+\w+\s*(?:,\s*\w+)*\s*(?:[+\-*/]?=\s*.+)?$"),
  _compile("multiple_assignment", r"^`?\s*\w+\s*(?:,\s*\w+)*\s*[+\-*/]?=\s*.+$"),
  _compile("block_end", r"^\s*end\s*$"),
  _compile("function_definition", r"^`?\s*(?:local\s+)?function\s+(?:\w+[:.])*\w+\s*\(.*?\)\s*$"),
  _compile("conditional", r"^\s*(?:else)?if\s+.+?\s+then\s*$"),
  _compile("else", r"^\s*else\s*$"),
  _compile("call", r"^\s*(?:\w+[:.])*\w+\s*\(.*?\)\s*$"),
  _compile("return", r"^\s*return\b.*$"),
  _compile("for_loop", r"^\s*for\b.+?\bdo\s*$"),
  _compile("while_loop", r"^\s*while\b.+?\bdo\s*$"),
  _compile("repeat", r"^\s*repeat\b.*$"),
  _compile("until", r"^\s*until\b.+$"),
  _compile("comment", r"^\s*--.*$"),
)

AMBIGUOUS_RECOGNIZERS: Tuple[Recognizer, ...] = (
  _compile("blank", r"^[ \t]*$"),
)


def _any_match(recognizers: Iterable[Recognizer], line: str) -> bool:
  return any(recognizer.matches(line) for recognizer in recognizers)


def matches_confidently(line: str) -> bool:
  return _any_match(CONFIDENT_RECOGNIZERS, line)


def matches_ambiguously(line: str) -> bool:
  return _any_match(AMBIGUOUS_RECOGNIZERS, line)


def classify(line: str) -> Classification:
  if matches_confidently(line):
    return Classification.CONFIDENT
  if matches_ambiguously(line):
    return Classification.AMBIGUOUS
  return Classification.NOT_CODE
