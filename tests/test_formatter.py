"""Tests for fence insertion in the reply."""
from luabot.formatter import build_attribution, escape_markdown, format_blocks, format_reply
from luabot.segmenter import LabeledLine, get_blocks


class TestFormatBlocks:

  def test_fences_at_transitions(self):
    blocks = get_blocks(["hello everyone", "local x = 5", "print(x)", "thanks!"], report=None)
    assert format_blocks(blocks) == (
      "hello everyone\n"
      "```lua\n"
      "local x = 5\n"
      "print(x)\n"
      "```\n"
      "thanks!\n"
    )

  def test_closes_fence_at_end(self):
    assert format_blocks([LabeledLine("x = 1", True)]) == "```lua\nx = 1\n```\n"

  def test_several_runs(self):
    blocks = [
      LabeledLine("x = 1", True),
      LabeledLine("and then", False),
      LabeledLine("y = 2", True),
    ]
    assert format_blocks(blocks) == "```lua\nx = 1\n```\nand then\n```lua\ny = 2\n```\n"

  def test_no_fence_for_prose(self):
    assert format_blocks([LabeledLine("just text", False)]) == "just text\n"


class TestAttribution:

  def test_build_attribution(self):
    assert build_attribution("bob") == (
      "**bob** dont know how to format.\nBut don't worry, I am here !\n\n"
    )

  def test_author_name_is_escaped(self):
    assert escape_markdown("some_user*") == "some\\_user\\*"
    assert build_attribution("a`b").startswith("**a\\`b**")

  def test_format_reply(self):
    reply = format_reply("bob", [LabeledLine("print(1)", True)])
    assert reply.startswith("**bob**")
    assert reply.endswith("```lua\nprint(1)\n```\n")
