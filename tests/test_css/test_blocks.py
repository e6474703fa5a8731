"""Tests for the CSS block splitter."""

from figwind.css import BlockSequence, block_selector, split_into_blocks


def _balanced(block: str) -> bool:
    return block.count("{") == block.count("}")


class TestSingleBlock:
    def test_one_line_rule(self):
        blocks = list(split_into_blocks(".btn { display: flex; }"))
        assert blocks == [".btn { display: flex; }"]

    def test_multiline_rule(self):
        source = """
        .card {
          display: flex;
          padding: 16px;
        }
        """
        blocks = list(split_into_blocks(source))
        assert len(blocks) == 1
        assert blocks[0].startswith(".card {")
        assert blocks[0].endswith("}")

    def test_blank_lines_are_skipped(self):
        source = ".card {\n\n  display: flex;\n\n}\n"
        blocks = list(split_into_blocks(source))
        assert blocks == [".card {\n  display: flex;\n}"]


class TestMultipleBlocks:
    def test_count_matches_top_level_rules(self):
        source = """
        .a { color: red; }
        .b {
          color: blue;
        }
        .c { margin: 4px; }
        """
        blocks = list(split_into_blocks(source))
        assert len(blocks) == 3
        assert all(_balanced(b) for b in blocks)

    def test_nested_media_block_is_one_block(self):
        source = """
        @media (max-width: 600px) {
          .a {
            color: red;
          }
        }
        .b { color: blue; }
        """
        blocks = list(split_into_blocks(source))
        assert len(blocks) == 2
        assert blocks[0].startswith("@media")
        assert all(_balanced(b) for b in blocks)

    def test_leading_comment_belongs_to_first_block(self):
        source = "/* CardHeader */\n.card {\n  gap: 8px;\n}"
        blocks = list(split_into_blocks(source))
        assert len(blocks) == 1
        assert blocks[0].startswith("/* CardHeader */")


class TestEdgeCases:
    def test_no_braces_yields_nothing(self):
        assert list(split_into_blocks("color: red;")) == []

    def test_empty_input(self):
        assert list(split_into_blocks("")) == []

    def test_unbalanced_trailing_fragment_dropped(self):
        source = ".a { color: red; }\n.b {\n  color: blue;\n"
        assert list(split_into_blocks(source)) == [".a { color: red; }"]

    def test_sequence_is_restartable(self):
        seq = split_into_blocks(".a { x: 1; }\n.b { y: 2; }")
        assert isinstance(seq, BlockSequence)
        assert list(seq) == list(seq)
        assert len(list(seq)) == 2


class TestBlockSelector:
    def test_selector_text(self):
        assert block_selector(".btn { display: flex; }") == ".btn"

    def test_comment_is_not_selector(self):
        assert block_selector("/* Button */\n.btn {\n  gap: 4px;\n}") == ".btn"
