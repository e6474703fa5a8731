"""Tests for the declaration extractor."""

from figwind.css import extract_declarations, serialize_declarations


class TestExtractDeclarations:
    def test_multiline_block(self):
        block = ".card {\n  display: flex;\n  padding: 12px 32px;\n}"
        assert extract_declarations(block) == {
            "display": "flex",
            "padding": "12px 32px",
        }

    def test_one_line_block(self):
        block = ".btn { display: flex; padding: 16px; border-radius: 8px; }"
        assert extract_declarations(block) == {
            "display": "flex",
            "padding": "16px",
            "border-radius": "8px",
        }

    def test_split_at_first_colon_only(self):
        block = ".a {\n  background: url(https://example.com/a.png);\n}"
        decls = extract_declarations(block)
        assert decls["background"] == "url(https://example.com/a.png)"

    def test_rgba_value_kept_whole(self):
        block = ".a {\n  box-shadow: 0 4px 12px rgba(0,0,0,0.1);\n}"
        assert extract_declarations(block)["box-shadow"] == "0 4px 12px rgba(0,0,0,0.1)"

    def test_only_one_trailing_semicolon_stripped(self):
        block = ".a {\n  color: red;;\n}"
        assert extract_declarations(block)["color"] == "red;"

    def test_last_duplicate_wins(self):
        block = ".a {\n  color: red;\n  color: blue;\n}"
        assert extract_declarations(block) == {"color": "blue"}

    def test_empty_value_discarded(self):
        block = ".a {\n  color: ;\n  : red;\n  margin: 0;\n}"
        assert extract_declarations(block) == {"margin": "0"}

    def test_selector_with_colon_ignored(self):
        block = "a:hover {\n  color: red;\n}"
        assert extract_declarations(block) == {"color": "red"}

    def test_comments_ignored(self):
        block = ".a {\n  /* Note: auto layout */\n  gap: 8px;\n}"
        assert extract_declarations(block) == {"gap": "8px"}

    def test_property_case_preserved(self):
        block = ".a {\n  Color: red;\n}"
        assert extract_declarations(block) == {"Color": "red"}


class TestSerializeDeclarations:
    def test_serialize(self):
        text = serialize_declarations({"display": "flex", "gap": "8px"})
        assert text == "display: flex;\ngap: 8px;"

    def test_indent(self):
        assert serialize_declarations({"gap": "8px"}, indent="  ") == "  gap: 8px;"

    def test_reextraction_is_idempotent(self):
        original = extract_declarations(
            ".a {\n  display: flex;\n  padding: 12px 32px;\n  color: rgba(0,0,0,0.5);\n}"
        )
        block = ".a {\n" + serialize_declarations(original) + "\n}"
        assert extract_declarations(block) == original
