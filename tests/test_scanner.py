"""Tests for the bracket-aware scanner."""

import re

from groq_gen.core.scanner import (
    find_closing,
    find_section,
    iter_blocks,
    iter_objects,
    key_pattern,
    own_level,
    tokens,
)


class TestTokens:
    """Tests for the tokenizer."""

    def test_string_literal_is_one_token(self):
        result = [token for _, token in tokens("a = 'x, y'")]
        assert "'x, y'" in result

    def test_escaped_quote_stays_inside_string(self):
        result = [token for _, token in tokens(r"'it\'s' b")]
        assert result[0] == r"'it\'s'"

    def test_line_comment_dropped(self):
        result = "".join(token for _, token in tokens("a // name: 'x'\nb"))
        assert "name" not in result
        assert result.startswith("a")
        assert result.endswith("b")

    def test_block_comment_dropped(self):
        result = "".join(token for _, token in tokens("a /* { */ b"))
        assert "{" not in result

    def test_unterminated_string_runs_to_end(self):
        result = list(tokens("a 'open"))
        assert result[-1] == (2, "'open")

    def test_regex_literal_with_quote_is_one_token(self):
        result = [token for _, token in tokens("Rule.regex(/^[^']+$/), x")]
        assert "/^[^']+$/" in result
        assert result[-1] == "x"

    def test_regex_literal_flags_and_class(self):
        result = [token for _, token in tokens("match: /[/\\]]+/gi,")]
        assert result[-2:] == ["/[/\\]]+/gi", ","]

    def test_division_is_not_a_regex(self):
        result = [token for _, token in tokens("a / b / c")]
        assert result.count("/") == 2

    def test_unterminated_regex_is_a_slash(self):
        result = [token for _, token in tokens("(/abc\n)")]
        assert result[:2] == ["(", "/"]


class TestFindClosing:
    """Tests for bracket matching."""

    def test_ignores_brackets_in_strings(self):
        text = "{ a: '}' }"
        assert find_closing(text, 0) == 9

    def test_nested(self):
        text = "[{ a: [1, 2] }, (3)] tail"
        assert text[find_closing(text, 0)] == "]"
        assert find_closing(text, 0) == 19

    def test_unbalanced_runs_to_end(self):
        text = "{ a: ["
        assert find_closing(text, 0) == len(text)

    def test_ignores_brackets_in_regex_literals(self):
        text = "{ re: /[}']/ }"
        assert find_closing(text, 0) == 13


class TestFindSection:
    """Tests for section extraction."""

    def test_returns_balanced_contents(self):
        text = "fields: [{ name: 'a', fields: [] }], other: []"
        assert find_section(text, re.compile(r"fields:\s*\[")) == "{ name: 'a', fields: [] }"

    def test_missing_section(self):
        assert find_section("name: 'a'", re.compile(r"of:\s*\[")) is None

    def test_skips_commented_section(self):
        text = "// of: [1]\nof: [2]"
        assert find_section(text, re.compile(r"of:\s*\[")) == "2"


class TestIterBlocks:
    """Tests for block enumeration."""

    def test_yields_top_level_blocks_in_order(self):
        text = "f({ a: f({ b: 1 }) }), f({ c: 2 })"
        blocks = list(iter_blocks(text, re.compile(r"f\(\{")))
        assert blocks == ["f({ a: f({ b: 1 }) }", "f({ c: 2 }"]

    def test_restartable(self):
        text = "f({ a: 1 }) f({ b: 2 })"
        pattern = re.compile(r"f\(\{")
        assert list(iter_blocks(text, pattern)) == list(iter_blocks(text, pattern))

    def test_no_match(self):
        assert list(iter_blocks("nothing here", re.compile(r"f\(\{"))) == []

    def test_skips_match_in_line_comment(self):
        text = "// f({ a: 1 }),\nf({ b: 2 })"
        assert list(iter_blocks(text, re.compile(r"f\(\{"))) == ["f({ b: 2 }"]

    def test_skips_match_in_string(self):
        text = "'f({ a })', f({ b: 2 })"
        assert list(iter_blocks(text, re.compile(r"f\(\{"))) == ["f({ b: 2 }"]


class TestIterObjects:
    """Tests for list item enumeration."""

    def test_plain_and_wrapped_items(self):
        text = "{ name: 'a' }, defineField({ name: 'b' }), [{ x: 1 }]"
        assert list(iter_objects(text)) == ["{ name: 'a' }", "{ name: 'b' }"]

    def test_nested_objects_stay_in_their_item(self):
        text = "{ a: { b: {} } }, { c: 1 }"
        assert list(iter_objects(text)) == ["{ a: { b: {} } }", "{ c: 1 }"]


class TestOwnLevel:
    """Tests for own-level key extraction."""

    def test_drops_nested_contents(self):
        result = own_level("defineField({ name: 'a', options: { name: 'b' } })")
        assert "name: 'a'" in result
        assert "'b'" not in result

    def test_no_brace(self):
        assert own_level("name: 'a'") == "name: 'a'"


class TestKeyPattern:
    """Tests for key patterns."""

    def test_matches_both_quote_styles(self):
        pattern = key_pattern("name")
        assert pattern.search("name: 'a'").group(1) == "a"
        assert pattern.search('name:"b"').group(1) == "b"

    def test_requires_word_boundary(self):
        assert key_pattern("title").search("subtitle: 'x'") is None

    def test_fixed_value(self):
        pattern = key_pattern("type", "object")
        assert pattern.search("type: 'object'")
        assert pattern.search("type: 'string'") is None
