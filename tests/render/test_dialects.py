"""
Tests for target language dialects.
"""

import pytest

from htc.render.dialects import (
    CoffeeScriptDialect,
    JavaScriptDialect,
    UnknownDialectError,
    get_dialect,
)


class TestCoffeeScriptDialect:

    def setup_method(self):
        self.d = CoffeeScriptDialect()

    def test_literal_embeds_json(self):
        assert self.d.literal('a "b"\n') == '`"a \\"b\\"\\n"`'

    def test_literal_escapes_backticks(self):
        assert self.d.literal("`") == '`"\\`"`'

    def test_placeholder_forms(self):
        assert self.d.escape("x") == "E(`x`)"
        assert self.d.raw("x") == "`x`.innerHTML"
        assert self.d.raw_array("x") == "E.cat(`x`)"
        assert self.d.conditional("c", "A", "B") == "(if `c` then A else B)"

    def test_concat_and_empty(self):
        assert self.d.concat(["A", "B", "C"]) == "A + B + C"
        assert self.d.empty() == '""'

    def test_element(self):
        assert self.d.element("X") == "(innerHTML: X)"

    def test_assertion(self):
        assert self.d.assertion("x > 1") == "throw new Error 'Assertion failed: ' + `\"x > 1\"` unless x > 1"


class TestJavaScriptDialect:

    def setup_method(self):
        self.d = JavaScriptDialect()

    def test_literal(self):
        assert self.d.literal("a`b") == '"a`b"'

    def test_placeholder_forms(self):
        assert self.d.escape("x") == "E(x)"
        assert self.d.raw("a || b") == "(a || b).innerHTML"
        assert self.d.raw_array("x") == "E.cat(x)"
        assert self.d.conditional("c", "A", "B") == "((c) ? A : B)"

    def test_element(self):
        assert self.d.element("X") == "{innerHTML: X}"

    def test_assertion(self):
        assert self.d.assertion("ok") == "if (!(ok)) { throw new Error('Assertion failed: ' + \"ok\"); }"


class TestRegistry:

    def test_default_is_coffee(self):
        assert isinstance(get_dialect(), CoffeeScriptDialect)

    def test_lookup_by_name(self):
        assert isinstance(get_dialect("js"), JavaScriptDialect)

    def test_unknown_dialect(self):
        with pytest.raises(UnknownDialectError, match="Unknown dialect 'ruby'"):
            get_dialect("ruby")
