"""
Tests for the <%= %> substitution pass.
"""

import pytest

from htc.config.model import TemplateData
from htc.interpolation import InterpolationError, evaluate, interpolate, to_text


def join_args(*args):
    return "|".join(to_text(a) for a in args)


class TestInterpolate:

    def test_simple_name(self):
        assert interpolate("v<%= version %>!", {"version": "1.0"}) == "v1.0!"

    def test_dotted_path(self):
        data = TemplateData({"meta": {"name": "Demo"}})

        assert interpolate("<%= meta.name %>", data) == "Demo"

    def test_missing_values_render_empty(self):
        data = TemplateData({"meta": {}})

        assert interpolate("[<%= nope %>][<%= meta.name %>][<%= nope.deeper %>]", data) == "[][][]"

    def test_expression_spanning_lines(self):
        assert interpolate("<%=\n  name\n%>", {"name": "x"}) == "x"

    def test_text_without_interpolations_unchanged(self):
        text = "<div>${x}</div> % > <%"
        assert interpolate(text, {}) == text

    def test_call_with_literal_arguments(self):
        scope = {"f": join_args}

        assert interpolate("""<%= f('a', "b", 3, 1.5, true, null) %>""", scope) == "a|b|3|1.5|true|"

    def test_call_without_arguments(self):
        assert interpolate("<%= f() %>", {"f": lambda: "called"}) == "called"

    def test_reserved_word_as_helper_name(self):
        scope = {"assert": lambda s: "A:" + s}

        assert interpolate("<%= assert('x == 1') %>", scope) == "A:x == 1"

    def test_string_escapes(self):
        scope = {"f": join_args}

        assert interpolate(r"<%= f('\{x\}', 'it\'s', 'a\nb', 'é') %>", scope) == "{x}|it's|a\nb|é"

    def test_not_a_function(self):
        with pytest.raises(InterpolationError, match="'name' is not a function"):
            interpolate("<%= name() %>", {"name": "x"})

    def test_unsupported_expression(self):
        with pytest.raises(InterpolationError):
            interpolate("<%= 1 + 2 %>", {})

    def test_unsupported_arguments(self):
        with pytest.raises(InterpolationError):
            interpolate("<%= f(other) %>", {"f": join_args, "other": "x"})


class TestToText:

    @pytest.mark.parametrize("value,expected", [
        (None, ""),
        (True, "true"),
        (False, "false"),
        (3, "3"),
        (2.0, "2"),
        (2.5, "2.5"),
        (["a", "b"], "a,b"),
        ("s", "s"),
    ])
    def test_conversion(self, value, expected):
        assert to_text(value) == expected

    def test_evaluate_returns_raw_value(self):
        assert evaluate("items", {"items": [1, 2]}) == [1, 2]
