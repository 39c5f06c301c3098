"""Tests for the tree render model and collapse state."""

import pytest

from jsonfold import tree
from jsonfold.tree import (
    CollapseState,
    collect_container_paths,
    format_literal,
    join_path,
    render_lines,
    render_text,
    walk,
)


@pytest.fixture
def sample_value() -> dict:
    return {"a": 1, "b": [True, None], "c": {}}


class TestPaths:
    """Tests for path helpers and traversal."""

    def test_join_path(self):
        assert join_path("root", "a") == "root.a"
        assert join_path("root.a", 0) == "root.a.0"

    def test_walk_is_pre_order(self):
        value = {"a": [1, {"b": 2}], "c": 3}
        assert [path for path, _, _ in walk(value)] == [
            "root",
            "root.a",
            "root.a.0",
            "root.a.1",
            "root.a.1.b",
            "root.c",
        ]

    def test_walk_reports_keys_only_for_members(self):
        keys = {path: key for path, key, _ in walk({"a": [1]})}
        assert keys == {"root": None, "root.a": "a", "root.a.0": None}

    def test_collect_container_paths(self):
        value = {"a": {"b": []}, "c": [1, {"d": 2}]}
        assert collect_container_paths(value) == {
            "root",
            "root.a",
            "root.a.b",
            "root.c",
            "root.c.1",
        }

    def test_collect_container_paths_scalar_root(self):
        assert collect_container_paths(42) == frozenset()


class TestFormatLiteral:
    """Tests for format_literal."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "null"),
            (True, "true"),
            (False, "false"),
            (3, "3"),
            (2.5, "2.5"),
            ("x", '"x"'),
            ('a"b', '"a\\"b"'),
            ("é", '"é"'),
        ],
    )
    def test_literals(self, value, expected):
        assert format_literal(value) == expected


class TestRender:
    """Tests for render_lines and render_text."""

    def test_without_comments_has_no_annotations(self, sample_value):
        lines = render_lines(sample_value)
        assert all(line.comment is None for line in lines)
        assert tree._EMPTY_COMMENTS == {}
        with pytest.raises(TypeError):
            tree._EMPTY_COMMENTS["root.a"] = "// x"

    def test_expanded(self, sample_value):
        assert render_text(sample_value) == (
            "{\n"
            '    "a": 1,\n'
            '    "b": [\n'
            "        true,\n"
            "        null\n"
            "    ],\n"
            '    "c": {}\n'
            "}"
        )

    def test_collapsed_container(self, sample_value):
        text = render_text(sample_value, CollapseState(frozenset({"root.b"})))
        assert '    "b": [...],' in text.split("\n")
        assert "true" not in text

    def test_collapsed_root(self, sample_value):
        assert render_text(sample_value, frozenset({"root"})) == "{...}"

    def test_scalar_root(self):
        assert render_text("hi") == '"hi"'

    def test_empty_containers_render_inline(self):
        assert render_text([]) == "[]"
        assert render_text({"a": []}) == '{\n    "a": []\n}'

    def test_comment_annotation(self, sample_value):
        comments = {"root.a": "// one", "root.b": "// list"}
        lines = render_text(sample_value, None, comments).split("\n")
        assert lines[1] == '    "a": 1,  // one'
        assert lines[2] == '    "b": [  // list'

    def test_comment_on_collapsed_container(self, sample_value):
        text = render_text(sample_value, frozenset({"root.b"}), {"root.b": "// list"})
        assert '    "b": [...],  // list' in text.split("\n")

    def test_toggle_only_on_non_empty_containers(self, sample_value):
        toggles = {line.path for line in render_lines(sample_value) if line.toggle}
        assert toggles == {"root", "root.b"}

    def test_close_lines_belong_to_their_container(self, sample_value):
        closes = [line for line in render_lines(sample_value) if line.kind == "close"]
        assert [line.path for line in closes] == ["root.b", "root"]
        assert [line.comma for line in closes] == [True, False]

    def test_stale_paths_are_harmless(self, sample_value):
        stale = CollapseState(frozenset({"root.gone", "root.b.7"}))
        assert render_text(sample_value, stale) == render_text(sample_value)

    def test_render_is_pure(self, sample_value):
        state = CollapseState(frozenset({"root.b"}))
        assert render_lines(sample_value, state) == render_lines(sample_value, state)

    def test_deep_nesting_does_not_recurse(self):
        depth = 2000
        value: list = []
        for _ in range(depth):
            value = [value]

        lines = render_lines(value)
        assert len(lines) == 2 * depth + 1
        assert lines[depth].body == "[]"
        assert len(collect_container_paths(value)) == depth + 1


class TestCollapseState:
    """Tests for CollapseState."""

    def test_toggle_is_its_own_inverse(self):
        state = CollapseState(frozenset({"root.x"}))
        assert state.toggle("root.a").toggle("root.a") == state

    def test_toggle_returns_new_instance(self):
        state = CollapseState()
        toggled = state.toggle("root")
        assert "root" in toggled
        assert "root" not in state

    def test_collapse_all_then_expand_all_restores_render(self, sample_value):
        initial = render_text(sample_value)
        state = CollapseState().collapse_all(sample_value)
        assert render_text(sample_value, state) == "{...}"
        assert render_text(sample_value, state.expand_all()) == initial

    def test_collapse_all_includes_empty_containers(self, sample_value):
        state = CollapseState().collapse_all(sample_value)
        assert state.paths == {"root", "root.b", "root.c"}
        assert len(state) == 3

    def test_collapse_all_replaces_previous_set(self):
        state = CollapseState(frozenset({"root.stale"})).collapse_all({"a": []})
        assert state.paths == {"root", "root.a"}

    def test_is_collapsed(self):
        state = CollapseState(frozenset({"root"}))
        assert state.is_collapsed("root")
        assert not state.is_collapsed("root.a")
