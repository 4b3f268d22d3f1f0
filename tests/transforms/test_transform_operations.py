"""Tests for the regex operations transforms are built from."""

import pytest

from s4migrate.shared.domain.exceptions import TransformError
from s4migrate.transforms import ChangeRecord, ChangeType, TransformResult
from s4migrate.transforms.strategies.base import TODO_PREFIX, Flag, InsertComment, PatternTransform, Rewrite


class TestRewrite:
    def test_records_each_altered_match(self):
        text, changes = Rewrite(r"\bfoo\b", "bar").run("foo\nx foo\nfood")

        assert text == "bar\nx bar\nfood"
        assert [(c.from_text, c.to_text, c.line) for c in changes] == [("foo", "bar", 1), ("foo", "bar", 2)]

    def test_is_case_insensitive_by_default(self):
        text, _ = Rewrite(r"\bfoo\b", "bar").run("FOO")
        assert text == "bar"

    def test_case_sensitive(self):
        text, changes = Rewrite(r"\bfoo\b", "bar", case_sensitive=True).run("FOO")
        assert text == "FOO"
        assert changes == []

    def test_group_template(self):
        text, _ = Rewrite(r"(FROM\s+)old", r"\1new").run("SELECT * FROM old.")
        assert text == "SELECT * FROM new."

    def test_callable_returning_match_is_not_recorded(self):
        text, changes = Rewrite(r"\w+", lambda m: m.group(0)).run("unchanged text")
        assert text == "unchanged text"
        assert changes == []


class TestInsertComment:
    def test_inserts_above_with_indentation(self):
        text, changes = InsertComment(r"CALL\s+X", "Do something", suggestion="API_X").run("A.\n    CALL X.\nB.")

        assert text.split("\n") == ["A.", f'    " {TODO_PREFIX}Do something', "    CALL X.", "B."]
        assert len(changes) == 1
        record = changes[0]
        assert record.type is ChangeType.COMMENT
        assert record.target == "CALL X"
        assert record.to_text == "API_X"
        assert record.line == 2

    def test_skips_when_comment_block_has_note(self):
        source = f'" {TODO_PREFIX}Other note\n" {TODO_PREFIX}Do something\nCALL X.'
        text, changes = InsertComment(r"CALL\s+X", "Do something").run(source)
        assert text == source
        assert changes == []

    def test_note_outside_comment_block_does_not_count(self):
        source = f'" {TODO_PREFIX}Do something\nWRITE 1.\nCALL X.'
        text, changes = InsertComment(r"CALL\s+X", "Do something").run(source)
        assert len(changes) == 1
        assert text.count(TODO_PREFIX) == 2

    def test_note_callable(self):
        text, _ = InsertComment(r"CALL\s+(\w+)", lambda m: f"Replace {m.group(1)}").run("CALL Y.")
        assert f"{TODO_PREFIX}Replace Y" in text


class TestFlag:
    def test_reports_without_editing(self):
        text, changes = Flag(r"\bnast\b", "Migrate output").run("SELECT * FROM nast.\nWRITE nast-kschl.")

        assert text == "SELECT * FROM nast.\nWRITE nast-kschl."
        assert [(c.type, c.line, c.target) for c in changes] == [(ChangeType.FLAG, 1, "nast"), (ChangeType.FLAG, 2, "nast")]


class TestPatternTransform:
    def test_operations_run_in_sequence(self):
        transform = PatternTransform("SIMPL-TST-001", "test", Rewrite(r"a", "b"), Rewrite(r"b", "c"))
        result = transform.apply("a")
        assert result.source == "c"
        assert len(result.changes) == 2

    def test_requires_an_operation(self):
        with pytest.raises(ValueError):
            PatternTransform("SIMPL-TST-001", "empty")

    def test_description(self):
        assert PatternTransform("SIMPL-TST-001", "Swap a for b", Rewrite("a", "b")).description == "Swap a for b"

    def test_bad_group_reference_raises_transform_error(self):
        transform = PatternTransform("SIMPL-TST-001", "broken", Rewrite(r"a", r"\2"))
        with pytest.raises(TransformError) as exc_info:
            transform.apply("a")
        assert exc_info.value.context["transform_id"] == "SIMPL-TST-001"

    def test_non_text_input_raises_transform_error(self):
        with pytest.raises(TransformError):
            PatternTransform("SIMPL-TST-001", "swap", Rewrite("a", "b")).apply(None)


class TestChangeRecords:
    def test_changed_ignores_flags(self):
        assert not TransformResult(source="x", changes=[ChangeRecord.flag("x", "note")]).changed
        assert TransformResult(source="y", changes=[ChangeRecord.replace("x", "y")]).changed
        assert not TransformResult(source="x").changed

    def test_to_json_drops_empty_keys(self):
        assert ChangeRecord.replace("bseg", "acdoca", line=3).to_json() == {
            "type": "replace",
            "from": "bseg",
            "to": "acdoca",
            "line": 3,
        }
        assert ChangeRecord.flag("nast", "Migrate").to_json() == {"type": "flag", "target": "nast", "note": "Migrate"}
