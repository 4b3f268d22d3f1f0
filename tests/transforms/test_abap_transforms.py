"""Tests for ABAP language modernization transforms."""

import pytest

from s4migrate.transforms import ChangeType, TransformRegistry


def apply(rule_id, source):
    return TransformRegistry.get(rule_id).apply(source)


class TestRewrites:
    @pytest.mark.parametrize(
        "rule_id, source, expected",
        [
            ("SIMPL-ABAP-001", "DATA lt_mara TYPE mara OCCURS 0.", "DATA lt_mara TYPE TABLE OF mara."),
            ("SIMPL-ABAP-001", "DATA lt_copy LIKE ls_row OCCURS 10.", "DATA lt_copy LIKE TABLE OF ls_row."),
            ("SIMPL-ABAP-005", "DATA lt TYPE TABLE OF mara WITH HEADER LINE.", "DATA lt TYPE TABLE OF mara."),
            ("SIMPL-ABAP-006", "RANGES r_bukrs FOR bkpf-bukrs.", "DATA r_bukrs TYPE RANGE OF bkpf-bukrs."),
            (
                "SIMPL-ABAP-010",
                "MOVE-CORRESPONDING is_source TO rs_target.",
                "rs_target = CORRESPONDING #( is_source ).",
            ),
            ("SIMPL-ABAP-011", "CREATE OBJECT lo_util TYPE zcl_util.", "lo_util = NEW zcl_util( )."),
            ("SIMPL-ABAP-012", "CALL METHOD lo_util->refresh.", "lo_util->refresh( )."),
            ("SIMPL-ABAP-014", "TRANSLATE lv_name TO UPPER CASE.", "lv_name = to_upper( lv_name )."),
            ("SIMPL-ABAP-014", "TRANSLATE ls_row-text TO LOWER CASE.", "ls_row-text = to_lower( ls_row-text )."),
            ("SIMPL-ABAP-016", "REFRESH lt_items.", "CLEAR lt_items."),
            ("SIMPL-ABAP-017", "DESCRIBE TABLE lt_items LINES lv_count.", "lv_count = lines( lt_items )."),
        ],
    )
    def test_rewrite(self, rule_id, source, expected):
        result = apply(rule_id, source)

        assert result.source == expected
        assert result.changed
        assert all(change.type is ChangeType.REPLACE for change in result.changes)

    def test_bare_occurs_is_left_for_review(self):
        result = apply("SIMPL-ABAP-001", "DATA lt OCCURS 0.")
        assert result.source == "DATA lt OCCURS 0."
        assert result.changes == []

    def test_call_method_with_parameters_is_left_alone(self):
        source = "CALL METHOD lo_util->run EXPORTING iv_x = 1."
        assert apply("SIMPL-ABAP-012", source).source == source

    def test_translate_without_period_is_left_alone(self):
        source = "TRANSLATE lv_name TO UPPER CASE"
        assert not apply("SIMPL-ABAP-014", source).changed

    def test_refresh_table_control_is_left_alone(self):
        source = "REFRESH CONTROL 'TC_ITEMS' FROM SCREEN 100.\nREFRESH lt_items."
        result = apply("SIMPL-ABAP-016", source)

        assert result.source == "REFRESH CONTROL 'TC_ITEMS' FROM SCREEN 100.\nCLEAR lt_items."
        assert [c.line for c in result.changes] == [2]


class TestComments:
    def test_bdc_call_transaction(self):
        result = apply("SIMPL-ABAP-002", "START-OF-SELECTION.\n  CALL TRANSACTION 'MM02' USING lt_bdc MODE 'N'.")

        lines = result.source.split("\n")
        assert lines[1] == "  \" TODO(S/4): Replace CALL TRANSACTION 'MM02' with BAPI/API"
        assert lines[2] == "  CALL TRANSACTION 'MM02' USING lt_bdc MODE 'N'."
        assert result.changes[0].line == 2

    def test_read_table_with_key(self):
        result = apply("SIMPL-ABAP-013", "READ TABLE lt_items WITH KEY id = 1 INTO ls_item.")
        assert result.source.startswith('" TODO(S/4): Consider table expression syntax\n')

    def test_tables_work_area(self):
        result = apply("SIMPL-ABAP-015", "REPORT z.\nTABLES: mara.")
        assert result.source.split("\n")[1] == '" TODO(S/4): Replace TABLES declaration with DATA work area'
        assert result.changes[0].target == "TABLES:"
