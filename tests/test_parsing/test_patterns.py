"""Tests for the cascade label grammar."""

from __future__ import annotations

import pytest

from autoland.parsing.patterns import (
    CASCADE_ORDER,
    SHAPES,
    SUCCESSFUL_MARKER,
    UNSUCCESSFUL_MARKER,
    FieldPattern,
    PatternVariant,
)


class TestCascadeOrder:
    def test_order_is_next_line_inline_loose(self) -> None:
        assert CASCADE_ORDER == (
            PatternVariant.NEXT_LINE,
            PatternVariant.INLINE,
            PatternVariant.LOOSE,
        )

    def test_every_pattern_compiles_three_variants(self) -> None:
        pattern = FieldPattern("captain")
        assert [variant for variant, _ in pattern.cascade] == list(CASCADE_ORDER)


class TestNextLineVariant:
    def test_value_on_following_line(self) -> None:
        m = FieldPattern("captain").match("CAPT:\nNGUYEN VAN A\nF/O:\nTRAN VAN B\n")
        assert m is not None
        assert m.value == "NGUYEN VAN A"
        assert m.variant is PatternVariant.NEXT_LINE

    def test_free_text_spans_wrapped_lines(self) -> None:
        text = "ALIGNMENT:\nWITHIN LIMITS, SLIGHT LEFT\nDRIFT CORRECTED\nSPEED CONTROL:\nNORMAL\n"
        m = FieldPattern("alignment").match(text)
        assert m is not None
        assert m.value == "WITHIN LIMITS, SLIGHT LEFT\nDRIFT CORRECTED"

    def test_free_text_runs_to_end_of_text(self) -> None:
        m = FieldPattern("captain_signature").match("CAPT SIGNATURE:\nNGUYEN VAN A\n")
        assert m is not None
        assert m.value == "NGUYEN VAN A"

    def test_page_header_terminates_free_text(self) -> None:
        text = "OTHER:\nNIL\nAUTOLAND REPORT\nPAGE 2\n"
        m = FieldPattern("other").match(text)
        assert m is not None
        assert m.value == "NIL"

    def test_shaped_value_must_fill_line(self) -> None:
        m = FieldPattern("qnh", shape=SHAPES["qnh"]).match("QNH:\n1013\n")
        assert m is not None
        assert m.value == "1013"
        assert m.variant is PatternVariant.NEXT_LINE


class TestInlineVariant:
    def test_colon_separator(self) -> None:
        m = FieldPattern("captain").match("CAPT: NGUYEN VAN A\n")
        assert m is not None
        assert m.value == "NGUYEN VAN A"
        assert m.variant is PatternVariant.INLINE

    def test_whitespace_separator(self) -> None:
        m = FieldPattern("runway", shape=SHAPES["runway"]).match("RWY    11L\n")
        assert m is not None
        assert m.value == "11L"
        assert m.variant is PatternVariant.INLINE

    def test_stops_at_next_label_on_same_line(self) -> None:
        m = FieldPattern("captain").match("CAPT: NGUYEN VAN A    F/O: TRAN VAN B\n")
        assert m is not None
        assert m.value == "NGUYEN VAN A"

    def test_stops_at_column_gap_before_label(self) -> None:
        m = FieldPattern("captain").match("CAPT   NGUYEN VAN A   F/O   TRAN VAN B\n")
        assert m is not None
        assert m.value == "NGUYEN VAN A"

    def test_single_space_before_label_word_is_kept(self) -> None:
        m = FieldPattern("td_point").match("T/D POINT: NORMAL LANDING ZONE\n")
        assert m is not None
        assert m.value == "NORMAL LANDING ZONE"

    def test_free_text_wraps_onto_next_line(self) -> None:
        text = "ALIGNMENT: WITHIN LIMITS, SLIGHT LEFT\nDRIFT CORRECTED\nSPEED CONTROL: NORMAL\n"
        m = FieldPattern("alignment").match(text)
        assert m is not None
        assert m.value == "WITHIN LIMITS, SLIGHT LEFT\nDRIFT CORRECTED"
        assert m.variant is PatternVariant.INLINE

    def test_shaped_value_does_not_wrap(self) -> None:
        m = FieldPattern("qnh", shape=SHAPES["qnh"]).match("QNH: 1013\nHPA\n")
        assert m is not None
        assert m.value == "1013"

    def test_case_insensitive_label(self) -> None:
        m = FieldPattern("tracking").match("Tracking: good\n")
        assert m is not None
        assert m.value == "good"


class TestLooseVariant:
    def test_label_mid_line(self) -> None:
        m = FieldPattern("first_officer").match("CAPT: NGUYEN VAN A    F/O: TRAN VAN B\n")
        assert m is not None
        assert m.value == "TRAN VAN B"
        assert m.variant is PatternVariant.LOOSE

    def test_loose_is_last_resort(self) -> None:
        text = "NOTES QNH 1009\nQNH:\n1013\n"
        m = FieldPattern("qnh", shape=SHAPES["qnh"]).match(text)
        assert m is not None
        assert m.value == "1013"
        assert m.variant is PatternVariant.NEXT_LINE


class TestEmptyFields:
    def test_empty_field_does_not_capture_next_label(self) -> None:
        text = "REASONS:\nCAPT SIGNATURE:\nNGUYEN VAN A\n"
        assert FieldPattern("reasons").match(text) is None

    def test_empty_inline_field(self) -> None:
        text = "OTHER:\nRESULT: SUCCESSFUL\n"
        assert FieldPattern("other").match(text) is None

    def test_missing_label(self) -> None:
        assert FieldPattern("tracking").match("NOTHING TO SEE HERE\n") is None


class TestCaptainLabels:
    def test_captain_does_not_match_signature_line(self) -> None:
        text = "CAPT SIGNATURE:\nNGUYEN VAN A\n"
        assert FieldPattern("captain").match(text) is None

    def test_signature_long_form(self) -> None:
        m = FieldPattern("captain_signature").match("CAPTAIN'S SIGNATURE: NGUYEN VAN A\n")
        assert m is not None
        assert m.value == "NGUYEN VAN A"


class TestResultMarkers:
    @pytest.mark.parametrize(
        ("text", "successful", "unsuccessful"),
        [
            ("RESULT: SUCCESSFUL", True, False),
            ("RESULT: UNSUCCESSFUL", False, True),
            ("RESULT: successful", False, False),
            ("RESULT:\nSUCCESSFULLY", False, False),
        ],
    )
    def test_markers(self, text: str, successful: bool, unsuccessful: bool) -> None:
        assert (SUCCESSFUL_MARKER.search(text) is not None) is successful
        assert (UNSUCCESSFUL_MARKER.search(text) is not None) is unsuccessful
