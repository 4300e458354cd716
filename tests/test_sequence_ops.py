import pytest

from sequence_ops import (
    ValidityReport,
    assemble,
    improve_with_remaining,
    merge_sequence,
    validate_sequence,
)


class TestImproveWithRemaining:

    def test_nothing_unused(self):
        pieces = ["123456", "567890", "901234"]
        assert improve_with_remaining(pieces, list(pieces)) == pieces

    def test_appends_and_prepends(self):
        pieces = ["110022", "223333", "224444", "335555"]
        chain = ["223333", "335555"]
        result = improve_with_remaining(pieces, chain)
        assert result == ["110022", "223333", "335555"]

    def test_appends_in_sorted_order(self):
        pieces = ["556677", "123455", "775599"]
        chain = ["123455"]
        result = improve_with_remaining(pieces, chain)
        assert result == ["123455", "556677", "775599"]

    def test_does_not_mutate_chain(self):
        chain = ["223333"]
        improve_with_remaining(["110022", "223333", "334444"], chain)
        assert chain == ["223333"]

    def test_single_sweep_strands_late_fit(self):
        # 119999 would fit in front of 995555, but it is tried first
        pieces = ["550066", "119999", "995555"]
        result = improve_with_remaining(pieces, ["550066"])
        assert result == ["995555", "550066"]
        assert "119999" not in result

    def test_usage_tracked_by_value(self):
        pieces = ["121212", "121212"]
        assert improve_with_remaining(pieces, ["121212"]) == ["121212"]

    def test_result_is_drawn_from_input(self):
        pieces = ["101112", "121314", "141510", "999999", "103412", "771010"]
        result = improve_with_remaining(pieces, ["121314", "141510"])
        assert set(result) <= set(pieces)
        assert len(result) <= len(pieces)

    def test_empty_chain(self):
        assert improve_with_remaining(["123456"], []) == []

    def test_logs_each_candidate(self, sorter_caplog):
        sorter_caplog.set_level(1, logger="piece_sorter")
        improve_with_remaining(["550066", "119999", "995555"], ["550066"])
        messages = [r.getMessage() for r in sorter_caplog.records]
        assert "Repair: dropped 119999" in messages
        assert "Repair: prepended 995555" in messages


class TestValidateSequence:

    @pytest.mark.parametrize("sequence", [[], ["123456"], ["123456", "567890", "901234"]])
    def test_valid(self, sequence):
        assert validate_sequence(sequence) == ValidityReport(True, -1)

    def test_reports_first_bad_index(self):
        sequence = ["123456", "567890", "111111", "112233", "999999"]
        report = validate_sequence(sequence)
        assert not report.valid
        assert report.first_bad_index == 1

    def test_bad_last_pair(self):
        valid, index = validate_sequence(["123456", "567890", "123456"])
        assert (valid, index) == (False, 1)


class TestMergeSequence:

    def test_empty(self):
        assert merge_sequence([]) == ""

    def test_single_piece(self):
        assert merge_sequence(["111111"]) == "111111"

    def test_drops_overlap(self):
        sequence = ["123456", "567890", "901234"]
        merged = merge_sequence(sequence)
        assert merged == "12345678901234"
        assert len(merged) == 6 + 4 * (len(sequence) - 1)

    def test_pieces_visible_at_boundaries(self):
        sequence = ["101112", "121314", "141510", "101112"]
        merged = merge_sequence(sequence)
        for k, piece in enumerate(sequence):
            assert merged[4 * k:4 * k + 6] == piece


class TestAssemble:

    def test_full_chain(self):
        result = assemble(["901234", "123456", "567890"])
        assert result.start_piece == "123456"
        assert result.chain == ["123456", "567890", "901234"]
        assert result.sequence == result.chain
        assert result.report.valid
        assert result.merged == "12345678901234"
        assert result.dropped == []

    def test_three_digit_overlap_does_not_chain(self):
        # 56 != 45 and 89 != 78; only 789012 -> 123456 links
        result = assemble(["123456", "456789", "789012"])
        assert list(result.graph.edges()) == [("789012", "123456")]
        assert result.start_piece == "789012"
        assert result.chain == ["789012", "123456"]
        assert result.sequence == ["789012", "123456"]
        assert result.report == ValidityReport(True, -1)
        assert result.merged == "7890123456"
        assert result.dropped == ["456789"]

    def test_unmatched_piece_is_silently_dropped(self):
        result = assemble(["111111", "222222"])
        assert result.chain == ["111111"]
        assert result.sequence == ["111111"]
        assert result.report == ValidityReport(True, -1)
        assert result.merged == "111111"
        assert result.dropped == ["222222"]

    def test_repair_extends_chain(self):
        result = assemble(["110022", "223333", "224444", "335555"])
        assert result.start_piece == "223333"
        assert result.chain == ["223333", "335555"]
        assert result.sequence == ["110022", "223333", "335555"]
        assert result.merged == "11002233335555"
        assert result.dropped == ["224444"]

    def test_duplicate_values_collapse(self):
        result = assemble(["121212", "121212"])
        assert result.sequence == ["121212"]
        assert result.dropped == []

    def test_empty_input(self):
        result = assemble([])
        assert result.start_piece is None
        assert result.sequence == []
        assert result.report.valid
        assert result.merged == ""
