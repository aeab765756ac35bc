"""Unit tests for the public query functions in ncaa_boxscore.evaluation.queries."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from ncaa_boxscore.evaluation.queries import (
    average_points_player,
    generate_matches_history,
    generate_player_report,
    match_most_valuable_player,
    purdue_best_month,
    purdue_best_winning_match_score,
)
from ncaa_boxscore.evaluation.result import Err, Ok
from ncaa_boxscore.ingest.errors import ResultCode

# ---------------------------------------------------------------------------
# generate_matches_history
# ---------------------------------------------------------------------------


class TestGenerateMatchesHistory:
    @pytest.mark.smoke
    def test_history_2024(self, game_data: Path, tmp_path: Path) -> None:
        out = tmp_path / "history_2024.txt"
        assert generate_matches_history(game_data, 2024, out) == Ok(None)
        assert out.read_text() == (
            "2024\n"
            "01-10:Purdue(35)-Indiana(28)\n"
            "01-15:Purdue(42)-Michigan(29)\n"
            "02-03:Purdue(30)-Illinois(35)\n"
            "Record: 2W-1L\n"
        )

    def test_history_2023(self, game_data: Path, tmp_path: Path) -> None:
        out = tmp_path / "history_2023.txt"
        assert generate_matches_history(str(game_data), 2023, str(out)).is_ok
        assert out.read_text() == "2023\n12-20:Purdue(25)-Iowa(19)\nRecord: 1W-0L\n"

    def test_tie_counts_as_loss(self, write_log: Callable[..., Path], tmp_path: Path) -> None:
        log = write_log("2024-03-01|A,Purdue#10,0,0,5.0", "2024-03-01|B,Iowa#10,0,0,5.0")
        out = tmp_path / "out.txt"
        assert generate_matches_history(log, 2024, out).is_ok
        assert out.read_text().endswith("Record: 0W-1L\n")

    def test_other_years_do_not_split_a_match(self, write_log: Callable[..., Path], tmp_path: Path) -> None:
        log = write_log(
            "2024-01-10|A,Purdue#10,0,0,5.0",
            "2023-05-05|B,Purdue#99,0,0,5.0",
            "2024-01-10|C,Iowa#4,0,0,5.0",
        )
        out = tmp_path / "out.txt"
        assert generate_matches_history(log, 2024, out).is_ok
        assert out.read_text() == "2024\n01-10:Purdue(10)-Iowa(4)\nRecord: 1W-0L\n"

    def test_no_matching_year(self, game_data: Path, tmp_path: Path) -> None:
        out = tmp_path / "out.txt"
        result = generate_matches_history(game_data, 1999, out)
        assert isinstance(result, Err)
        assert result.code is ResultCode.NO_DATA_POINTS
        assert out.read_text() == ""

    def test_non_positive_year(self, tmp_path: Path) -> None:
        out = tmp_path / "out.txt"
        result = generate_matches_history(tmp_path / "missing.txt", 0, out)
        assert result.code is ResultCode.BAD_DATE
        assert not out.exists()

    def test_missing_input_creates_no_output(self, tmp_path: Path) -> None:
        out = tmp_path / "out.txt"
        result = generate_matches_history(tmp_path / "missing.txt", 2024, out)
        assert result.code is ResultCode.FILE_READ_ERR
        assert not out.exists()

    def test_unwritable_output(self, game_data: Path, tmp_path: Path) -> None:
        result = generate_matches_history(game_data, 2024, tmp_path / "no_such_dir" / "out.txt")
        assert result.code is ResultCode.FILE_WRITE_ERR

    def test_late_bad_record_leaves_empty_output(
        self, write_log: Callable[..., Path], tmp_path: Path
    ) -> None:
        log = write_log("2024-01-10|A,Purdue#10,0,0,5.0", "2024-01-11|B,Purdue#-1,0,0,5.0")
        out = tmp_path / "out.txt"
        out.write_text("stale contents\n")
        assert generate_matches_history(log, 2024, out).code is ResultCode.BAD_RECORD
        assert out.read_text() == ""

    def test_bad_record_in_other_year_still_fails(
        self, write_log: Callable[..., Path], tmp_path: Path
    ) -> None:
        log = write_log("2024-01-10|A,Purdue#10,0,0,5.0", "2019-01-11|B,Purdue#1,0,0,0")
        assert generate_matches_history(log, 2024, tmp_path / "out.txt").code is ResultCode.BAD_RECORD


    def test_oversized_count_returns_result(self, write_log: Callable[..., Path], tmp_path: Path) -> None:
        log = write_log("2024-01-10|A,Purdue#10,0,0,5.0", "2024-01-10|B,Iowa#" + "9" * 5000 + ",0,0,5.0")
        out = tmp_path / "out.txt"
        assert generate_matches_history(log, 2024, out).is_ok
        assert out.read_text() == "2024\n01-10:Purdue(10)-(0)\nRecord: 1W-0L\n"

    def test_non_utf8_opponent_round_trips(self, tmp_path: Path) -> None:
        log = tmp_path / "latin1.txt"
        log.write_bytes(b"2024-01-10|A,Purdue#10,0,0,5.0\n2024-01-10|B,K\xf6ln#4,0,0,5.0\n")
        out = tmp_path / "out.txt"
        assert generate_matches_history(log, 2024, out).is_ok
        assert out.read_bytes() == b"2024\n01-10:Purdue(10)-K\xf6ln(4)\nRecord: 1W-0L\n"

# ---------------------------------------------------------------------------
# generate_player_report
# ---------------------------------------------------------------------------


class TestGeneratePlayerReport:
    @pytest.mark.smoke
    def test_edey_report(self, game_data: Path, tmp_path: Path) -> None:
        out = tmp_path / "edey_report.txt"
        assert generate_player_report(game_data, "Z. Edey", out) == Ok(None)
        assert out.read_text() == (
            "Player: Z. Edey\n"
            "Games: 4\n"
            "Games Won: 3\n"
            "Points per Game: 24.25\n"
            "Assists per Game: 2.00\n"
            "Blocks per Game: 3.50\n"
            "Average Minutes: 29.25\n"
        )

    def test_smith_report(self, game_data: Path, tmp_path: Path) -> None:
        out = tmp_path / "smith_report.txt"
        assert generate_player_report(game_data, "B. Smith", out).is_ok
        assert out.read_text().splitlines()[1:4] == ["Games: 3", "Games Won: 2", "Points per Game: 11.67"]

    def test_opponent_player_has_no_report(self, game_data: Path, tmp_path: Path) -> None:
        out = tmp_path / "doe_report.txt"
        assert generate_player_report(game_data, "J. Doe", out).code is ResultCode.NO_DATA_POINTS
        assert not out.exists()

    def test_bad_date_creates_no_output(self, write_log: Callable[..., Path], tmp_path: Path) -> None:
        log = write_log("2024-01-10|A,Purdue#10,0,0,5.0", "2024-01-31|A,Purdue#10,0,0,5.0")
        out = tmp_path / "out.txt"
        assert generate_player_report(log, "A", out).code is ResultCode.BAD_DATE
        assert not out.exists()

    def test_missing_input(self, tmp_path: Path) -> None:
        result = generate_player_report(tmp_path / "x.txt", "A", tmp_path / "o.txt")
        assert result.code is ResultCode.FILE_READ_ERR

    def test_unwritable_output(self, game_data: Path, tmp_path: Path) -> None:
        result = generate_player_report(game_data, "Z. Edey", tmp_path / "no_such_dir" / "out.txt")
        assert result.code is ResultCode.FILE_WRITE_ERR


# ---------------------------------------------------------------------------
# Statistic queries
# ---------------------------------------------------------------------------


class TestMatchMostValuablePlayer:
    @pytest.mark.smoke
    def test_mvp(self, game_data: Path) -> None:
        result = match_most_valuable_player(game_data, 2024, 1, 10)
        assert isinstance(result, Ok)
        assert result.value == pytest.approx(40.2)

    def test_second_match(self, game_data: Path) -> None:
        result = match_most_valuable_player(game_data, 2024, 1, 15)
        assert isinstance(result, Ok)
        assert result.value == pytest.approx(43.5)

    def test_invalid_date_checked_before_open(self, tmp_path: Path) -> None:
        result = match_most_valuable_player(tmp_path / "missing.txt", 2024, 13, 1)
        assert result.code is ResultCode.BAD_DATE

    def test_no_match_on_date(self, game_data: Path) -> None:
        assert match_most_valuable_player(game_data, 2024, 1, 11).code is ResultCode.NO_DATA_POINTS

    def test_missing_input(self, tmp_path: Path) -> None:
        assert match_most_valuable_player(tmp_path / "x.txt", 2024, 1, 10).code is ResultCode.FILE_READ_ERR


class TestAveragePointsPlayer:
    def test_average(self, game_data: Path) -> None:
        assert average_points_player(game_data, "Z. Edey") == Ok(24.25)

    def test_unknown_player(self, game_data: Path) -> None:
        assert average_points_player(game_data, "Nobody").code is ResultCode.NO_DATA_POINTS


    def test_oversized_count_ends_input(self, write_log: Callable[..., Path]) -> None:
        log = write_log("2024-01-10|A,Purdue#10,0,0,1.0", "2024-01-11|A,Purdue#" + "9" * 5000 + ",0,0,1.0")
        assert average_points_player(log, "A") == Ok(10.0)

    def test_oversized_count_only_row(self, write_log: Callable[..., Path]) -> None:
        log = write_log("2024-01-10|A,Purdue#" + "9" * 5000 + ",0,0,1.0")
        assert average_points_player(log, "A").code is ResultCode.NO_DATA_POINTS

    def test_non_utf8_name_elsewhere_in_log(self, tmp_path: Path) -> None:
        log = tmp_path / "latin1.txt"
        log.write_bytes(b"2024-01-10|A,Purdue#10,0,0,5.0\n2024-01-11|M\xfcller,Purdue#20,0,0,5.0\n")
        assert average_points_player(log, "A") == Ok(10.0)

    def test_record_with_trailing_text_is_counted(self, write_log: Callable[..., Path]) -> None:
        log = write_log(
            "2024-01-10|A,Purdue#10,0,0,5.0",
            "2024-01-11|A,Purdue#20,0,0,5.0;",
            "2024-01-12|A,Purdue#90,0,0,5.0",
        )
        assert average_points_player(log, "A") == Ok(15.0)


class TestPurdueBestWinningMatchScore:
    def test_january(self, game_data: Path) -> None:
        assert purdue_best_winning_match_score(game_data, 2024, 1) == Ok(42)

    def test_month_without_win(self, game_data: Path) -> None:
        assert purdue_best_winning_match_score(game_data, 2024, 2).code is ResultCode.NO_DATA_POINTS

    @pytest.mark.parametrize(("year", "month"), [(0, 1), (2024, 0), (2024, 13)])
    def test_invalid_arguments(self, game_data: Path, year: int, month: int) -> None:
        assert purdue_best_winning_match_score(game_data, year, month).code is ResultCode.BAD_DATE


class TestPurdueBestMonth:
    def test_best_month(self, game_data: Path) -> None:
        assert purdue_best_month(game_data) == Ok(1)

    def test_empty_file(self, write_log: Callable[..., Path]) -> None:
        assert purdue_best_month(write_log()).code is ResultCode.NO_DATA_POINTS

    def test_all_losses(self, write_log: Callable[..., Path]) -> None:
        log = write_log("2024-01-10|A,Purdue#1,0,0,5.0", "2024-01-10|B,Iowa#2,0,0,5.0")
        assert purdue_best_month(log).code is ResultCode.NO_DATA_POINTS
