"""
Tests for the command-line entry point.
"""
import openpyxl
import pytest

from lkhc.cli import main


class TestMain:
    """Tests for main."""

    @pytest.mark.parametrize("year", [1994, 2000, 2017])
    def test_unsupported_year(self, year, tmp_path, capsys):
        assert main(["--year", str(year), "--archive", str(tmp_path)]) == 1
        err = capsys.readouterr().err
        assert f"but was {year}" in err
        assert "[1995, 1998] or [2006, 2016]" in err

    def test_writes_csv_to_stdout(self, good_week, capsys):
        root = good_week(year=2016, week=1)
        assert main(["--year", "2016", "--archive", str(root), "--weeks", "1", "2"]) == 0
        captured = capsys.readouterr()
        assert captured.out == (
            "year,week,segment,gender,rank,id,name,time,score\n"
            "2016,1,9001,M,1,55,A Rider,59,100\n"
        )
        assert "year: 2016 week: 2" in captured.err
        assert "rows=1" in captured.err

    def test_writes_csv_file(self, good_week, tmp_path):
        root = good_week(year=1997, week=2)
        out = tmp_path / "out.csv"
        assert main(["--year", "1997", "--archive", str(root), "--weeks", "2", "--out", str(out)]) == 0
        assert out.read_text(encoding="utf-8").splitlines()[1].startswith("1997,2,9001,M,1,55")

    def test_oversized_score_fails_the_week(self, archive, page, anchor_link, table, row, capsys):
        root = archive(2016, 1, metadata=page(anchor_link()), results=page(table("Men", [row(score="1" * 400)])))
        assert main(["--archive", str(root), "--weeks", "1"]) == 1
        err = capsys.readouterr().err
        assert "number out of range" in err
        assert "no results for year 2016" in err

    def test_no_summary_line_when_writing_a_file(self, good_week, tmp_path, capsys):
        root = good_week()
        out = tmp_path / "out.csv"
        assert main(["--archive", str(root), "--weeks", "1", "--out", str(out)]) == 0
        assert "Done:" not in capsys.readouterr().err

    def test_writes_xlsx(self, good_week, tmp_path):
        root = good_week()
        out = tmp_path / "2016.xlsx"
        assert main(["--archive", str(root), "--weeks", "1", "--format", "xlsx", "--out", str(out)]) == 0
        ws = openpyxl.load_workbook(out)["2016"]
        assert ws.max_row == 2

    def test_xlsx_needs_out(self, tmp_path, capsys):
        assert main(["--archive", str(tmp_path), "--format", "xlsx"]) == 1
        assert "--out" in capsys.readouterr().err

    def test_no_results(self, tmp_path, capsys):
        assert main(["--archive", str(tmp_path), "--weeks", "1"]) == 1
        assert "no results for year 2016" in capsys.readouterr().err
