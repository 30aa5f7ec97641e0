"""CLIコマンドのテスト"""

import json

import pytest
from click.testing import CliRunner

from chartparser.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestDistanceCommand:
    """distanceコマンドのテスト"""

    def test_parse_phrase(self, runner):
        """距離表記を解析して表示する"""
        result = runner.invoke(main, ["distance", "One", "Mile", "And", "Forty", "Yards"])

        assert result.exit_code == 0
        assert "1m 40y" in result.output
        assert "5400" in result.output
        assert "8.18" in result.output

    def test_quoted_phrase(self, runner):
        """引用符で囲んだ表記も受け付ける"""
        result = runner.invoke(main, ["distance", "About One And One Half Miles"])

        assert result.exit_code == 0
        assert "Abt 1 1/2m" in result.output
        assert "no (About)" in result.output

    def test_unrecognized_phrase(self, runner):
        """解析できない表記はエラー終了"""
        result = runner.invoke(main, ["distance", "Six", "Kilometers"])

        assert result.exit_code == 1
        assert "Unable to parse race distance" in result.output

    def test_unknown_denominator(self, runner):
        """未対応の分母はエラー終了"""
        result = runner.invoke(main, ["distance", "One And One Third Miles"])

        assert result.exit_code == 1
        assert "third" in result.output


class TestCompactCommand:
    """compactコマンドのテスト"""

    def test_standard_distance(self, runner):
        """標準距離の表記を表示する"""
        result = runner.invoke(main, ["compact", "3960"])

        assert result.exit_code == 0
        assert result.output.strip() == "6f"

    def test_about(self, runner):
        """--aboutで概算表記"""
        result = runner.invoke(main, ["compact", "5280", "--about"])

        assert result.exit_code == 0
        assert result.output.strip() == "Abt 1m"

    def test_non_standard_distance(self, runner):
        """テーブルにない距離はヤード表記"""
        result = runner.invoke(main, ["compact", "1200"])

        assert result.exit_code == 0
        assert "400y" in result.output

    def test_negative_feet(self, runner):
        """負の距離は受け付けない"""
        result = runner.invoke(main, ["compact", "--", "-10"])

        assert result.exit_code != 0


class TestParseCommand:
    """parseコマンドのテスト"""

    def _write_chart(self, tmp_path, lines):
        path = tmp_path / "chart.txt"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)

    def test_parse_table(self, runner, tmp_path):
        """チャートのテキストを解析して表示する"""
        path = self._write_chart(
            tmp_path,
            [
                "Six Furlongs On The Turf - Originally Scheduled For the Dirt",
                "Purse: $25,000",
            ],
        )
        result = runner.invoke(main, ["parse", path])

        assert result.exit_code == 0
        assert "6f" in result.output
        assert "Dirt (off turf)" in result.output

    def test_parse_json(self, runner, tmp_path):
        """--jsonでJSON出力"""
        path = self._write_chart(
            tmp_path,
            [
                "Six Furlongs On The Dirt|Track Record: (Horse Name - 1:08.20 - January 1, 2015)",
                "Purse: $25,000",
            ],
        )
        result = runner.invoke(main, ["parse", path, "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["distance"]["feet"] == 3960
        assert data["surface"] == "Dirt"
        assert data["offTurf"] is False
        assert data["trackRecord"]["holder"]["name"] == "Horse Name"
        assert data["trackRecord"]["millis"] == 68200

    def test_parse_stdin(self, runner):
        """標準入力から読み込める"""
        result = runner.invoke(main, ["parse"], input="One Mile On The Turf\nPurse: $40,000\n")

        assert result.exit_code == 0
        assert "1m" in result.output
        assert "Turf" in result.output

    def test_no_distance(self, runner, tmp_path):
        """距離文がない場合はエラー終了"""
        path = self._write_chart(tmp_path, ["Race 1", "Purse: $25,000"])
        result = runner.invoke(main, ["parse", path])

        assert result.exit_code == 1
        assert "Unable to identify a valid race distance" in result.output
