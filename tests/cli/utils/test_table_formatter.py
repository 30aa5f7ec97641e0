"""table_formatter ユーティリティのテスト"""

from datetime import date

from chartparser.cli.utils.table_formatter import (
    distance_rows,
    format_record_table,
    format_rows,
    pad_to_width,
)
from chartparser.models.distance import (
    DistanceSurfaceTrackRecord,
    DistanceSurfaceTrackRecordBuilder,
    TrackRecord,
)
from chartparser.models.horse import Horse
from chartparser.parsers.distance_grammar import parse_race_distance


class TestPadToWidth:
    """pad_to_width のテスト"""

    def test_pad_to_width_left(self):
        """左揃え（デフォルト）: テキストの右にスペースを追加"""
        assert pad_to_width("abc", 6) == "abc   "

    def test_pad_to_width_right(self):
        """右揃え: テキストの左にスペースを追加"""
        assert pad_to_width("abc", 6, align_right=True) == "   abc"

    def test_pad_to_width_no_padding_needed(self):
        """テキストが既に目標幅以上の場合パディング不要"""
        assert pad_to_width("hello world", 5) == "hello world"


class TestFormatRows:
    """format_rows のテスト"""

    def test_labels_are_aligned(self):
        """ラベル幅を揃える"""
        assert format_rows([("A", "1"), ("Long", "2")]) == "A    : 1\nLong : 2"

    def test_empty(self):
        assert format_rows([]) == ""


class TestDistanceRows:
    """distance_rows のテスト"""

    def test_rows(self):
        rows = dict(distance_rows(parse_race_distance("Six Furlongs")))
        assert rows["Compact"] == "6f"
        assert rows["Feet"] == "3960"
        assert rows["Furlongs"] == "6.00"
        assert rows["Exact"] == "yes"
        assert "Run-up" not in rows


class TestFormatRecordTable:
    """format_record_table のテスト"""

    def test_record_with_track_record(self):
        """コースレコードを含む表示"""
        record = DistanceSurfaceTrackRecord.create(
            "Six Furlongs",
            "Dirt",
            track_record=TrackRecord(
                holder=Horse("Horse Name"),
                time="1:08.20",
                millis=68200,
                race_date=date(2015, 1, 1),
            ),
        )
        output = format_record_table(record)

        assert "Horse Name" in output
        assert "1:08.20 (68200 ms)" in output
        assert "2015-01-01" in output
        assert "off turf" not in output

    def test_later_stage_fields(self):
        """後段で設定された項目も表示する"""
        builder = DistanceSurfaceTrackRecordBuilder.from_record(
            DistanceSurfaceTrackRecord.create("One Mile", "Turf", scheduled_surface="Dirt")
        )
        builder.track_condition = "Firm"
        builder.run_up = 48
        output = format_record_table(builder.build())

        assert "Firm" in output
        assert "48" in output
        assert "Dirt (off turf)" in output
