"""Constants for chart distance parsing."""

# 距離単位（フィート換算）
FEET_PER_MILE = 5280
FEET_PER_FURLONG = 660
FEET_PER_YARD = 3
FEET_PER_HUNDRED_YARDS = 100 * FEET_PER_YARD
FEET_PER_THOUSAND_YARDS = 1000 * FEET_PER_YARD

# マイルの分数表記: 分母 -> (フィート, コンパクト表記の接尾辞)
MILE_DENOMINATORS: dict[str, tuple[int, str]] = {
    "half": (2640, "/2m"),
    "fourth": (1320, "/4m"),
    "fourths": (1320, "/4m"),
    "eighth": (660, "/8m"),
    "eighths": (660, "/8m"),
    "sixteenth": (330, "/16m"),
    "sixteenths": (330, "/16m"),
}

# ハロンの分数表記
FURLONG_DENOMINATORS: dict[str, tuple[int, str]] = {
    "half": (330, "/2f"),
    "fourth": (165, "/4f"),
    "fourths": (165, "/4f"),
}

# 条件文（クレーミング価格など）を示す語句
CONDITION_BOOK_PHRASES: tuple[str, ...] = (
    "claiming price",
    "allowed",
    "non winners",
    "other than",
)

TRACK_RECORD_PHRASE = "track record"

ABOUT_PREFIX = "Abt "
