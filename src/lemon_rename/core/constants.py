"""Lemon Rename constants, defaults and locale data tables."""

from enum import Enum
from pathlib import Path
from typing import Final


class PatternType(str, Enum):
    """Kind of reusable rename transformation."""

    PREFIX = "prefix"
    SUFFIX = "suffix"


class SuggestionType(str, Enum):
    """Origin class of a rename suggestion."""

    SMART = "smart"
    QUICK = "quick"


# Directory structure
LEMON_ROOT_DIR: Final[str] = ".lemon"
CONFIG_FILE: Final[str] = "rename.config.json"
HISTORY_FILE: Final[str] = "rename-history.json"
NOTE_FILE_EXTENSION: Final[str] = ".md"

# Time units (milliseconds)
MS_PER_HOUR: Final[int] = 60 * 60 * 1000
MS_PER_DAY: Final[int] = 24 * MS_PER_HOUR

# History retention
DEFAULT_MAX_RECORDS: Final[int] = 1000
DEFAULT_RETENTION_DAYS: Final[int] = 365
DEFAULT_PATTERN_WINDOW_DAYS: Final[int] = 90
DEFAULT_RECENT_WINDOW_HOURS: Final[int] = 24

# Record key separator (oldName→newName)
RECORD_KEY_SEPARATOR: Final[str] = "→"

# Scoring
DEFAULT_RECENT_DAYS: Final[float] = 7.0
DEFAULT_STALE_DAYS: Final[float] = 30.0
DEFAULT_RECENT_DECAY: Final[float] = 1.0
DEFAULT_MEDIUM_DECAY: Final[float] = 0.5
DEFAULT_STALE_DECAY: Final[float] = 0.1
DEFAULT_MIN_ACCEPT_RATE: Final[float] = 0.1
DEFAULT_ACCEPT_RATE: Final[float] = 0.5
DEFAULT_SCORE_SCALE: Final[float] = 10.0

# Suggestion limits
DEFAULT_MAX_SUGGESTIONS: Final[int] = 10
DEFAULT_MAX_QUICK_SUGGESTIONS: Final[int] = 8
DEFAULT_PATH_CONVENTION_RATIO: Final[float] = 0.3
DEFAULT_KEYWORD_SAMPLE_CHARS: Final[int] = 500
DEFAULT_HISTORICAL_SUFFIX_LIMIT: Final[int] = 5
DEFAULT_HISTORICAL_PREFIX_LIMIT: Final[int] = 3

# Characters not allowed in filenames on common file systems
INVALID_FILENAME_CHARS: Final[str] = '\\/:*?"<>|'

# Noise filters for pattern extraction
NUMERIC_PATTERN: Final[str] = r"^\d+$"
TIMESTAMP_SUFFIX_PATTERN: Final[str] = r"^-\d{13,}$"
DATE_PREFIX_PATTERN: Final[str] = r"^\d{8}-$"

# Short random ids for quick suggestions
SHORT_ID_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"
SHORT_ID_LENGTH: Final[int] = 8

# Icons
ICON_SMART: Final[str] = "\U0001f525"
ICON_QUICK: Final[str] = "⚡"
ICON_TITLE: Final[str] = "\U0001f4dd"
ICON_DUPLICATE: Final[str] = "⚠️"
ICON_TAG: Final[str] = "\U0001f3f7️"
ICON_FOLDER: Final[str] = "\U0001f4c1"
ICON_OPEN_FOLDER: Final[str] = "\U0001f4c2"
ICON_BOOKMARK: Final[str] = "\U0001f516"
ICON_CALENDAR: Final[str] = "\U0001f4c5"
ICON_WEEK: Final[str] = "\U0001f4c6"
ICON_CHART: Final[str] = "\U0001f4ca"
ICON_CLOCK: Final[str] = "⏰"
ICON_NUMBER: Final[str] = "\U0001f522"
ICON_DRAFT: Final[str] = "✏️"
ICON_FINAL: Final[str] = "✅"
ICON_LINK: Final[str] = "\U0001f517"
ICON_KEY: Final[str] = "\U0001f511"

# Pattern value -> icon, first match wins. Entries are (regex, icon).
SUFFIX_ICON_RULES: Final[tuple[tuple[str, str], ...]] = (
    (r"(?i)dataview", ICON_CHART),
    (r"(?i)v\d+", ICON_NUMBER),
    (r"Draft|草稿", ICON_DRAFT),
    (r"Final|最终", ICON_FINAL),
)

PREFIX_ICON_RULES: Final[tuple[tuple[str, str], ...]] = (
    (r"Draft|草稿", ICON_DRAFT),
    (r"\d{8}", ICON_CALENDAR),
    (r"\[|【", ICON_FOLDER),
)

# Version detection in historical pattern values
VERSION_PATTERN_RULES: Final[tuple[str, ...]] = (
    r"(?i)v\d+",
    r"版本",
)

# Time scenario keywords matched against the lowercased title
TITLE_SCENARIO_KEYWORDS: Final[dict[str, frozenset[str]]] = {
    "daily": frozenset({"日记", "每日", "daily", "journal", "今天", "today"}),
    "weekly": frozenset({"周报", "周记", "weekly", "week"}),
    "monthly": frozenset({"月报", "月度", "monthly", "month"}),
}

# Time scenario keywords matched against the lowercased parent folder name
FOLDER_SCENARIO_KEYWORDS: Final[dict[str, frozenset[str]]] = {
    "daily": frozenset({"日记", "journal", "diary", "daily"}),
    "weekly": frozenset({"周报", "weekly"}),
    "monthly": frozenset({"月报", "monthly"}),
}

# Stop words removed during keyword extraction (English + Chinese)
STOP_WORDS: Final[frozenset[str]] = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "her",
    "was", "one", "our", "out", "day", "get", "has", "him", "his", "how",
    "its", "may", "new", "now", "old", "see", "two", "who", "boy", "did",
    "car", "let", "put", "say", "she", "too", "use",
    "的", "了", "是", "在", "我", "有", "和",
    "就", "不", "人", "都", "一", "个", "上",
    "也", "很", "到", "说", "要", "去", "你",
    "会", "着", "没", "看", "好", "自己",
    "这个", "那个", "什么", "怎么",
})


def get_lemon_root(base_path: Path | None = None) -> Path:
    """Get the .lemon root directory path."""
    if base_path is None:
        base_path = Path.cwd()
    return base_path / LEMON_ROOT_DIR


def get_config_path(base_path: Path | None = None) -> Path:
    """Get the configuration file path."""
    return get_lemon_root(base_path) / CONFIG_FILE
