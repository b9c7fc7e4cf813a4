"""Line classification predicates for the meal-plan parser.

Every predicate is a pure function of a `Line`; the parser tests them in a
fixed order and the first rule that accepts a line handles it. Keywords are
compared against folded text (see `nutrirenal.utilities.text.fold`).
"""
import re
from typing import NamedTuple

from nutrirenal.logic.parsing.text_cleaning import (
    clean_text,
    starts_with_pictograph,
    strip_trailing_colon,
)
from nutrirenal.utilities.text import contains_any, fold
from nutrirenal.utilities.constants import (
    INFO_KEYWORDS,
    LIMITS_KEYWORDS,
    MEAL_TOKENS,
    MEALS_KEYWORDS,
    NOTES_KEYWORDS,
    TITLE_KEYWORDS,
    WEEKDAYS,
)

DAY_NUMBER_PATTERN = re.compile(r"\bdia\s*\d")
WEEKDAY_PATTERN = re.compile(r"\b(?:" + "|".join(WEEKDAYS) + r")\b")
LEADING_DAY_WORD = re.compile(r"^dia\b")
LIST_ITEM_PATTERN = re.compile(r"^[-*]\s")
NESTED_ITEM_PATTERN = re.compile(r"^\s+[-*]\s")
INDENT_PATTERN = re.compile(r"^\s{2,}")
# Bold lines mentioning these are inline content, never headers
INLINE_CONTENT_PATTERN = re.compile(r"ingredientes:|\bnutricion\b|sodio")
# "nutrición" as a word: "nutricional" food names are not nutrition lines
NUTRITION_PATTERN = re.compile(r"\bnutricion\b|sodio|kcal")
INLINE_NUTRITION_PATTERN = re.compile(r"\bnutricion\b|sodio")
INLINE_SPLIT_PATTERN = re.compile(r"ingredientes:|\bnutricion\b")


class Line(NamedTuple):
    raw: str       # right-trimmed, indentation kept
    stripped: str  # both sides trimmed, markers kept
    cleaned: str   # stored form
    folded: str    # matching form of `cleaned`

    @classmethod
    def from_raw(cls, raw: str) -> "Line":
        raw = raw.rstrip()
        stripped = raw.strip()
        cleaned = clean_text(stripped)
        return cls(raw, stripped, cleaned, fold(cleaned))


# --- Header shape ---------------------------------------------------------

def is_section_header(line: Line) -> bool:
    """`#` headings, and standalone `**bold**` lines that are not inline content."""
    if line.stripped.startswith("#"):
        return True
    if line.stripped.startswith("**"):
        return not INLINE_CONTENT_PATTERN.search(fold(line.stripped))
    return False


def is_heading_like(line: Line) -> bool:
    # "🌅 Desayuno" style labels count as headings for meals only
    return is_section_header(line) or starts_with_pictograph(line.stripped)


# --- Day and meal labels ---------------------------------------------------

def matches_day_pattern(folded: str) -> bool:
    return bool(DAY_NUMBER_PATTERN.search(folded) or WEEKDAY_PATTERN.search(folded))


def is_meal_label(folded: str) -> bool:
    return any(folded.startswith(token) for token in MEAL_TOKENS)


def is_day_header(line: Line) -> bool:
    if not matches_day_pattern(line.folded):
        return False
    # no emoji allowance: "🥗 Sopa del lunes" is food, "🗓️ Día 3" still starts with "día"
    return is_section_header(line) or bool(LEADING_DAY_WORD.match(line.folded))


def is_meal_header(line: Line) -> bool:
    return is_meal_label(line.folded) and is_heading_like(line)


def is_meal_bullet_label(line: Line, meal_open: bool) -> bool:
    """A top-level bullet naming a meal ("- **Desayuno**", "- Comida:").

    While a meal is open only bare, bold or colon-terminated labels qualify,
    so a food bullet such as "- Comida rápida casera" stays an item.
    """
    if not is_meal_label(line.folded):
        return False
    if not meal_open:
        return True
    return (
        strip_trailing_colon(line.folded) in MEAL_TOKENS
        or "**" in line.stripped
        or line.cleaned.endswith(":")
    )


# --- Section starts --------------------------------------------------------

def _section_with(line: Line, keywords) -> bool:
    return is_section_header(line) and contains_any(line.folded, keywords)


def is_title_header(line: Line) -> bool:
    return _section_with(line, TITLE_KEYWORDS)


def is_info_header(line: Line) -> bool:
    return _section_with(line, INFO_KEYWORDS)


def is_limits_header(line: Line) -> bool:
    return _section_with(line, LIMITS_KEYWORDS)


def is_notes_header(line: Line) -> bool:
    return _section_with(line, NOTES_KEYWORDS)


def is_meals_header(line: Line) -> bool:
    return _section_with(line, MEALS_KEYWORDS)


# --- Content lines ---------------------------------------------------------

def is_list_item(line: Line) -> bool:
    return bool(LIST_ITEM_PATTERN.match(line.raw))


def is_indented_item(line: Line) -> bool:
    return bool(NESTED_ITEM_PATTERN.match(line.raw) or INDENT_PATTERN.match(line.raw))


def is_recipe_heading(line: Line) -> bool:
    return line.stripped.startswith("###")


def is_plain_text(line: Line) -> bool:
    return bool(line.cleaned) and not is_section_header(line)


def is_nutrition_text(folded: str) -> bool:
    return bool(NUTRITION_PATTERN.search(folded))


def is_inline_nutrition(folded: str) -> bool:
    """Segment of a one-line "**Ingredientes:** ... **Nutrición:** ..." that holds the nutrition."""
    return bool(INLINE_NUTRITION_PATTERN.search(folded))


def has_inline_labels(folded: str) -> bool:
    return bool(INLINE_SPLIT_PATTERN.search(folded))
