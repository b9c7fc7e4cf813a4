"""Text helpers shared by the meal-plan line rules.

`clean_text` turns a raw markdown line into the text stored in the plan
(no emoji, no bold markers, no leading heading/list markers). Matching uses
`nutrirenal.utilities.text.fold` on that cleaned text.
"""
import re

# Emoji, dingbats, misc symbols, variation selectors and the zero-width joiner
EMOJI_PATTERN = re.compile(
    "["
    "\U0001F300-\U0001F5FF"
    "\U0001F600-\U0001F64F"
    "\U0001F680-\U0001F6FF"
    "\U0001F700-\U0001F9FF"
    "\U0001FA70-\U0001FAFF"
    "\u2600-\u26FF"
    "\u2700-\u27BF"
    "\uFE00-\uFE0F"
    "\u200D"
    "]"
)
HEADING_MARKER = re.compile(r"^#+\s*")
LIST_MARKER = re.compile(r"^(?:-\s*|[*•]\s+)")
TRAILING_COLON = re.compile(r"\s*:$")
LEADING_COLONS = re.compile(r"^[:\s]+")


def strip_emoji(text: str) -> str:
    return EMOJI_PATTERN.sub("", text)


def clean_text(text: str) -> str:
    """Strip emoji, `**`, one leading heading marker run and one list marker."""
    text = strip_emoji(text).replace("**", "").strip()
    text = HEADING_MARKER.sub("", text)
    text = LIST_MARKER.sub("", text)
    return text.strip()


def starts_with_pictograph(text: str) -> bool:
    return bool(EMOJI_PATTERN.match(text))


def strip_trailing_colon(text: str) -> str:
    return TRAILING_COLON.sub("", text)


def strip_leading_colons(text: str) -> str:
    return LEADING_COLONS.sub("", text)
