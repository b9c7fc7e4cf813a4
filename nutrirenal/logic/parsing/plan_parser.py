"""Meal-plan markdown parser.

Turns the assistant's loosely formatted Spanish markdown into a ParsedPlan in
one forward pass. The parser never raises: unrecognized text is dropped and
the worst case is an empty plan with the default title.

Usage:
    from nutrirenal.logic.parsing import parse_meal_plan
    plan = parse_meal_plan(markdown)
    plan.to_dict()  # plain data for the layout engine
"""
import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple

from nutrirenal.domain.Day import Day
from nutrirenal.domain.LabeledValue import LabeledValue
from nutrirenal.domain.Meal import Meal
from nutrirenal.domain.ParsedPlan import ParsedPlan
from nutrirenal.logic.parsing import line_rules
from nutrirenal.logic.parsing.line_rules import Line
from nutrirenal.logic.parsing.text_cleaning import (
    clean_text,
    strip_leading_colons,
    strip_trailing_colon,
)
from nutrirenal.utilities.text import fold
from nutrirenal.utilities.constants import (
    DEFAULT_DAY_NAME,
    INGREDIENTS_LABEL,
    MIN_PLAIN_ITEM_CHARS,
    MIN_RECIPE_HEADING_CHARS,
)

logger = logging.getLogger(__name__)


class Mode(Enum):
    TITLE = "title"
    INFO = "info"
    LIMITS = "limits"
    MEALS = "meals"
    NOTES = "notes"  # terminal


class ParserState:
    """Mutable state of a single parse call: the plan being built, the mode and the open day/meal."""

    def __init__(self):
        self.plan = ParsedPlan()
        self.mode = Mode.TITLE
        self.open_day: Optional[Day] = None
        self.open_meal: Optional[Meal] = None

    def set_mode(self, mode: Mode):
        if self.mode is Mode.NOTES:
            return
        self.mode = mode

    def seal_meal(self):
        if self.open_meal is not None and self.open_day is not None:
            self.open_day.add_meal(self.open_meal)
        self.open_meal = None

    def seal_day(self):
        self.seal_meal()
        if self.open_day is not None:
            self.plan.days.append(self.open_day)
        self.open_day = None

    def start_day(self, name: str):
        self.seal_day()
        self.open_day = Day(name)
        self.set_mode(Mode.MEALS)

    def start_meal(self, name: str):
        if self.open_day is None:
            self.open_day = Day(DEFAULT_DAY_NAME)
            self.set_mode(Mode.MEALS)
        self.seal_meal()
        self.open_meal = Meal(name)

    def enter_notes(self):
        self.seal_day()
        self.mode = Mode.NOTES

    def accepts_title(self) -> bool:
        return self.open_day is None and not self.plan.days


# --- Rule handlers ---------------------------------------------------------
# Each returns True when it consumed the line; False lets later rules try it.

def _on_day_header(state: ParserState, line: Line) -> bool:
    state.start_day(strip_trailing_colon(line.cleaned))
    return True


def _on_meal_header(state: ParserState, line: Line) -> bool:
    state.start_meal(strip_trailing_colon(line.cleaned))
    return True


def _on_title_header(state: ParserState, line: Line) -> bool:
    if not state.accepts_title():
        return False
    state.plan.title = line.cleaned
    state.set_mode(Mode.TITLE)
    return True


def _mode_switch(mode: Mode) -> Callable[[ParserState, Line], bool]:
    def handler(state: ParserState, line: Line) -> bool:
        state.set_mode(mode)
        return True
    return handler


def _on_notes_header(state: ParserState, line: Line) -> bool:
    state.enter_notes()
    return True


def _add_meal_line(meal: Meal, text: str):
    if not text:
        return
    if line_rules.is_nutrition_text(fold(text)):
        meal.set_nutrition(text)
    else:
        meal.add_item(text)


def _on_list_item(state: ParserState, line: Line) -> bool:
    if state.mode is Mode.INFO or state.mode is Mode.LIMITS:
        entry = LabeledValue.from_text(line.cleaned)
        if entry is not None:
            target = state.plan.patient_info if state.mode is Mode.INFO else state.plan.limits
            target.append(entry)
    elif state.mode is Mode.NOTES:
        if line.cleaned:
            state.plan.notes.append(line.cleaned)
    elif line_rules.is_meal_bullet_label(line, state.open_meal is not None):
        state.start_meal(strip_trailing_colon(line.cleaned))
    elif state.open_meal is not None:
        _add_meal_line(state.open_meal, line.cleaned)
    return True


def _on_indented_item(state: ParserState, line: Line) -> bool:
    if state.open_meal is not None:
        _add_meal_line(state.open_meal, line.cleaned)
    return True


def _on_recipe_heading(state: ParserState, line: Line) -> bool:
    if state.open_meal is None:
        return False
    if len(line.cleaned) > MIN_RECIPE_HEADING_CHARS:
        state.open_meal.add_heading(line.cleaned)
    return True


def _split_inline_content(meal: Meal, text: str):
    """Handle "**Ingredientes:** ... **Nutrición:** ..." written on one line."""
    pending_label = None
    for segment in text.split("**"):
        part = strip_leading_colons(clean_text(segment))
        if not part:
            continue
        folded = fold(part)
        if line_rules.is_inline_nutrition(folded):
            if part.endswith(":"):
                pending_label = strip_trailing_colon(part)
            else:
                meal.set_nutrition(part)
        elif pending_label is not None:
            meal.set_nutrition(f"{pending_label}: {part}")
            pending_label = None
        elif folded.startswith(INGREDIENTS_LABEL):
            _, _, rest = part.partition(":")
            rest = rest.strip()
            if rest:
                meal.add_item(rest)
        elif len(part) > MIN_PLAIN_ITEM_CHARS:
            meal.add_item(part)
    if pending_label is not None:
        # label with no value on this line
        meal.set_nutrition(pending_label)


def _on_plain_text(state: ParserState, line: Line) -> bool:
    meal = state.open_meal
    if meal is None:
        return False
    if line_rules.has_inline_labels(line.folded):
        _split_inline_content(meal, line.stripped)
    elif len(line.cleaned) > MIN_PLAIN_ITEM_CHARS and not line.cleaned.endswith(":"):
        meal.add_item(line.cleaned)
    return True


RULES: List[Tuple[Callable[[Line], bool], Callable[[ParserState, Line], bool]]] = [
    (line_rules.is_day_header, _on_day_header),
    (line_rules.is_meal_header, _on_meal_header),
    (line_rules.is_title_header, _on_title_header),
    (line_rules.is_info_header, _mode_switch(Mode.INFO)),
    (line_rules.is_limits_header, _mode_switch(Mode.LIMITS)),
    (line_rules.is_notes_header, _on_notes_header),
    (line_rules.is_meals_header, _mode_switch(Mode.MEALS)),
    (line_rules.is_list_item, _on_list_item),
    (line_rules.is_indented_item, _on_indented_item),
    (line_rules.is_recipe_heading, _on_recipe_heading),
    (line_rules.is_plain_text, _on_plain_text),
]


def consume_line(state: ParserState, line: Line) -> None:
    for predicate, handler in RULES:
        if predicate(line) and handler(state, line):
            return


def parse_meal_plan(markdown: str) -> ParsedPlan:
    """Parse meal-plan markdown into a ParsedPlan. Total over all inputs."""
    if not isinstance(markdown, str):
        markdown = ""
    state = ParserState()
    for raw in markdown.lstrip("\ufeff").splitlines():
        if not raw.strip():
            continue
        try:
            consume_line(state, Line.from_raw(raw))
        except Exception:
            logger.exception("Skipping meal-plan line %r", raw)
    state.seal_day()

    plan = state.plan
    logger.debug("Parsed meal plan %r: %d days, %d meals, %d notes",
                 plan.title, len(plan.days), plan.meal_count(), len(plan.notes))
    return plan


__all__ = ["Mode", "ParserState", "consume_line", "parse_meal_plan", "RULES"]
