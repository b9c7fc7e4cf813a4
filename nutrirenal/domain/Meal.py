"""Meal domain entity: meal label, food items in document order, optional nutrition summary."""
from typing import List, Optional

from nutrirenal.utilities.constants import MEAL_CATEGORIES, DEFAULT_MEAL_CATEGORY
from nutrirenal.utilities.text import fold


class Meal:
    def __init__(self, name: str = "", items: Optional[List[str]] = None, nutrition: Optional[str] = None):
        self.name = name
        self.items = items[:] if items else []
        self.nutrition = nutrition

    @property
    def category(self) -> str:
        '''Coarse meal kind (breakfast, lunch, dinner, snack) used to pick a card style.'''
        folded = fold(self.name)
        for category, tokens in MEAL_CATEGORIES.items():
            if any(token in folded for token in tokens):
                return category
        return DEFAULT_MEAL_CATEGORY

    def add_item(self, text: str):
        self.items.append(text)

    def add_heading(self, text: str):
        '''Recipe names go before the ingredient bullets.'''
        self.items.insert(0, text)

    def set_nutrition(self, text: str):
        # last line wins, no accumulation
        self.nutrition = text

    def __str__(self) -> str:
        suffix = f" ({self.nutrition})" if self.nutrition else ""
        return f"{self.name}: {len(self.items)} items{suffix}"

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, Meal):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Meal(
            name=d.get("name", ""),
            items=list(d.get("items") or []),
            nutrition=d.get("nutrition"),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "items": list(self.items),
            "nutrition": self.nutrition,
        }
