"""Day domain entity: a named day of the plan and its meals."""
from typing import List, Optional

from nutrirenal.domain.Meal import Meal


class Day:
    def __init__(self, name: str = "", meals: Optional[List[Meal]] = None):
        self.name = name
        self.meals = meals[:] if meals else []

    def add_meal(self, meal: Meal):
        self.meals.append(meal)

    def __str__(self) -> str:
        return f"{self.name} - {len(self.meals)} meals"

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, Day):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Day(
            name=d.get("name", ""),
            meals=[Meal.from_dict(m) for m in d.get("meals") or []],
        )

    def to_dict(self):
        return {
            "name": self.name,
            "meals": [meal.to_dict() for meal in self.meals],
        }
