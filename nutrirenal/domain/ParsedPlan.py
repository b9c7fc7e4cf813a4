"""ParsedPlan aggregate: the structured meal plan handed to the PDF layout engine.

Serialized shape (`to_dict`):
    {
      "title": str,
      "patient_info": [{"label": str, "value": str}, ...],
      "limits": [{"label": str, "value": str}, ...],
      "days": [{"name": str, "meals": [{"name": str, "items": [str], "nutrition": str | None}]}],
      "notes": [str, ...]
    }
A plan with no days is valid output; the renderer shows a fallback view for it.
"""
from typing import List, Optional

from nutrirenal.domain.Day import Day
from nutrirenal.domain.LabeledValue import LabeledValue
from nutrirenal.utilities.constants import DEFAULT_TITLE


class ParsedPlan:
    def __init__(self, title: str = DEFAULT_TITLE, patient_info: Optional[List[LabeledValue]] = None,
                 limits: Optional[List[LabeledValue]] = None, days: Optional[List[Day]] = None,
                 notes: Optional[List[str]] = None):
        self.title = title
        self.patient_info = patient_info[:] if patient_info else []
        self.limits = limits[:] if limits else []
        self.days = days[:] if days else []
        self.notes = notes[:] if notes else []

    def meal_count(self) -> int:
        return sum(len(day.meals) for day in self.days)

    def is_empty(self) -> bool:
        return not (self.patient_info or self.limits or self.days or self.notes)

    def __str__(self) -> str:
        return f"{self.title} - {len(self.days)} days - {self.meal_count()} meals - {len(self.notes)} notes"

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, ParsedPlan):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return ParsedPlan(
            title=d.get("title") or DEFAULT_TITLE,
            patient_info=[LabeledValue.from_dict(e) for e in d.get("patient_info") or []],
            limits=[LabeledValue.from_dict(e) for e in d.get("limits") or []],
            days=[Day.from_dict(day) for day in d.get("days") or []],
            notes=list(d.get("notes") or []),
        )

    def to_dict(self):
        return {
            "title": self.title,
            "patient_info": [e.to_dict() for e in self.patient_info],
            "limits": [e.to_dict() for e in self.limits],
            "days": [day.to_dict() for day in self.days],
            "notes": list(self.notes),
        }
