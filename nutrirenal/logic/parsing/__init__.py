"""Meal-plan markdown parsing.

Provides parse_meal_plan(markdown) -> ParsedPlan.
"""
from nutrirenal.logic.parsing.plan_parser import parse_meal_plan

__all__ = ["parse_meal_plan"]
