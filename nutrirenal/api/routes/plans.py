import logging

from fastapi import APIRouter, HTTPException

from nutrirenal.logic.parsing import parse_meal_plan
from nutrirenal.utilities.validators import MealPlanContentInput

router = APIRouter()
logger = logging.getLogger(__name__)


# === Parse assistant markdown into the structured plan ===
@router.post("/api/meal-plan/parse")
def parse_plan(payload: MealPlanContentInput):
    if not payload.has_content():
        raise HTTPException(status_code=400, detail="Content is required")

    plan = parse_meal_plan(payload.content)
    try:
        data = plan.to_dict()
    except Exception:
        logger.exception("Failed to serialize parsed meal plan")
        raise HTTPException(status_code=500, detail="Failed to parse meal plan")

    # card style for the layout engine; not part of the plan tree itself
    for day, day_data in zip(plan.days, data["days"]):
        for meal, meal_data in zip(day.meals, day_data["meals"]):
            meal_data["category"] = meal.category

    if not plan.days:
        logger.info("No day structure detected in meal plan %r", plan.title)
    data["day_count"] = len(plan.days)
    return data
