from typing import Final

DEFAULT_TITLE: Final[str] = "Plan Nutricional"
DEFAULT_DAY_NAME: Final[str] = "Día 1"

# Keywords below are stored accent-folded and lower-case; matching folds the
# input the same way (see nutrirenal.logic.parsing.text_cleaning.fold).
MEAL_TOKENS: Final[tuple[str, ...]] = (
    "desayuno",
    "comida",
    "almuerzo",
    "cena",
    "colacion",
    "colaciones",
    "snack",
    "refrigerio",
    "media manana",
    "media tarde",
    "merienda",
)
WEEKDAYS: Final[tuple[str, ...]] = (
    "lunes", "martes", "miercoles", "jueves", "viernes", "sabado", "domingo",
)

INGREDIENTS_LABEL: Final[str] = "ingredientes"

TITLE_KEYWORDS: Final[tuple[str, ...]] = ("plan",)
INFO_KEYWORDS: Final[tuple[str, ...]] = ("informacion", "datos del paciente")
LIMITS_KEYWORDS: Final[tuple[str, ...]] = ("limite", "recomendaciones nutricionales")
NOTES_KEYWORDS: Final[tuple[str, ...]] = (
    "recordatorio", "nota", "importante", "recomendaciones generales",
)
MEALS_KEYWORDS: Final[tuple[str, ...]] = ("semana", "menu")

MEAL_CATEGORIES: Final[dict[str, tuple[str, ...]]] = {
    "breakfast": ("desayuno",),
    "lunch": ("comida", "almuerzo"),
    "dinner": ("cena",),
    "snack": ("colacion", "snack", "refrigerio", "media manana", "media tarde", "merienda"),
}
DEFAULT_MEAL_CATEGORY: Final[str] = "breakfast"

# Minimum cleaned lengths for loose content lines
MIN_RECIPE_HEADING_CHARS: Final[int] = 3
MIN_PLAIN_ITEM_CHARS: Final[int] = 5
