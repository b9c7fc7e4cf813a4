import unittest
from nutrirenal.logic.parsing import line_rules
from nutrirenal.logic.parsing.line_rules import Line


def L(text):
    return Line.from_raw(text)


class TestLine(unittest.TestCase):

    def test_from_raw(self):
        line = L("  - **Avena**  ")
        self.assertEqual(line.raw, "  - **Avena**")
        self.assertEqual(line.stripped, "- **Avena**")
        self.assertEqual(line.cleaned, "Avena")
        self.assertEqual(line.folded, "avena")


class TestHeaderRules(unittest.TestCase):

    def test_section_header(self):
        self.assertTrue(line_rules.is_section_header(L("## Información")))
        self.assertTrue(line_rules.is_section_header(L("**Desayuno**")))
        self.assertFalse(line_rules.is_section_header(L("**Ingredientes:** avena")))
        self.assertFalse(line_rules.is_section_header(L("**Sodio:** 300 mg")))
        self.assertFalse(line_rules.is_section_header(L("**Nutrición:** 300 kcal")))
        self.assertFalse(line_rules.is_section_header(L("- Avena")))
        self.assertFalse(line_rules.is_section_header(L("🌅 Desayuno")))
        self.assertTrue(line_rules.is_heading_like(L("🌅 Desayuno")))

    def test_day_pattern(self):
        self.assertTrue(line_rules.matches_day_pattern("dia 1 - lunes"))
        self.assertTrue(line_rules.matches_day_pattern("martes"))
        self.assertFalse(line_rules.matches_day_pattern("media tarde"))
        self.assertFalse(line_rules.matches_day_pattern("dia de descanso"))

    def test_day_header(self):
        self.assertTrue(line_rules.is_day_header(L("### Día 1 - Lunes")))
        self.assertTrue(line_rules.is_day_header(L("**Martes**")))
        self.assertTrue(line_rules.is_day_header(L("Día 2:")))
        self.assertTrue(line_rules.is_day_header(L("#### DIA 3")))
        self.assertFalse(line_rules.is_day_header(L("#### Media tarde")))
        self.assertFalse(line_rules.is_day_header(L("El lunes compra verduras")))
        self.assertTrue(line_rules.is_day_header(L("🗓️ Día 3")))
        self.assertFalse(line_rules.is_day_header(L("🥗 Sopa de verduras del lunes")))

    def test_meal_header(self):
        self.assertTrue(line_rules.is_meal_header(L("#### Desayuno")))
        self.assertTrue(line_rules.is_meal_header(L("🌅 Desayuno")))
        self.assertTrue(line_rules.is_meal_header(L("**Colación matutina**")))
        self.assertTrue(line_rules.is_meal_header(L("### Media Mañana (10:00)")))
        self.assertFalse(line_rules.is_meal_header(L("- Desayuno")))
        self.assertFalse(line_rules.is_meal_header(L("#### Pechuga de pollo")))

    def test_meal_bullet_label(self):
        food = L("- Comida rápida casera")
        self.assertTrue(line_rules.is_meal_bullet_label(food, meal_open=False))
        self.assertFalse(line_rules.is_meal_bullet_label(food, meal_open=True))
        self.assertTrue(line_rules.is_meal_bullet_label(L("- Comida:"), meal_open=True))
        self.assertTrue(line_rules.is_meal_bullet_label(L("- **Cena**"), meal_open=True))
        self.assertTrue(line_rules.is_meal_bullet_label(L("- Snack"), meal_open=True))
        self.assertFalse(line_rules.is_meal_bullet_label(L("- Arroz"), meal_open=False))

    def test_section_starts(self):
        self.assertTrue(line_rules.is_title_header(L("# Plan Nutricional Renal")))
        self.assertTrue(line_rules.is_info_header(L("## Datos del paciente")))
        self.assertTrue(line_rules.is_info_header(L("## Informacion")))
        self.assertTrue(line_rules.is_limits_header(L("## Límites diarios")))
        self.assertTrue(line_rules.is_limits_header(L("## Limites")))
        self.assertTrue(line_rules.is_limits_header(L("**Recomendaciones nutricionales**")))
        self.assertTrue(line_rules.is_notes_header(L("## ⚠️ Recordatorio importante")))
        self.assertTrue(line_rules.is_notes_header(L("## Recomendaciones generales")))
        self.assertTrue(line_rules.is_meals_header(L("## Menú semanal")))
        self.assertTrue(line_rules.is_meals_header(L("## Menu")))
        self.assertFalse(line_rules.is_info_header(L("- Información adicional")))


class TestContentRules(unittest.TestCase):

    def test_list_items(self):
        self.assertTrue(line_rules.is_list_item(L("- Avena")))
        self.assertTrue(line_rules.is_list_item(L("* Avena")))
        self.assertFalse(line_rules.is_list_item(L("  - Avena")))
        self.assertFalse(line_rules.is_list_item(L("**Avena**")))

    def test_indented_items(self):
        self.assertTrue(line_rules.is_indented_item(L("  - Avena")))
        self.assertTrue(line_rules.is_indented_item(L("\t- Avena")))
        self.assertTrue(line_rules.is_indented_item(L("    texto suelto")))
        self.assertFalse(line_rules.is_indented_item(L("- Avena")))

    def test_recipe_and_plain_text(self):
        self.assertTrue(line_rules.is_recipe_heading(L("### Claras de huevo")))
        self.assertFalse(line_rules.is_recipe_heading(L("## Claras de huevo")))
        self.assertTrue(line_rules.is_plain_text(L("Pollo al horno")))
        self.assertFalse(line_rules.is_plain_text(L("## Pollo al horno")))
        self.assertFalse(line_rules.is_plain_text(L("🍽️")))

    def test_nutrition_text(self):
        self.assertTrue(line_rules.is_nutrition_text("350 kcal"))
        self.assertTrue(line_rules.is_nutrition_text("nutricion: 300"))
        self.assertTrue(line_rules.is_nutrition_text("sodio: 1500mg"))
        self.assertFalse(line_rules.is_nutrition_text("arroz blanco"))
        self.assertFalse(line_rules.is_nutrition_text("batido nutricional bajo en potasio"))

    def test_inline_labels(self):
        self.assertTrue(line_rules.has_inline_labels("ingredientes: arroz nutricion: 300 kcal"))
        self.assertFalse(line_rules.has_inline_labels("licuado nutricional de pera"))
        self.assertTrue(line_rules.is_inline_nutrition("nutricion:"))
        self.assertFalse(line_rules.is_inline_nutrition("pan nutricional"))


if __name__ == '__main__':
    unittest.main()
