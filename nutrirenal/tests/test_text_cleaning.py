import unittest
from nutrirenal.logic.parsing.text_cleaning import (
    clean_text,
    starts_with_pictograph,
    strip_leading_colons,
    strip_trailing_colon,
)


class TestTextCleaning(unittest.TestCase):

    def test_clean_heading_with_emoji_and_bold(self):
        self.assertEqual(clean_text("### 🌅 **Desayuno**"), "Desayuno")

    def test_clean_list_markers(self):
        self.assertEqual(clean_text("- **Avena** con leche"), "Avena con leche")
        self.assertEqual(clean_text("* Pan integral"), "Pan integral")

    def test_clean_variation_selector(self):
        self.assertEqual(clean_text("☀️ Media mañana"), "Media mañana")

    def test_clean_keeps_inner_text(self):
        self.assertEqual(clean_text("Sodio: 1500mg"), "Sodio: 1500mg")
        self.assertEqual(clean_text(""), "")

    def test_pictograph_start(self):
        self.assertTrue(starts_with_pictograph("🥗 Comida"))
        self.assertFalse(starts_with_pictograph("Comida 🥗"))

    def test_colons(self):
        self.assertEqual(strip_trailing_colon("Desayuno:"), "Desayuno")
        self.assertEqual(strip_trailing_colon("Hora: 8:00"), "Hora: 8:00")
        self.assertEqual(strip_leading_colons(": 300 kcal"), "300 kcal")


if __name__ == '__main__':
    unittest.main()
