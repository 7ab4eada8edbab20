import unittest

from sonar_sync.severity import severity_to_highlight_type
from sonar_sync.types import HighlightType


class TestSeverityMapping(unittest.TestCase):
    def test_known_severities(self) -> None:
        self.assertEqual(HighlightType.ERROR, severity_to_highlight_type("BLOCKER"))
        self.assertEqual(HighlightType.GENERIC_ERROR_OR_WARNING, severity_to_highlight_type("CRITICAL"))
        self.assertEqual(HighlightType.GENERIC_ERROR_OR_WARNING, severity_to_highlight_type("MAJOR"))
        self.assertEqual(HighlightType.WEAK_WARNING, severity_to_highlight_type("MINOR"))
        self.assertEqual(HighlightType.WEAK_WARNING, severity_to_highlight_type("INFO"))

    def test_case_insensitive(self) -> None:
        for raw in ("blocker", "Blocker", "bLoCkEr"):
            self.assertEqual(HighlightType.ERROR, severity_to_highlight_type(raw))
        self.assertEqual(HighlightType.WEAK_WARNING, severity_to_highlight_type("info"))
        self.assertEqual(HighlightType.WEAK_WARNING, severity_to_highlight_type("Minor"))

    def test_blank_and_unknown_fall_back_to_generic(self) -> None:
        for raw in (None, "", "   ", "SEVERE", "42", "blocker!"):
            self.assertEqual(
                HighlightType.GENERIC_ERROR_OR_WARNING,
                severity_to_highlight_type(raw),
                f"unexpected mapping for {raw!r}",
            )


if __name__ == "__main__":
    unittest.main()
