import random
import unittest

from app.services.signals import (
    DEFAULT_GAMIFIED_LEVEL,
    DEFAULT_SKILL_LEVEL,
    GAMIFIED_LEVELS,
    SKILL_LEVELS,
    extract_signals,
)


class SignalExtractionTests(unittest.TestCase):
    def test_extracts_all_fields(self):
        text = (
            "**Project Overview**: solid work.\n"
            "Portfolio Score: 82\n"
            "Skill level: Expert. Gamified level: Platinum."
        )
        signals = extract_signals(text)
        self.assertEqual(signals.portfolio_score, 82)
        self.assertEqual(signals.gamified_level, "Platinum")
        self.assertEqual(signals.skill_level, "Expert")

    def test_labels_are_case_insensitive_and_canonicalized(self):
        signals = extract_signals("portfolio score 55, you reached gold tier as an advanced developer")
        self.assertEqual(signals.portfolio_score, 55)
        self.assertEqual(signals.gamified_level, "Gold")
        self.assertEqual(signals.skill_level, "Advanced")

    def test_markdown_bold_between_label_and_number(self):
        self.assertEqual(extract_signals("**Portfolio Score:** 71/100").portfolio_score, 71)

    def test_first_occurrence_wins(self):
        signals = extract_signals("Currently Bronze, could reach Diamond. Novice today, Expert tomorrow.")
        self.assertEqual(signals.gamified_level, "Bronze")
        self.assertEqual(signals.skill_level, "Novice")

    def test_fields_are_independent(self):
        signals = extract_signals("Portfolio Score: 64 and nothing else.", random.Random(1))
        self.assertEqual(signals.portfolio_score, 64)
        self.assertEqual(signals.gamified_level, DEFAULT_GAMIFIED_LEVEL)
        self.assertEqual(signals.skill_level, DEFAULT_SKILL_LEVEL)

        signals = extract_signals("Diamond tier.", random.Random(1))
        self.assertEqual(signals.gamified_level, "Diamond")
        self.assertTrue(30 <= signals.portfolio_score < 70)

    def test_fallbacks_when_nothing_matches(self):
        rng = random.Random(7)
        expected = random.Random(7).randrange(30, 70)
        signals = extract_signals("Great resume, keep going!", rng)
        self.assertEqual(signals.portfolio_score, expected)
        self.assertEqual(signals.gamified_level, "Silver")
        self.assertEqual(signals.skill_level, "Intermediate")

    def test_score_is_clamped(self):
        self.assertEqual(extract_signals("Portfolio score: 250").portfolio_score, 100)

    def test_words_containing_labels_do_not_match(self):
        signals = extract_signals("Interned at Goldman Sachs; expertise in Go.")
        self.assertEqual(signals.gamified_level, "Silver")
        self.assertEqual(signals.skill_level, "Intermediate")

    def test_never_fails_and_stays_in_range(self):
        rng = random.Random(42)
        samples = ["", "   ", "Portfolio Score:", "portfolio score: 0", "\x00\x01", "Platinum" * 50, "12345"]
        for _ in range(50):
            samples.append("".join(chr(rng.randrange(32, 127)) for _ in range(rng.randrange(0, 80))))
        for text in samples:
            with self.subTest(text=text[:30]):
                signals = extract_signals(text, rng)
                self.assertTrue(0 <= signals.portfolio_score <= 100)
                self.assertIn(signals.gamified_level, GAMIFIED_LEVELS)
                self.assertIn(signals.skill_level, SKILL_LEVELS)


if __name__ == "__main__":
    unittest.main()
