import dataclasses
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_engine.core.config import scoring as scoring_config  # noqa: E402
from ats_engine.core.config.scoring import get_scoring_config, get_scoring_float, get_scoring_value  # noqa: E402
from ats_engine.core.settings import settings  # noqa: E402
from ats_engine.scoring import calculate_ats_score  # noqa: E402


def _settings_with_path(path):
    return dataclasses.replace(settings, scoring_config_path=path)


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("keyword_relevance.cap"), 45.0)
        self.assertEqual(get_scoring_value("keyword_relevance.base_points.required.exact"), 2.5)

    def test_category_caps_add_up_to_hundred(self):
        caps = [
            get_scoring_float("keyword_relevance.cap", 0.0),
            get_scoring_float("skills_quality.cap", 0.0),
            get_scoring_float("experience.cap", 0.0),
            get_scoring_float("match_quality.cap", 0.0),
        ]
        self.assertEqual(sum(caps), 100.0)

    def test_missing_paths_fall_back_to_default(self):
        self.assertEqual(get_scoring_value("experience.not_a_key", 7), 7)
        self.assertEqual(get_scoring_value("keyword_relevance.cap.deeper", "x"), "x")
        self.assertEqual(get_scoring_value("", 3), 3)
        self.assertEqual(get_scoring_float("experience.domain_gate_factor", 1.0), 0.6)


class ScoringConfigSourceTests(unittest.TestCase):
    def test_policy_file_ships_inside_the_package(self):
        packaged = Path(scoring_config.__file__).resolve().parent / "scoring.yaml"
        self.assertTrue(packaged.is_file())
        self.assertIn("keyword_relevance", scoring_config._read_packaged_file())

    def test_default_load_uses_packaged_file(self):
        with mock.patch.object(scoring_config, "_SCORING_CONFIG_CACHE", None), mock.patch.object(
            scoring_config, "settings", _settings_with_path(None)
        ):
            self.assertEqual(get_scoring_value("match_quality.cap"), 10.0)

    def test_missing_packaged_file_uses_in_code_defaults(self):
        with mock.patch.object(scoring_config, "_SCORING_CONFIG_CACHE", None), mock.patch.object(
            scoring_config, "settings", _settings_with_path(None)
        ), mock.patch.object(scoring_config, "_read_packaged_file", return_value=None):
            with self.assertLogs("ats_engine.core.config.scoring", level="WARNING"):
                self.assertEqual(get_scoring_config(), {})
            self.assertEqual(get_scoring_float("experience.cap", 20.0), 20.0)
            score = calculate_ats_score("Requirements:\n- Python", "Python developer")
            self.assertGreaterEqual(score.total, 0.0)
            self.assertLessEqual(score.total, 100.0)
            self.assertIn("python", score.details.matched_keywords)

    def test_explicit_missing_path_raises(self):
        with mock.patch.object(scoring_config, "_SCORING_CONFIG_CACHE", None), mock.patch.object(
            scoring_config, "settings", _settings_with_path("/nonexistent/ats/scoring.yaml")
        ):
            with self.assertRaises(RuntimeError):
                get_scoring_config()

    def test_explicit_path_must_hold_a_mapping(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scoring.yaml"
            path.write_text("- just\n- a list\n", encoding="utf-8")
            with mock.patch.object(scoring_config, "_SCORING_CONFIG_CACHE", None), mock.patch.object(
                scoring_config, "settings", _settings_with_path(str(path))
            ):
                with self.assertRaises(RuntimeError):
                    get_scoring_config()

    def test_explicit_path_overrides_packaged_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scoring.yaml"
            path.write_text("experience:\n  cap: 15\n", encoding="utf-8")
            with mock.patch.object(scoring_config, "_SCORING_CONFIG_CACHE", None), mock.patch.object(
                scoring_config, "settings", _settings_with_path(str(path))
            ):
                self.assertEqual(get_scoring_float("experience.cap", 20.0), 15.0)
                self.assertEqual(get_scoring_float("match_quality.cap", 10.0), 10.0)


if __name__ == "__main__":
    unittest.main()
