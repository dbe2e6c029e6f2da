import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_engine.keywords import (  # noqa: E402
    calculate_actual_keyword_density,
    calculate_keyword_density,
    calculate_match_rate,
    match_keywords,
    synonym_candidates,
)


class MatchKeywordsTests(unittest.TestCase):
    def test_synonym_match_for_kubernetes(self):
        result = match_keywords(["python", "aws", "kubernetes"], "Python developer running k8s clusters")
        self.assertEqual(result.matched, ["python", "kubernetes"])
        self.assertEqual(result.missing, ["aws"])
        details = {detail.keyword: detail for detail in result.match_details}
        self.assertEqual(details["python"].match_type, "exact")
        self.assertEqual(details["kubernetes"].match_type, "synonym")
        self.assertEqual(details["kubernetes"].matched_as, "k8s")

    def test_exact_wins_over_synonym(self):
        result = match_keywords(["python"], "python and py scripts")
        self.assertEqual(result.match_details[0].match_type, "exact")
        self.assertIsNone(result.match_details[0].matched_as)

    def test_stem_wins_over_synonym(self):
        result = match_keywords(["leading"], "Showed leadership across teams")
        detail = result.match_details[0]
        self.assertEqual(detail.match_type, "stem")
        self.assertEqual(detail.matched_as, "leadership")

    def test_stem_match_reports_resume_fragment(self):
        result = match_keywords(["deployment"], "Deployed services weekly")
        self.assertEqual(result.match_details[0].match_type, "stem")
        self.assertEqual(result.match_details[0].matched_as, "deployed")

    def test_short_keywords_need_word_boundaries(self):
        result = match_keywords(["go"], "Google Cloud certified")
        self.assertEqual(result.missing, ["go"])

    def test_compound_spellings_match_exactly(self):
        result = match_keywords(["c++", "node.js"], "Expert in C++ and Node.js")
        self.assertEqual(result.matched, ["c++", "node.js"])
        self.assertEqual({detail.match_type for detail in result.match_details}, {"exact"})

    def test_duplicates_are_evaluated_independently(self):
        result = match_keywords(["python", "python"], "python")
        self.assertEqual(result.matched, ["python", "python"])
        self.assertEqual(len(result.match_details), 2)

    def test_empty_resume_marks_everything_missing(self):
        result = match_keywords(["python", "sql"], "   ")
        self.assertEqual(result.matched, [])
        self.assertEqual(result.missing, ["python", "sql"])

    def test_control_characters_and_unicode(self):
        result = match_keywords(["python", "kubernetes"], "Ｐｙｔｈｏｎ\x00\x07Kubernetes")
        self.assertEqual(result.matched, ["python", "kubernetes"])

    def test_large_resume(self):
        resume = "lorem ipsum " * 30000 + "terraform"
        result = match_keywords(["terraform", "ansible"], resume)
        self.assertEqual(result.matched, ["terraform"])
        self.assertEqual(result.missing, ["ansible"])

    def test_partition_covers_every_keyword(self):
        keywords = ["python", "aws", "kubernetes", "", "go"]
        result = match_keywords(keywords, "python on aws")
        self.assertEqual(len(result.matched) + len(result.missing), len(keywords))
        self.assertEqual(len(result.match_details), len(result.matched))

    def test_synonym_candidates_include_reverse_lookup(self):
        candidates = synonym_candidates("k8s")
        self.assertEqual(candidates[0], "kubernetes")
        self.assertNotIn("k8s", candidates)


class DensityHelperTests(unittest.TestCase):
    def test_match_rate(self):
        self.assertEqual(calculate_match_rate(2, 3), 67)
        self.assertEqual(calculate_match_rate(3, 3), 100)
        self.assertEqual(calculate_match_rate(0, 0), 0)

    def test_keyword_density(self):
        self.assertEqual(calculate_keyword_density(3, 200), 1.5)
        self.assertEqual(calculate_keyword_density(1, 0), 0.0)

    def test_actual_density_counts_occurrences(self):
        density = calculate_actual_keyword_density("python python python python python aws", ["python", "aws"])
        self.assertEqual(density.total_occurrences, 6)
        self.assertEqual(density.overall_density, 100.0)
        self.assertEqual(density.stuffed_keywords, ["python"])

    def test_actual_density_ignores_partial_words(self):
        density = calculate_actual_keyword_density("gopher golang go", ["go"])
        self.assertEqual(density.total_occurrences, 1)

    def test_actual_density_zero_safe(self):
        density = calculate_actual_keyword_density("", ["python"])
        self.assertEqual(density.overall_density, 0.0)
        self.assertEqual(density.stuffed_keywords, [])
        self.assertEqual(calculate_actual_keyword_density("python", []).total_occurrences, 0)


if __name__ == "__main__":
    unittest.main()
