import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_engine.schemas import (  # noqa: E402
    EducationEntry,
    ExperienceEntry,
    ExtractedKeywords,
    KeywordDensity,
    MatchDetail,
    MatchResult,
    ResumeData,
    SkillCategory,
)
from ats_engine.scoring.experience import (  # noqa: E402
    degree_level,
    depth_score,
    detect_role_type,
    education_score,
    extract_jd_team_size,
    extract_required_years,
    extract_resume_team_size,
    required_degree_level,
    team_score,
    title_score,
    years_experience_score,
)
from ats_engine.scoring.keyword_relevance import (  # noqa: E402
    calculate_keyword_relevance,
    frequency_multiplier,
    placement_bonus,
    stuffing_penalty,
)
from ats_engine.scoring.match_quality import completeness_score, density_score, exact_match_score  # noqa: E402
from ats_engine.scoring.skills_quality import calculate_skills_quality  # noqa: E402


def _extracted(keywords, priority="required", technologies=None):
    return ExtractedKeywords(
        all=list(keywords),
        technologies=list(technologies if technologies is not None else keywords),
        keyword_priority={keyword: priority for keyword in keywords},
        keyword_frequency={keyword: 1 for keyword in keywords},
    )


class KeywordRelevanceTests(unittest.TestCase):
    def test_frequency_multiplier_saturates(self):
        self.assertEqual(frequency_multiplier(1), 1.0)
        self.assertAlmostEqual(frequency_multiplier(2), 1.15)
        self.assertEqual(frequency_multiplier(10), 1.5)

    def test_placement_bonus_takes_highest_tier_only(self):
        self.assertEqual(placement_bonus("python", "python engineer", "python", ["python"]), 1.0)
        self.assertEqual(placement_bonus("python", "engineer", "python", ["python"]), 0.5)
        self.assertEqual(placement_bonus("python", "engineer", "summary", ["built python apis"]), 0.3)
        self.assertEqual(placement_bonus("python", "", "", []), 0.0)

    def test_stuffing_penalty_needs_three_keywords(self):
        self.assertEqual(stuffing_penalty(KeywordDensity(stuffed_keywords=["a", "b"])), 0.0)
        self.assertEqual(stuffing_penalty(KeywordDensity(stuffed_keywords=["a", "b", "c"])), 5.0)

    def test_points_follow_priority_and_match_type(self):
        extracted = _extracted(["python", "kubernetes"])
        match = MatchResult(
            matched=["python", "kubernetes"],
            match_details=[
                MatchDetail(keyword="python", match_type="exact"),
                MatchDetail(keyword="kubernetes", match_type="synonym", matched_as="k8s"),
            ],
        )
        resume_text = "line one\nline two\nline three\npython and k8s"
        score = calculate_keyword_relevance(extracted, match, resume_text, ResumeData(), KeywordDensity())
        self.assertAlmostEqual(score, 2.5 + 1.25)

    def test_score_is_capped_and_penalized(self):
        keywords = [f"skill{index}" for index in range(30)]
        extracted = _extracted(keywords, priority="title")
        match = MatchResult(
            matched=keywords,
            match_details=[MatchDetail(keyword=keyword, match_type="exact") for keyword in keywords],
        )
        density = KeywordDensity(stuffed_keywords=["skill0", "skill1", "skill2"])
        score = calculate_keyword_relevance(extracted, match, "", ResumeData(), density)
        self.assertEqual(score, 40.0)


class SkillsQualityTests(unittest.TestCase):
    def test_no_skills_scores_zero(self):
        extracted = _extracted(["python"])
        self.assertEqual(calculate_skills_quality(extracted, MatchResult(), ResumeData()), 0.0)

    def test_full_coverage_without_text_matches(self):
        extracted = _extracted(["python", "docker"])
        resume = ResumeData(skills=["Python", "Docker"])
        self.assertAlmostEqual(calculate_skills_quality(extracted, MatchResult(), resume), 20.0)

    def test_text_matched_skills_are_credited_less(self):
        extracted = _extracted(["python", "docker"])
        match = MatchResult(matched=["python", "docker"])
        resume = ResumeData(skills=["Python", "Docker"])
        self.assertAlmostEqual(calculate_skills_quality(extracted, match, resume), 16.0)

    def test_no_technologies_gives_fixed_coverage_and_breadth(self):
        extracted = _extracted(["leadership"], priority="general", technologies=[])
        resume = ResumeData(skills_by_category=[SkillCategory(category="Tools", items=["Excel", "Sheets"])])
        self.assertAlmostEqual(calculate_skills_quality(extracted, MatchResult(), resume), 7.0)


class ExperienceTests(unittest.TestCase):
    def test_years_met_gets_full_cap(self):
        self.assertEqual(years_experience_score(8, 8, "ic"), 9.0)
        self.assertEqual(years_experience_score(8, 8, "management"), 6.0)
        self.assertEqual(years_experience_score(5, 9, "ic"), 9.0)

    def test_years_below_requirement_decays_smoothly(self):
        low = years_experience_score(8, 2, "ic")
        self.assertGreater(low, 0.0)
        self.assertLess(low, 9.0)
        scores = [years_experience_score(8, years, "ic") for years in (2, 4, 6, 8)]
        self.assertEqual(scores, sorted(scores))
        self.assertEqual(len(set(scores)), 4)

    def test_overqualification_penalty_is_capped(self):
        self.assertAlmostEqual(years_experience_score(5, 20, "ic"), 9.0 * 0.85)

    def test_years_without_requirement(self):
        self.assertAlmostEqual(years_experience_score(None, 6, "ic"), 5.4)
        self.assertAlmostEqual(years_experience_score(None, 2, "ic"), 2.7)
        self.assertEqual(years_experience_score(None, 0, "ic"), 0.0)
        self.assertEqual(years_experience_score(8, None, "ic"), 0.0)

    def test_required_years_patterns(self):
        self.assertEqual(extract_required_years("8+ years of experience with Go"), 8)
        self.assertEqual(extract_required_years("3-5 years in backend"), 3)
        self.assertEqual(extract_required_years("minimum of 4 years"), 4)
        self.assertEqual(extract_required_years("at least 6 yrs"), 6)
        self.assertEqual(extract_required_years("8+ years"), 8)
        self.assertIsNone(extract_required_years("Python and SQL"))

    def test_role_type_needs_margin(self):
        management_jd = (
            "Engineering Manager. You will manage a team of 8 engineers, run performance reviews, "
            "own hiring and mentoring, and align the roadmap with stakeholders."
        )
        self.assertEqual(detect_role_type(management_jd), "management")
        self.assertEqual(detect_role_type("Build and deploy Python services, write tests, debug issues."), "ic")
        self.assertEqual(detect_role_type(""), "ic")

    def test_role_nouns_do_not_count_as_ic_signals(self):
        jd = (
            "Engineering Manager\n"
            "You will manage a team of 10 engineers building our data platform.\n"
            "2+ years managing engineers. Help us grow the team."
        )
        self.assertEqual(detect_role_type(jd), "management")
        self.assertEqual(detect_role_type("Senior Software Engineer. Design and architecture reviews."), "ic")

    def test_team_sizes(self):
        self.assertEqual(extract_jd_team_size("You will lead a team of 12 engineers"), 12)
        self.assertEqual(extract_resume_team_size(ResumeData(team_size="Led 15 engineers")), 15)
        resume = ResumeData(experiences=[ExperienceEntry(highlights=["Managed 9 engineers across two sites"])])
        self.assertEqual(extract_resume_team_size(resume), 9)
        self.assertIsNone(extract_resume_team_size(ResumeData()))

    def test_team_score_tiers(self):
        jd = "Manage a team of 10 engineers"
        self.assertEqual(team_score(jd, ResumeData(team_size="10")), 6.0)
        self.assertEqual(team_score(jd, ResumeData(team_size="7")), 4.0)
        self.assertEqual(team_score(jd, ResumeData(team_size="5")), 2.0)
        self.assertEqual(team_score(jd, ResumeData(team_size="3")), 0.0)
        self.assertEqual(team_score("Own the platform", ResumeData(team_size="4 people")), 3.0)

    def test_depth_score(self):
        deep = ResumeData(
            experiences=[ExperienceEntry(title="A"), ExperienceEntry(title="B")],
            skills=["Python", "Go", "SQL", "Docker", "AWS"],
        )
        self.assertEqual(depth_score(deep), 3.0)
        shallow = ResumeData(experiences=[ExperienceEntry(title="A")], skills=["Python", "Go"])
        self.assertEqual(depth_score(shallow), 1.5)

    def test_title_score(self):
        self.assertEqual(title_score(["engineering manager"], "Engineering Manager"), 5.0)
        self.assertEqual(title_score(["engineering manager"], "Data Scientist"), 0.0)
        self.assertEqual(title_score(["backend engineer", "senior"], "Senior Software Developer"), 2.5)
        self.assertEqual(title_score([], "Senior Engineer"), 2.5)
        self.assertEqual(title_score([], "Accountant"), 0.0)

    def test_education_score(self):
        jd = "Bachelor's degree in Computer Science required."
        met = ResumeData(education=[EducationEntry(degree="B.S. Computer Science")])
        self.assertEqual(education_score(jd, met), 3.0)
        short = ResumeData(education=[EducationEntry(degree="Associate of Science")])
        self.assertEqual(education_score(jd, short), 1.25)
        unstated = ResumeData(education=[EducationEntry(degree="MBA")])
        self.assertEqual(education_score("Lead our sales org.", unstated), 2.0)
        self.assertEqual(education_score(jd, ResumeData()), 0.0)

    def test_degree_abbreviations_need_degree_context(self):
        self.assertIsNone(required_degree_level("Keep p99 latency under 10 ms.\nFluent with MS Office."))
        self.assertEqual(required_degree_level("M.S. in Computer Science preferred"), 2)
        self.assertEqual(required_degree_level("MS in Statistics or similar"), 2)
        self.assertEqual(degree_level("MSc Data Science"), 2)
        self.assertEqual(degree_level("B.S. Computer Science"), 1)

    def test_field_bonus_reads_only_degree_lines(self):
        mechanical = ResumeData(education=[EducationEntry(degree="B.Eng Mechanical Engineering")])
        title_only = "Engineering Manager\nLead the platform group.\nBachelor's degree required."
        self.assertEqual(education_score(title_only, mechanical), 2.5)
        named_field = "Engineering Manager\nBachelor's degree in Computer Science or Engineering."
        self.assertEqual(education_score(named_field, mechanical), 3.0)


class MatchQualityTests(unittest.TestCase):
    def test_exact_ratio(self):
        match = MatchResult(
            matched=["a", "b", "c"],
            match_details=[
                MatchDetail(keyword="a", match_type="exact"),
                MatchDetail(keyword="b", match_type="exact"),
                MatchDetail(keyword="c", match_type="synonym"),
            ],
        )
        self.assertAlmostEqual(exact_match_score(match), 4.0 * 2 / 3)
        self.assertEqual(exact_match_score(MatchResult()), 0.0)

    def test_density_band(self):
        self.assertEqual(density_score(2.5), 3.0)
        self.assertEqual(density_score(0.5), 0.0)
        self.assertAlmostEqual(density_score(1.25), 1.5)
        self.assertAlmostEqual(density_score(4.5), 1.5)
        self.assertEqual(density_score(7.0), 0.0)

    def test_completeness(self):
        full = ResumeData(
            title="Engineer",
            skills=["Python"],
            experiences=[ExperienceEntry(highlights=["Built things"])],
            education=[EducationEntry(degree="BS")],
        )
        self.assertEqual(completeness_score(full), 3.0)
        self.assertEqual(completeness_score(ResumeData(title="Engineer")), 0.75)
        self.assertEqual(completeness_score(ResumeData(experiences=[ExperienceEntry(title="X")])), 0.0)


if __name__ == "__main__":
    unittest.main()
