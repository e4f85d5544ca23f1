"""Tests for weighted job-match scoring."""

import pytest

from models.schemas.job_template import JobTemplate
from models.schemas.match_result import MatchResult
from services.job_catalog import DEFAULT_CATALOG, InvalidCatalogError
from services.job_matcher import GATED_SCORE_CAP, score_job, score_jobs
from services.skill_extractor import extract_skills

BLOCKCHAIN_DEVELOPER = DEFAULT_CATALOG[0]

PLATFORM_ENGINEER = JobTemplate(
    title="Platform Engineer",
    company="Infra Co",
    required_skills=("Rust", "Go", "Docker", "Kubernetes", "AWS", "Redis"),
    critical_skills=("Rust", "Go"),
    important_skills=("Docker", "Kubernetes", "AWS", "Redis"),
)


def _by_title(results: list[MatchResult]) -> dict[str, MatchResult]:
    return {r.title: r for r in results}


class TestWeighting:
    def test_all_critical_no_important_is_sixty(self):
        result = score_job({"Rust", "Go"}, PLATFORM_ENGINEER)
        assert result.match_percentage == 60

    def test_no_critical_all_important_is_forty(self):
        result = score_job({"Docker", "Kubernetes", "AWS", "Redis"}, PLATFORM_ENGINEER)
        assert result.match_percentage == 40

    def test_partial_credit(self):
        # 1/2 critical (30) + 1/4 important (10)
        result = score_job({"Go", "Redis"}, PLATFORM_ENGINEER)
        assert result.match_percentage == 40

    def test_full_match_is_hundred(self):
        result = score_job(set(PLATFORM_ENGINEER.required_skills), PLATFORM_ENGINEER)
        assert result.match_percentage == 100

    def test_rounds_half_up(self):
        job = JobTemplate(
            title="Polyglot",
            company="Acme",
            required_skills=("A1", "A2", "A3", "A4", "A5", "A6", "A7", "A8", "B1"),
            critical_skills=("A1", "A2", "A3", "A4", "A5", "A6", "A7", "A8"),
            important_skills=("B1",),
        )
        # 3 * 7.5 = 22.5
        assert score_job({"A1", "A2", "A3"}, job).match_percentage == 23

    def test_matching_is_case_insensitive(self):
        result = score_job({"rust", "GO"}, PLATFORM_ENGINEER)
        assert result.match_percentage == 60
        assert result.matched_skills == ["Rust", "Go"]

    def test_skills_outside_required_are_ignored(self):
        result = score_job({"Python", "Rust"}, PLATFORM_ENGINEER)
        assert result.matched_skills == ["Rust"]
        assert result.match_percentage == 30


class TestDescriptions:
    def test_matched_description_lists_skills_in_job_order(self):
        result = score_job({"Redis", "Rust"}, PLATFORM_ENGINEER)
        assert result.description == "Your skills in Rust, Redis align with this position."

    def test_unmatched_description(self):
        result = score_job(set(), PLATFORM_ENGINEER)
        assert result.match_percentage == 0
        assert result.description == "This position requires skills that weren't found in your resume."
        assert result.domain_gate_applied is False

    def test_result_carries_template_fields(self):
        result = score_job({"Rust"}, PLATFORM_ENGINEER)
        assert result.title == "Platform Engineer"
        assert result.company == "Infra Co"
        assert result.required_skills == list(PLATFORM_ENGINEER.required_skills)


class TestDomainGate:
    def test_gate_caps_score_without_gating_skills(self):
        job = JobTemplate(
            title="Aptos Engineer",
            company="Acme",
            required_skills=("Aptos", "Rust", "Go", "Python", "Docker"),
            critical_skills=("Aptos", "Rust", "Go", "Python"),
            important_skills=("Docker",),
            gating_skills=("Aptos",),
            gating_domain="blockchain",
        )
        # uncapped: 3 * 15 + 40 = 85
        result = score_job({"Rust", "Go", "Python", "Docker"}, job)
        assert result.match_percentage == GATED_SCORE_CAP
        assert result.domain_gate_applied is True

    def test_gate_with_all_important_skills(self):
        result = score_job({"Blockchain", "Smart Contracts"}, BLOCKCHAIN_DEVELOPER)
        assert result.match_percentage <= 60
        assert result.match_percentage == 40
        assert result.domain_gate_applied is True
        assert result.description == (
            "This position requires specific blockchain skills (Aptos, Move) "
            "that weren't found in your resume."
        )

    def test_gate_does_not_raise_zero_score(self):
        result = score_job(set(), BLOCKCHAIN_DEVELOPER)
        assert result.match_percentage == 0
        assert result.domain_gate_applied is True

    def test_one_gating_skill_lifts_the_gate(self):
        result = score_job({"Move", "Blockchain", "Smart Contracts"}, BLOCKCHAIN_DEVELOPER)
        assert result.domain_gate_applied is False
        assert result.match_percentage == 70
        assert result.description.startswith("Your skills in Blockchain, Smart Contracts, Move")

    def test_gate_description_without_domain(self):
        job = PLATFORM_ENGINEER.model_copy(update={"gating_skills": ("Rust",)})
        result = score_job({"Docker"}, job)
        assert result.description == (
            "This position requires specific skills (Rust) that weren't found in your resume."
        )


class TestRanking:
    def test_sorted_by_percentage_descending(self):
        results = score_jobs({"JavaScript", "React", "TypeScript", "CSS"}, DEFAULT_CATALOG)
        percentages = [r.match_percentage for r in results]
        assert percentages == sorted(percentages, reverse=True)
        assert results[0].title == "Frontend Developer"
        assert results[0].match_percentage == 100

    def test_ties_keep_catalog_order(self):
        results = score_jobs(set(), DEFAULT_CATALOG)
        assert [r.title for r in results] == [job.title for job in DEFAULT_CATALOG]

    def test_permuted_catalog_keeps_scores(self):
        skills = {"JavaScript", "Python", "Blockchain", "Leadership"}
        forward = _by_title(score_jobs(skills, DEFAULT_CATALOG))
        backward = _by_title(score_jobs(skills, tuple(reversed(DEFAULT_CATALOG))))
        assert {t: r.match_percentage for t, r in forward.items()} == {
            t: r.match_percentage for t, r in backward.items()
        }

    def test_permuted_catalog_ties_follow_canonical_order(self):
        results = score_jobs(set(), tuple(reversed(DEFAULT_CATALOG)))
        assert [r.title for r in results] == [job.title for job in DEFAULT_CATALOG]

    def test_permuted_sample_ranking_is_unchanged(self, sample_resume):
        skills = extract_skills(sample_resume)
        forward = score_jobs(skills, DEFAULT_CATALOG)
        backward = score_jobs(skills, tuple(reversed(DEFAULT_CATALOG)))
        assert [r.title for r in backward] == [r.title for r in forward]

    def test_explicit_canonical_order(self):
        catalog = (PLATFORM_ENGINEER, DEFAULT_CATALOG[4])
        results = score_jobs(set(), catalog, canonical=(DEFAULT_CATALOG[4], PLATFORM_ENGINEER))
        assert [r.title for r in results] == ["Frontend Developer", "Platform Engineer"]

    def test_jobs_outside_canonical_follow_in_given_order(self):
        other = PLATFORM_ENGINEER.model_copy(update={"title": "SRE"})
        results = score_jobs(set(), (other, PLATFORM_ENGINEER, DEFAULT_CATALOG[1]))
        assert [r.title for r in results] == ["AI Integration Specialist", "SRE", "Platform Engineer"]

    def test_empty_skills_score_zero_everywhere(self):
        results = score_jobs(set(), DEFAULT_CATALOG)
        assert all(r.match_percentage == 0 for r in results)
        assert all(r.matched_skills == [] for r in results)

    def test_empty_catalog(self):
        assert score_jobs({"Python"}, ()) == []

    def test_invalid_catalog_fails_fast(self):
        broken = JobTemplate(
            title="Broken",
            company="Acme",
            required_skills=("Python",),
            critical_skills=(),
            important_skills=("Python",),
        )
        with pytest.raises(InvalidCatalogError):
            score_jobs({"Python"}, (broken,))


class TestEndToEnd:
    def test_blockchain_profile_scores_hundred(self):
        skills = extract_skills(
            "Senior Blockchain Developer... Skills: Blockchain, Smart Contracts, Aptos, Move"
        )
        result = _by_title(score_jobs(skills, DEFAULT_CATALOG))["Blockchain Developer"]
        assert result.match_percentage == 100
        assert result.domain_gate_applied is False

    def test_python_ml_profile_is_gated(self):
        skills = extract_skills("Python, Machine Learning")
        result = _by_title(score_jobs(skills, DEFAULT_CATALOG))["Blockchain Developer"]
        assert result.match_percentage <= 60
        assert result.domain_gate_applied is True
        assert "Aptos, Move" in result.description
        assert "blockchain" in result.description

    def test_python_ml_profile_ranks_ai_role_first(self):
        results = score_jobs(extract_skills("Python, Machine Learning"), DEFAULT_CATALOG)
        assert results[0].title == "AI Integration Specialist"
        assert results[0].match_percentage == 80

    def test_sample_resume_ranking(self, sample_resume):
        results = score_jobs(extract_skills(sample_resume), DEFAULT_CATALOG)
        assert [(r.title, r.match_percentage) for r in results] == [
            ("Blockchain Developer", 100),
            ("AI Integration Specialist", 100),
            ("Full Stack Developer", 87),
            ("Frontend Developer", 60),
            ("Web3 Product Manager", 20),
        ]
