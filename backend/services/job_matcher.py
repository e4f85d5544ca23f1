"""Weighted job-match scoring of a candidate skill set against the job catalog."""

import logging
import math
from typing import Iterable, Sequence

from models.schemas.job_template import JobTemplate
from models.schemas.match_result import MatchResult
from services.job_catalog import DEFAULT_CATALOG, validate_catalog

logger = logging.getLogger(__name__)

# Points shared by each skill tier (100 total)
CRITICAL_POINTS = 60.0
IMPORTANT_POINTS = 40.0

# Ceiling applied when none of a job's gating skills was found
GATED_SCORE_CAP = 60


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _tier_points(tier: Sequence[str], matched: set[str], points: float) -> float:
    """Partial credit: each skill in the tier is worth points / len(tier)."""
    hits = sum(1 for skill in tier if skill.lower() in matched)
    return hits * (points / len(tier))


def _gate_description(job: JobTemplate) -> str:
    domain = f"{job.gating_domain} " if job.gating_domain else ""
    return (
        f"This position requires specific {domain}skills "
        f"({', '.join(job.gating_skills)}) that weren't found in your resume."
    )


def score_job(skills: Iterable[str], job: JobTemplate) -> MatchResult:
    """Score a single, already validated job template."""
    candidate = {s.lower() for s in skills}
    matched_skills = [s for s in job.required_skills if s.lower() in candidate]
    matched = {s.lower() for s in matched_skills}

    raw = _tier_points(job.critical_skills, matched, CRITICAL_POINTS) + _tier_points(
        job.important_skills, matched, IMPORTANT_POINTS
    )
    match_percentage = min(100, max(0, _round_half_up(raw)))

    gated = bool(job.gating_skills) and not any(
        s.lower() in matched for s in job.gating_skills
    )
    if gated:
        match_percentage = min(match_percentage, GATED_SCORE_CAP)
        description = _gate_description(job)
    elif matched_skills:
        description = f"Your skills in {', '.join(matched_skills)} align with this position."
    else:
        description = "This position requires skills that weren't found in your resume."

    return MatchResult(
        title=job.title,
        company=job.company,
        location=job.location,
        required_skills=list(job.required_skills),
        match_percentage=match_percentage,
        description=description,
        matched_skills=matched_skills,
        domain_gate_applied=gated,
    )


def _job_key(job: JobTemplate) -> tuple[str, str]:
    return job.title, job.company


def score_jobs(
    skills: Iterable[str],
    catalog: Sequence[JobTemplate],
    canonical: Sequence[JobTemplate] | None = None,
) -> list[MatchResult]:
    """Score every template and rank by match percentage, highest first.

    Ties are ordered by each job's position in ``canonical`` (the built-in
    catalog when omitted), so permuting ``catalog`` never reorders equal
    scores. Jobs missing from ``canonical`` follow, in the order given.
    Raises InvalidCatalogError for a malformed catalog; an empty skill set
    or an empty catalog is not an error.
    """
    validate_catalog(catalog)
    skill_set = set(skills)
    if canonical is None:
        canonical = DEFAULT_CATALOG

    position: dict[tuple[str, str], int] = {}
    for index, job in enumerate(canonical):
        position.setdefault(_job_key(job), index)
    unknown = len(position)

    ranked = sorted(
        catalog,
        key=lambda job: position.get(_job_key(job), unknown),
    )
    results = [score_job(skill_set, job) for job in ranked]
    # sorted() is stable, so equal scores stay in canonical order
    results = sorted(results, key=lambda r: r.match_percentage, reverse=True)

    if results:
        logger.debug(
            "Scored %d jobs for %d skills, top match %s (%d%%)",
            len(results),
            len(skill_set),
            results[0].title,
            results[0].match_percentage,
        )
    return results
