"""Résumé analysis flow: text checks, skill extraction, job scoring, synopsis.

Pipeline:
1. Minimum-length check on the extracted résumé text
2. Skill extraction (vocabulary order)
3. Weighted job matching against the catalog
4. Skills + strongest-match summary
5. Résumé profile (experience, education, synopsis)
"""

import logging
from typing import Sequence

from config import settings
from models.responses import AnalysisResponse
from models.schemas.job_template import JobTemplate
from models.schemas.resume_profile import ResumeProfile
from services.job_matcher import score_jobs
from services.section_parser import (
    extract_education_level,
    extract_education_lines,
    extract_experience_lines,
    extract_experience_years,
    parse_sections,
)
from services.skill_extractor import extract_skill_list
from services.summary import summarize, summarize_resume

logger = logging.getLogger(__name__)


class ResumeAnalysisError(ValueError):
    """The résumé cannot be analyzed; the message is safe to show to users."""


def build_profile(resume_text: str, skills: list[str]) -> ResumeProfile:
    """Collect experience and education signals for a résumé."""
    experience = extract_experience_lines(resume_text)
    education = extract_education_lines(resume_text)
    return ResumeProfile(
        experience=experience,
        education=education,
        education_level=extract_education_level(resume_text),
        experience_years=extract_experience_years(resume_text),
        sections=sorted(parse_sections(resume_text)),
        summary=summarize_resume(skills, experience, education),
    )


def analyze(resume_text: str, catalog: Sequence[JobTemplate]) -> AnalysisResponse:
    """Run the full résumé analysis. Raises ResumeAnalysisError on unusable input."""
    text = resume_text.strip()
    if len(text) < settings.min_resume_chars:
        logger.warning("Rejected resume text with %d chars", len(text))
        raise ResumeAnalysisError(
            "Your resume does not contain enough text to analyze. "
            "Please upload a more detailed resume."
        )

    skills = extract_skill_list(text)
    if not skills:
        logger.warning("No skills found in resume text (%d chars)", len(text))
        raise ResumeAnalysisError(
            "No skills were identified in your resume. "
            "Please upload a resume with more detailed skill information."
        )

    matches = score_jobs(skills, catalog, canonical=catalog)
    if not matches:
        raise ResumeAnalysisError(
            "No job matches were found based on your resume. "
            "Please upload a resume with more detailed experience information."
        )

    logger.info(
        "Analyzed resume: %d skills, top match %s at %s (%d%%)",
        len(skills),
        matches[0].title,
        matches[0].company,
        matches[0].match_percentage,
    )

    return AnalysisResponse(
        extracted_skills=skills,
        job_matches=matches,
        analysis=summarize(skills, matches),
        profile=build_profile(text, skills),
    )
