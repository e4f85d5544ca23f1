"""Short natural-language synopses of extracted skills and job matches."""

from typing import Iterable, Sequence

from models.schemas.match_result import MatchResult


def _skills_preview(skills: Iterable[str], limit: int = 3) -> str:
    """First few skills comma-joined, with ' and more' when truncated."""
    skill_list = list(skills)
    preview = ", ".join(skill_list[:limit])
    if len(skill_list) > limit:
        preview += " and more"
    return preview


def summarize(skills: Iterable[str], matches: Sequence[MatchResult]) -> str:
    """Summarize the skill set and the strongest (first) match.

    Skills are taken in iteration order, so pass an ordered list for a
    deterministic sentence. Returns an empty string when both are empty.
    """
    skill_list = list(skills)
    skills_text = f"You have skills in {_skills_preview(skill_list)}." if skill_list else ""

    match_text = ""
    if matches:
        top = matches[0]
        match_text = (
            f"Your strongest match is for {top.title} at {top.company} "
            f"with a {top.match_percentage}% match."
        )

    return f"{skills_text} {match_text}".strip()


def summarize_resume(
    skills: Iterable[str],
    experience: Sequence[str],
    education: Sequence[str],
) -> str:
    """Describe a résumé from its skills, experience lines and education lines."""
    skill_list = list(skills)
    parts = [
        f"Skills include {_skills_preview(skill_list)}." if skill_list else "",
        "Has professional experience." if experience else "",
        "Has formal education background." if education else "",
    ]
    return " ".join(p for p in parts if p).strip()
