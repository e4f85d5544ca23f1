"""Job catalog entry: an open role and how its skills are weighted."""

from pydantic import BaseModel


class JobTemplate(BaseModel):
    """A static, author-defined job template.

    Critical skills share 60 points of the match score and important skills
    share the remaining 40. Gating skills are critical skills of which at
    least one must be present, otherwise the score is capped.
    """
    model_config = {"frozen": True}

    title: str
    company: str
    location: str = ""
    required_skills: tuple[str, ...] = ()  # display order
    critical_skills: tuple[str, ...] = ()
    important_skills: tuple[str, ...] = ()
    gating_skills: tuple[str, ...] = ()
    gating_domain: str = ""  # e.g. "blockchain", used in the capped description
