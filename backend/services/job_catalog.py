"""Job catalog: built-in templates, JSON loading and load-time validation.

The catalog is configuration, not computed state. It is validated once when
the application starts so a malformed template (for instance one without
critical skills, which would divide by zero while scoring) fails fast.
"""

import json
import logging
from pathlib import Path
from typing import Iterable

from pydantic import TypeAdapter, ValidationError

from models.schemas.job_template import JobTemplate

logger = logging.getLogger(__name__)


class InvalidCatalogError(ValueError):
    """Raised when a job catalog breaks a construction rule."""


DEFAULT_CATALOG: tuple[JobTemplate, ...] = (
    JobTemplate(
        title="Blockchain Developer",
        company="Aptos Labs",
        location="Remote",
        required_skills=("Blockchain", "Smart Contracts", "Aptos", "Move"),
        critical_skills=("Aptos", "Move"),
        important_skills=("Blockchain", "Smart Contracts"),
        gating_skills=("Aptos", "Move"),
        gating_domain="blockchain",
    ),
    JobTemplate(
        title="AI Integration Specialist",
        company="MOVE AI",
        location="San Francisco",
        required_skills=("Machine Learning", "AI", "API Integration", "Python"),
        critical_skills=("Machine Learning", "AI"),
        important_skills=("Python", "API Integration"),
    ),
    JobTemplate(
        title="Full Stack Developer",
        company="Decentralized Finance",
        location="New York",
        required_skills=("JavaScript", "React", "Node.js", "Blockchain"),
        critical_skills=("JavaScript",),
        important_skills=("React", "Node.js", "Blockchain"),
    ),
    JobTemplate(
        title="Web3 Product Manager",
        company="Decentralized Systems",
        location="Singapore",
        required_skills=("Product Management", "Web3", "Blockchain", "Leadership"),
        critical_skills=("Product Management", "Web3"),
        important_skills=("Blockchain", "Leadership"),
    ),
    JobTemplate(
        title="Frontend Developer",
        company="Web3 Startup",
        location="Berlin",
        required_skills=("JavaScript", "React", "TypeScript", "CSS"),
        critical_skills=("JavaScript", "React"),
        important_skills=("TypeScript", "CSS"),
    ),
)

_catalog_adapter = TypeAdapter(list[JobTemplate])


def _lowered(skills: Iterable[str]) -> set[str]:
    return {s.lower() for s in skills}


def template_problems(job: JobTemplate) -> list[str]:
    """List every construction rule a template breaks (empty when valid)."""
    problems: list[str] = []
    required = _lowered(job.required_skills)
    critical = _lowered(job.critical_skills)
    important = _lowered(job.important_skills)

    if not critical:
        problems.append("no critical skills")
    if not important:
        problems.append("no important skills")
    if not critical <= required:
        problems.append(
            f"critical skills not in required skills: {sorted(critical - required)}"
        )
    if not important <= required:
        problems.append(
            f"important skills not in required skills: {sorted(important - required)}"
        )
    if critical & important:
        problems.append(f"skills listed as both critical and important: {sorted(critical & important)}")
    gating = _lowered(job.gating_skills)
    if not gating <= critical:
        problems.append(f"gating skills not in critical skills: {sorted(gating - critical)}")
    return problems


def validate_catalog(catalog: Iterable[JobTemplate]) -> None:
    """Raise InvalidCatalogError if any template breaks a construction rule."""
    for index, job in enumerate(catalog):
        problems = template_problems(job)
        if problems:
            message = f"Job template #{index} ({job.title!r} at {job.company!r}): " + "; ".join(problems)
            logger.error("Invalid job catalog: %s", message)
            raise InvalidCatalogError(message)


def parse_catalog(raw: object) -> tuple[JobTemplate, ...]:
    """Build and validate a catalog from decoded JSON data."""
    try:
        catalog = tuple(_catalog_adapter.validate_python(raw))
    except ValidationError as e:
        raise InvalidCatalogError(f"Job catalog does not match the template schema: {e}") from e
    validate_catalog(catalog)
    return catalog


def load_catalog(path: str | Path | None = None) -> tuple[JobTemplate, ...]:
    """Load the job catalog from a JSON file, or the built-in one if no path.

    The file holds a JSON array of template objects with the JobTemplate
    field names.
    """
    if not path:
        validate_catalog(DEFAULT_CATALOG)
        logger.info("Using built-in job catalog (%d templates)", len(DEFAULT_CATALOG))
        return DEFAULT_CATALOG

    catalog_path = Path(path)
    try:
        raw = json.loads(catalog_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise InvalidCatalogError(f"Job catalog file not found: {catalog_path}") from e
    except OSError as e:
        raise InvalidCatalogError(f"Job catalog file could not be read: {catalog_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise InvalidCatalogError(f"Job catalog is not UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        raise InvalidCatalogError(f"Job catalog is not valid JSON: {e}") from e

    catalog = parse_catalog(raw)
    logger.info("Loaded job catalog from %s (%d templates)", catalog_path, len(catalog))
    return catalog
