"""Shared dependencies for API routes."""

from functools import lru_cache

from config import settings
from models.schemas.job_template import JobTemplate
from services.job_catalog import load_catalog


@lru_cache(maxsize=1)
def get_job_catalog() -> tuple[JobTemplate, ...]:
    """Configured job catalog, loaded and validated once per process."""
    return load_catalog(settings.job_catalog_path or None)
