"""Static project set: sheet title to REDA project id."""

from __future__ import annotations

import json
from typing import Final

from redasync.domain.model import ProjectRef

from .env import optional_env_var
from .errors import ConfigurationError

PROJECTS_ENV = "REDA_PROJECTS"

DEFAULT_PROJECTS: Final[tuple[ProjectRef, ...]] = (
    ProjectRef("Colina D Santiago", 10),
    ProjectRef("Puerto D Marqués", 30),
    ProjectRef("Hacienda D San Gabriel", 32),
    ProjectRef("LAGRAND", 35),
    ProjectRef("Senda D Santino", 57),
    ProjectRef("Villa D Nogal", 16),
    ProjectRef("Cerrada D Melocotón", 17),
    ProjectRef("MooD 08", 179),
)


def parse_projects(raw: str) -> tuple[ProjectRef, ...]:
    """Parse a JSON object of ``{"name": id}`` pairs, keeping declaration order."""

    try:
        mapping = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{PROJECTS_ENV} is not valid JSON") from exc
    if not isinstance(mapping, dict) or not mapping:
        raise ConfigurationError(f"{PROJECTS_ENV} must be a non-empty JSON object")

    projects: list[ProjectRef] = []
    for name, external_id in mapping.items():
        if not name.strip():
            raise ConfigurationError(f"{PROJECTS_ENV} contains a blank project name")
        if isinstance(external_id, bool) or not isinstance(external_id, int):
            raise ConfigurationError(
                f"{PROJECTS_ENV} id for {name!r} must be an integer, got {external_id!r}"
            )
        projects.append(ProjectRef(display_name=name.strip(), external_id=external_id))
    return tuple(projects)


def get_projects() -> tuple[ProjectRef, ...]:
    raw = optional_env_var(PROJECTS_ENV)
    if raw is None:
        return DEFAULT_PROJECTS
    return parse_projects(raw)
