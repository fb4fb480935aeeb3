"""Framework presets and validation for creating a project."""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_ROOT_DOMAIN = "hyphen.it.com"
ROOT_DOMAINS = ["hyphen.it.com"]

_PROJECT_NAME_RE = re.compile(r"^[a-zA-Z0-9_-]+$")


@dataclass(frozen=True)
class Framework:
    value: str
    label: str
    install: str
    output: str


FRAMEWORKS: list[Framework] = [
    Framework("react", "React", "npm install", "build"),
    Framework("nextjs", "Next.js", "npm install", ".next"),
    Framework("nestjs", "NestJS", "npm install", "dist"),
    Framework("springboot", "Spring Boot", "", "build/libs"),
    Framework("nodejs", "Node.js", "npm install", ""),
    Framework("other", "Other", "", ""),
]

BACKEND_FRAMEWORKS = frozenset({"nestjs", "springboot", "nodejs"})


class ProjectSetupError(ValueError):
    """Project form values that cannot be submitted."""


def get_framework(value: str) -> Framework | None:
    for framework in FRAMEWORKS:
        if framework.value == value:
            return framework
    return None


def framework_defaults(value: str) -> tuple[str, str]:
    """Return (install command, output dir) for a framework choice.

    ``other`` and unknown values clear both fields.
    """
    framework = get_framework(value)
    if framework is None or framework.value == "other":
        return "", ""
    return framework.install, framework.output


def is_backend(value: str) -> bool:
    return value in BACKEND_FRAMEWORKS


def validate_project_name(name: str) -> str:
    """Return the trimmed name or raise ProjectSetupError."""
    name = name.strip()
    if not name:
        raise ProjectSetupError("Project name is required")
    if not _PROJECT_NAME_RE.match(name):
        raise ProjectSetupError(
            "Project name may only contain letters, digits, '-' and '_'"
        )
    return name


def build_domain(project_name: str, root_domain: str, root_only: bool = False) -> str:
    if root_only:
        return root_domain.lower()
    return f"{project_name}.{root_domain}".lower()
