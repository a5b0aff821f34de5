"""Locating the behavior and resource packs of a project."""

from __future__ import annotations

import fnmatch
import logging
import os
from typing import Any

from rockide.shared import BP_GLOB, RP_GLOB, Project

logger = logging.getLogger(__name__)


class ProjectNotFoundError(Exception):
    """Raised when the pack locations cannot be determined."""


def _clean(path: str) -> str:
    return os.path.normpath(path).replace(os.sep, "/")


def _alternatives(pattern: str) -> list[str]:
    if pattern.startswith("{") and pattern.endswith("}"):
        return pattern[1:-1].split(",")
    return [pattern]


def _glob_first(directory: str, pattern: str) -> str:
    alternatives = _alternatives(pattern)
    try:
        entries = sorted(os.listdir(directory))
    except OSError as exc:
        raise ProjectNotFoundError("not a minecraft project") from exc
    for entry in entries:
        if any(fnmatch.fnmatchcase(entry, alt) for alt in alternatives):
            return entry
    raise ProjectNotFoundError("not a minecraft project")


def find_project_paths(options: Any) -> Project:
    """Return the pack locations from client options, or by searching the working directory."""
    if isinstance(options, dict):
        bp = options.get("behaviorPack")
        rp = options.get("resourcePack")
        if not isinstance(bp, str) or not isinstance(rp, str):
            raise ProjectNotFoundError("invalid initialization options")
        return Project(bp=_clean(bp), rp=_clean(rp))

    directory = "packs" if os.path.isdir("packs") else "."

    bp = directory + "/" + _glob_first(directory, BP_GLOB)
    logger.info("Behavior pack: %s", bp)
    rp = directory + "/" + _glob_first(directory, RP_GLOB)
    logger.info("Resource pack: %s", rp)

    return Project(bp=_clean(bp), rp=_clean(rp))