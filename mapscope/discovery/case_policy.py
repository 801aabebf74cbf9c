"""Case sensitivity policy for directory identities."""

import logging
import os
from pathlib import Path

from mapscope.config.models import CaseSensitivity


logger = logging.getLogger(__name__)


def probe_case_insensitive(path: Path) -> bool:
    """Detect whether the file system holding ``path`` folds case.

    Looks for the nearest path component that contains letters, swaps its
    case and checks whether the swapped spelling names the same directory
    entry. A missing swapped spelling means the file system is case
    sensitive.
    """
    current = Path(os.path.abspath(path))
    for candidate in (current, *current.parents):
        name = candidate.name
        swapped = name.swapcase()
        if swapped == name:
            continue

        alias = candidate.with_name(swapped)
        try:
            result = os.path.samefile(candidate, alias)
        except OSError:
            result = False
        logger.debug(
            "Case probe %s vs %s: case-insensitive=%s", candidate, alias, result
        )
        return result

    logger.debug("No case probe possible for %s, assuming case-sensitive", path)
    return False


def is_case_insensitive(
    root: Path, policy: CaseSensitivity | str = CaseSensitivity.AUTO
) -> bool:
    """Resolve ``policy`` to a concrete answer for the tree under ``root``."""
    policy = CaseSensitivity(policy)
    if policy is CaseSensitivity.INSENSITIVE:
        return True
    if policy is CaseSensitivity.SENSITIVE:
        return False
    return probe_case_insensitive(root)
