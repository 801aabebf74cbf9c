"""Reduce a candidate list to the one build the user wants."""

import logging
from collections.abc import Sequence

from mapscope.core.errors import NoCandidatesError, SelectionCancelledError
from mapscope.models.artifacts import Candidate
from mapscope.protocols import CandidateChooser


logger = logging.getLogger(__name__)


def first_candidate_chooser(candidates: Sequence[Candidate]) -> Candidate | None:
    """Non-interactive chooser: the first candidate in encounter order."""
    return candidates[0] if candidates else None


class Selector:
    """Pick exactly one candidate, asking the chooser only when needed."""

    def __init__(self, chooser: CandidateChooser | None = None) -> None:
        self.chooser = chooser or first_candidate_chooser

    def select(self, candidates: Sequence[Candidate]) -> Candidate:
        """Return the selected candidate.

        A single candidate is returned without asking. With several, the
        chooser is called once with the full list.

        Raises:
            NoCandidatesError: ``candidates`` is empty
            SelectionCancelledError: The chooser returned no candidate
        """
        if not candidates:
            raise NoCandidatesError("No build artifact candidates to select from")

        if len(candidates) == 1:
            selected = candidates[0]
        else:
            logger.debug("Asking for a choice among %d candidates", len(candidates))
            choice = self.chooser(list(candidates))
            if choice is None:
                raise SelectionCancelledError("Selection cancelled")
            selected = choice

        logger.debug("Selected binary: %s", selected.binary_path)
        logger.debug("Selected map: %s", selected.map_path)
        return selected


def create_selector(chooser: CandidateChooser | None = None) -> Selector:
    """Create a selector that defers ties to ``chooser``."""
    return Selector(chooser)
