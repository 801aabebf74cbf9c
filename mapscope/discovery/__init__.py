"""Build artifact discovery: locate a binary and its linker map."""

from mapscope.discovery.case_policy import is_case_insensitive, probe_case_insensitive
from mapscope.discovery.collector import CandidateCollector, create_candidate_collector
from mapscope.discovery.matcher import ArtifactMatcher, create_artifact_matcher
from mapscope.discovery.path_validator import PathValidator, create_path_validator
from mapscope.discovery.resolver import (
    ArtifactResolver,
    LoggingNotifier,
    create_artifact_resolver,
)
from mapscope.discovery.selector import (
    Selector,
    create_selector,
    first_candidate_chooser,
)
from mapscope.discovery.walker import DirectoryWalker, create_directory_walker


__all__: list[str] = [
    "ArtifactMatcher",
    "ArtifactResolver",
    "CandidateCollector",
    "DirectoryWalker",
    "LoggingNotifier",
    "PathValidator",
    "Selector",
    "first_candidate_chooser",
    "is_case_insensitive",
    "probe_case_insensitive",
    # Factory functions
    "create_artifact_matcher",
    "create_artifact_resolver",
    "create_candidate_collector",
    "create_directory_walker",
    "create_path_validator",
    "create_selector",
]
