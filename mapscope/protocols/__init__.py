"""Protocol definitions for Mapscope adapters and collaborators.

This package provides standard Protocol classes that define the interfaces
for various components in the Mapscope system. These protocols use Python's
typing.Protocol system with the @runtime_checkable decorator to enable both
static type checking and runtime isinstance() checks.
"""

from .discovery_protocols import CandidateChooser, NotifierProtocol, WorkspaceProvider
from .file_adapter_protocol import FileAdapterProtocol


__all__ = [
    "CandidateChooser",
    "FileAdapterProtocol",
    "NotifierProtocol",
    "WorkspaceProvider",
]
