"""Helpers for building consistent error objects."""

from pathlib import Path
from typing import Any

from mapscope.core.errors import FileSystemError


def create_file_error(
    path: Path,
    operation: str,
    error: Exception,
    context: dict[str, Any] | None = None,
) -> FileSystemError:
    """Wrap a low level exception raised while touching ``path``.

    Args:
        path: Path the operation was applied to
        operation: Name of the file adapter operation (e.g. "list_directory")
        error: Original exception
        context: Extra details to attach to the error

    Returns:
        FileSystemError carrying the path, operation and original error type
    """
    error_context: dict[str, Any] = {
        "path": str(path),
        "operation": operation,
        "error_type": type(error).__name__,
    }
    if context:
        error_context.update(context)

    return FileSystemError(
        f"File operation '{operation}' failed on {path}: {error}",
        context=error_context,
    )
