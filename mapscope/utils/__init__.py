"""Utility helpers for Mapscope."""

from mapscope.utils.error_utils import create_file_error


__all__ = ["create_file_error"]
