"""Shared helpers for jlox."""

from .logger import get_logger

__all__ = ["get_logger"]
