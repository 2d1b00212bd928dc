"""Output storage for scripts and audio files."""

from .files import OutputStore

__all__ = ["OutputStore"]
