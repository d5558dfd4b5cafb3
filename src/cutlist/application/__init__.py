"""Application layer - use cases and project configuration."""

from .commands import GenerateCutListCommand
from .dtos import CutListOutput

__all__ = ["CutListOutput", "GenerateCutListCommand"]
