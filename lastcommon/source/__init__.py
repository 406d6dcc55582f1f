"""Commit-graph sources."""

from .base import CommitGraphSource
from .counting import Counting
from .github import Github
from .memory import Memory

__all__ = ["CommitGraphSource", "Counting", "Github", "Memory"]
