"""lastcommon: last common commits of two branches in a lazily fetched commit DAG."""

from .cache import LookupCache
from .color import Color, Origin, Step, merge_color
from .errors import (
    LastCommonError,
    MalformedResponse,
    NotFound,
    ResolutionError,
    SourceError,
    TransportError,
)
from .factory import CommitsFinder, finder
from .search import LastCommonCommitsFinder
from .frontier import Frontier, FrontierEntry
from .pruner import DominancePruner, remove_redundant
from .source import CommitGraphSource, Counting, Github, Memory

__all__ = [
    "Color",
    "CommitGraphSource",
    "CommitsFinder",
    "Counting",
    "DominancePruner",
    "Frontier",
    "FrontierEntry",
    "Github",
    "LastCommonCommitsFinder",
    "LastCommonError",
    "LookupCache",
    "MalformedResponse",
    "Memory",
    "NotFound",
    "Origin",
    "ResolutionError",
    "SourceError",
    "Step",
    "TransportError",
    "finder",
    "merge_color",
    "remove_redundant",
]
