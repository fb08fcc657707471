"""Access to a beets library through the `beet` command."""

from smart_cutoff.beets.filters import build_list_args
from smart_cutoff.beets.query import BeetQuery, QueryError
from smart_cutoff.beets.runner import ProcessError, ProcessRunner, SubprocessRunner

__all__ = [
    "BeetQuery",
    "ProcessError",
    "ProcessRunner",
    "QueryError",
    "SubprocessRunner",
    "build_list_args",
]
