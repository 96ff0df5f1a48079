"""
lcsdiff Package
===============

This package computes longest common subsequences (LCS) of two sequences
and derives element-wise diffs from them. A dense dynamic-programming
table is built once and then read by the extractors.

Modules:
    - table: LCS length table construction (LCSTable).
    - engine: Backtracking extractors (single LCS, all LCSs, diff) and configuration.
    - models: Result data structures (Alignment, DiffComponent, DiffKind).
    - utils: Content keys, deduplication and diff reconstruction helpers.
    - errors: Exception hierarchy.

Example:
    >>> from lcsdiff import LCSTable, LCSEngine
    >>> engine = LCSEngine(LCSTable("a--b---c", "abc"))
    >>> "".join(engine.as_ref_a())
    'abc'
"""
import logging

from .engine import DEFAULT_CONFIG, LCSEngine, all_lcs, diff, lcs
from .errors import ConfigError, EnumerationLimitError, LCSError
from .models import Alignment, DiffComponent, DiffKind
from .table import LCSTable, build_table
from .utils import AlignmentUtils

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_CONFIG", "LCSEngine", "lcs", "all_lcs", "diff",
    "LCSError", "ConfigError", "EnumerationLimitError",
    "Alignment", "DiffComponent", "DiffKind",
    "LCSTable", "build_table", "AlignmentUtils",
]
