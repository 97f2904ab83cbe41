"""
Factory functions for creating standardized checker result dictionaries.
"""

from typing import Optional

from .comparator import Comparison
from .constant import Verdict


def make_checker_result(
    verdict: Verdict,
    message: str = "",
    index: int = -1,
    expected: Optional[float] = None,
    got: Optional[float] = None,
    diff: Optional[float] = None,
) -> dict:
    """
    Build a checker result.

    Args:
        verdict: Judging outcome (OK or WA)
        message: Human readable reason
        index: First mismatching position, -1 if none
        expected: Reference value at ``index``
        got: Candidate value at ``index``
        diff: Absolute difference at ``index``

    Returns:
        Checker result dictionary
    """
    return {
        "verdict": Verdict(verdict).value,
        "message": message,
        "index": index,
        "expected": expected,
        "got": got,
        "diff": diff,
    }


def from_comparison(comparison: Comparison) -> dict:
    return make_checker_result(
        comparison.verdict,
        message=comparison.describe(),
        index=comparison.index,
        expected=comparison.expected,
        got=comparison.got,
        diff=comparison.diff,
    )
