"""
Absolute-tolerance comparison of two numeric sequences.

Two values match when ``|u - c| <= eps``. Sequences of different length
never match and the elements are not inspected in that case. The scan
stops at the first mismatching index.
"""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence

from .constant import Verdict
from .meta import validate_eps

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Comparison:
    verdict: Verdict
    candidate_count: int
    reference_count: int
    # first mismatching position, -1 when there is none
    index: int = -1
    got: Optional[float] = None
    expected: Optional[float] = None
    diff: Optional[float] = None

    @property
    def length_mismatch(self) -> bool:
        return self.candidate_count != self.reference_count

    def describe(self) -> str:
        if self.length_mismatch:
            return (f"Count mismatch: expected {self.reference_count} "
                    f"numbers, got {self.candidate_count}")
        if self.verdict == Verdict.WA:
            return (f"Number {self.index + 1}: expected {self.expected!r}, "
                    f"got {self.got!r} (difference = {self.diff:.2e})")
        return f"All {self.reference_count} numbers match within tolerance"


def _exact(x: float) -> Decimal:
    # shortest round-tripping decimal, i.e. the literal the value was read from
    return Decimal(repr(float(x)))


def difference(u: float, c: float) -> float:
    if not (math.isfinite(u) and math.isfinite(c)):
        return abs(u - c)
    return float(abs(_exact(u) - _exact(c)))


def same(u: float, c: float, eps: float) -> bool:
    """Return True if ``u`` is within ``eps`` of ``c``.

    The difference is taken on the decimal literals, so ``1.05`` and
    ``1.00`` are exactly ``0.05`` apart. NaN never matches anything. An
    infinity only matches the identical infinity.
    """
    if math.isnan(u) or math.isnan(c) or math.isnan(eps):
        return False
    if math.isinf(u) or math.isinf(c):
        return u == c
    if math.isinf(eps):
        return True
    return abs(_exact(u) - _exact(c)) <= _exact(eps)


def compare_detailed(candidate: Sequence[float], reference: Sequence[float],
                     eps: float) -> Comparison:
    validate_eps(eps)
    usr_count, corr_count = len(candidate), len(reference)
    if usr_count != corr_count:
        logger.debug(f"length mismatch: {usr_count} != {corr_count}")
        return Comparison(Verdict.WA, usr_count, corr_count)
    for i, (u, c) in enumerate(zip(candidate, reference)):
        if not same(u, c, eps):
            diff = difference(u, c)
            logger.debug(f"mismatch at {i}: {u!r} vs {c!r} (eps={eps!r})")
            return Comparison(
                Verdict.WA,
                usr_count,
                corr_count,
                index=i,
                got=u,
                expected=c,
                diff=diff,
            )
    return Comparison(Verdict.OK, usr_count, corr_count)


def compare(candidate: Sequence[float], reference: Sequence[float],
            eps: float) -> Verdict:
    """Return the verdict for ``candidate`` against ``reference``.

    Raises:
        InvalidToleranceError: eps is negative or NaN.
    """
    return compare_detailed(candidate, reference, eps).verdict
