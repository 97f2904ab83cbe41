"""
Reader for the checker's stdin protocol.

The stream is a sequence of whitespace-delimited tokens::

    usrCount corrCount paramCount
    <usrCount candidate values>
    <corrCount reference values>
    <eps>              (only when paramCount == 1)

Tokens after ``eps`` are ignored.
"""

import logging
from typing import Iterator, List, TextIO

from .comparator import compare
from .constant import Verdict
from .exception import InputFormatError, ProtocolError
from .meta import CheckerInput, validate_eps

logger = logging.getLogger(__name__)


def _next_token(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise InputFormatError(f"unexpected end of input, missing {what}")


def _read_count(tokens: Iterator[str], what: str) -> int:
    token = _next_token(tokens, what)
    try:
        value = int(token)
    except ValueError as exc:
        raise InputFormatError(f"invalid {what}: {token!r}") from exc
    return value


def _read_real(tokens: Iterator[str], what: str) -> float:
    token = _next_token(tokens, what)
    try:
        return float(token)
    except ValueError as exc:
        raise InputFormatError(f"invalid {what}: {token!r}") from exc


def _read_sequence(tokens: Iterator[str], count: int,
                   name: str) -> List[float]:
    return [
        _read_real(tokens, f"{name} value #{i + 1}") for i in range(count)
    ]


def parse_tokens(tokens) -> CheckerInput:
    tokens = iter(tokens)
    usr_count = _read_count(tokens, "candidate count")
    corr_count = _read_count(tokens, "reference count")
    param_count = _read_count(tokens, "parameter count")
    if param_count != 1:
        raise ProtocolError(param_count)
    for what, count in (("candidate count", usr_count),
                        ("reference count", corr_count)):
        if count < 0:
            raise InputFormatError(f"{what} must not be negative: {count}")
    candidate = _read_sequence(tokens, usr_count, "candidate")
    reference = _read_sequence(tokens, corr_count, "reference")
    eps = validate_eps(_read_real(tokens, "tolerance"))
    return CheckerInput(candidate=candidate, reference=reference, eps=eps)


def read_input(stream: TextIO) -> CheckerInput:
    return parse_tokens(stream.read().split())


def check_stream(stream: TextIO) -> Verdict:
    """Read one comparison from ``stream`` and return its verdict.

    Raises:
        ProtocolError: the parameter count is not 1 or eps is invalid.
        InputFormatError: the stream is truncated or malformed.
    """
    data = read_input(stream)
    verdict = compare(data.candidate, data.reference, data.eps)
    logger.debug(f"verdict {verdict.value} for {len(data.candidate)} "
                 f"candidate / {len(data.reference)} reference values")
    return verdict
