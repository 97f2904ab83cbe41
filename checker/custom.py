"""
Sandbox custom checker front end.

The judging sandbox runs a custom checker as
``checker <input> <student output> <expected answer>`` and reads two lines
from its stdout::

    STATUS: AC|WA
    MESSAGE: <reason>

A non-zero exit status is reported by the sandbox as a judge error.
"""

import logging
from pathlib import Path
from typing import List, Tuple

from .comparator import compare_detailed
from .constant import SANDBOX_STATUS, Verdict
from .exception import InputFormatError
from .meta import validate_eps

logger = logging.getLogger(__name__)


def _parse_numbers(text: str) -> List[float]:
    numbers = []
    for i, token in enumerate(text.split(), 1):
        try:
            numbers.append(float(token))
        except ValueError as exc:
            raise InputFormatError(
                f"Invalid number format at token {i}: {token!r}") from exc
    return numbers


def _read_file(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        raise InputFormatError(f"File not found: {exc.filename}") from exc
    except OSError as exc:
        raise InputFormatError(f"Cannot read {path}: {exc}") from exc


def _decode(data: bytes, path: Path) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputFormatError(
            f"{path.name} is not valid UTF-8 text: {exc}") from exc


def check(input_file: Path, output_file: Path, answer_file: Path,
          eps: float) -> Tuple[str, str]:
    """
    Compare a student output file with the expected answer file.

    Args:
        input_file: Test case input, must exist but is otherwise unused
        output_file: Student output
        answer_file: Expected answer
        eps: Absolute tolerance

    Returns:
        tuple: (status, message) where status is "AC" or "WA"

    Raises:
        InputFormatError: a file cannot be read or the answer is malformed
        InvalidToleranceError: eps is negative or NaN
    """
    validate_eps(eps)
    input_file, output_file, answer_file = map(
        Path, (input_file, output_file, answer_file))
    if not input_file.exists():
        raise InputFormatError(f"File not found: {input_file}")
    student_data = _read_file(output_file)
    expected = _parse_numbers(_decode(_read_file(answer_file), answer_file))
    try:
        got = _parse_numbers(_decode(student_data, output_file))
    except InputFormatError as exc:
        # unreadable student output is a wrong answer, not a checker failure
        logger.debug(f"student output rejected: {exc}")
        return SANDBOX_STATUS[Verdict.WA], str(exc)
    comparison = compare_detailed(got, expected, eps)
    message = comparison.describe()
    if comparison.verdict == Verdict.OK:
        message = f"{message} (eps = {eps:.2e})"
    return SANDBOX_STATUS[comparison.verdict], message


def format_result(status: str, message: str) -> str:
    return f"STATUS: {status}\nMESSAGE: {message}\n"
