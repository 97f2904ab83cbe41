"""Absolute-tolerance float checker.

Without arguments the checker reads ``usrCount corrCount paramCount``,
the candidate values, the reference values and the tolerance from stdin,
and prints ``OK`` or ``WA``. A parameter count other than 1 prints nothing
and exits with status 1; a malformed stream exits with status 2.

Example::

    printf '2 2 1\\n1.0 2.0\\n1.0 2.0\\n0.001\\n' | float-checker

With three file arguments it acts as a sandbox custom checker::

    float-checker input.in student.out answer.out --eps 1e-6
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import config
from .constant import ExitStatus
from .custom import check, format_result
from .exception import InputFormatError, ProtocolError
from .protocol import check_stream

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments."""

    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="INPUT STUDENT ANSWER for custom checker mode "
        "(omit to read the stdin protocol)",
    )
    parser.add_argument(
        "--eps",
        type=float,
        default=None,
        help="tolerance for custom checker mode "
        "(default: CHECKER_EPS or .config/checker.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=config.LOG_LEVELS,
        default=None,
        help="logging level, records go to stderr "
        "(default: CHECKER_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)
    if args.log_level is None:
        if config.LOG_LEVEL not in config.LOG_LEVELS:
            parser.error(f"invalid CHECKER_LOG_LEVEL: {config.LOG_LEVEL!r} "
                         f"(choose from {', '.join(config.LOG_LEVELS)})")
        args.log_level = config.LOG_LEVEL
    if len(args.files) not in (0, 3):
        parser.error("expected no file or exactly 3 files: "
                     "INPUT STUDENT ANSWER")
    return args


def run_stdin(stdin: TextIO, stdout: TextIO) -> int:
    try:
        verdict = check_stream(stdin)
    except ProtocolError as exc:
        logger.debug(f"protocol error: {exc}")
        return ExitStatus.PROTOCOL_ERROR
    except InputFormatError as exc:
        logger.debug(f"malformed input: {exc}")
        return ExitStatus.INPUT_ERROR
    stdout.write(f"{verdict.value}\n")
    return ExitStatus.VERDICT


def run_custom(files: List[str], eps: Optional[float], stdout: TextIO,
               stderr: TextIO) -> int:
    if eps is None:
        eps = config.get_default_eps()
    try:
        status, message = check(*files, eps=eps)
    except (InputFormatError, ProtocolError) as exc:
        logger.debug(f"custom checker failed: {exc}")
        stderr.write(f"{exc}\n")
        return ExitStatus.PROTOCOL_ERROR
    stdout.write(format_result(status, message))
    return ExitStatus.VERDICT


def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None,
         stderr: Optional[TextIO] = None) -> int:
    """CLI entry point."""

    args = parse_args(argv)
    config.setup_logging(args.log_level)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    if args.files:
        return int(run_custom(args.files, args.eps, stdout, stderr))
    return int(run_stdin(stdin, stdout))


if __name__ == "__main__":
    sys.exit(main())
