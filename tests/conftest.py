import io

import pytest

from checker import cli


@pytest.fixture
def run_checker():
    """Run the CLI in-process, return (exit status, stdout, stderr)."""

    def run(stdin_text: str = "", argv=None):
        stdout, stderr = io.StringIO(), io.StringIO()
        code = cli.main(argv or [],
                        stdin=io.StringIO(stdin_text),
                        stdout=stdout,
                        stderr=stderr)
        return code, stdout.getvalue(), stderr.getvalue()

    return run

