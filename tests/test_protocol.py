import io

import pytest
from pydantic import ValidationError

from checker.constant import Verdict
from checker.exception import (
    CheckerError,
    InputFormatError,
    InvalidToleranceError,
    ProtocolError,
)
from checker.protocol import check_stream, parse_tokens, read_input
from tests.stream_builder import make_stream


def test_read_input_builds_sequences():
    data = read_input(io.StringIO("2 3 1\n1 2\n3.5 -4 5e2\n0.25\n"))
    assert data.candidate == (1.0, 2.0)
    assert data.reference == (3.5, -4.0, 500.0)
    assert data.eps == 0.25


def test_input_is_immutable():
    data = parse_tokens("1 1 1 1.0 1.0 0".split())
    with pytest.raises(ValidationError):
        data.eps = 1.0


def test_tokens_may_span_any_whitespace():
    text = "1\t1\n\n1  7.5\n\n 7.5\t0\n"
    assert check_stream(io.StringIO(text)) == Verdict.OK


def test_check_stream_within_tolerance():
    stream = io.StringIO(make_stream([1.0, 2.0], [1.0, 2.0], (0.001, )))
    assert check_stream(stream) == Verdict.OK


def test_check_stream_out_of_tolerance():
    stream = io.StringIO(make_stream([1.0, 2.1], [1.0, 2.0], (0.05, )))
    assert check_stream(stream) == Verdict.WA


def test_boundary_tokens_are_accepted():
    assert check_stream(io.StringIO("1 1 1\n1.05\n1.00\n0.05\n")) == Verdict.OK


def test_length_mismatch_is_a_verdict():
    stream = io.StringIO(make_stream([1.0], [1.0, 2.0], (1e18, )))
    assert check_stream(stream) == Verdict.WA


def test_empty_sequences():
    assert check_stream(io.StringIO("0 0 1\n0.5\n")) == Verdict.OK


@pytest.mark.parametrize("params", [(), (0.1, 0.2)])
def test_param_count_must_be_one(params):
    stream = io.StringIO(make_stream([1.0], [1.0], params))
    with pytest.raises(ProtocolError) as exc_info:
        check_stream(stream)
    assert exc_info.value.param_count == len(params)
    assert isinstance(exc_info.value, CheckerError)


def test_protocol_error_precedes_malformed_body():
    with pytest.raises(ProtocolError):
        parse_tokens("1 1 2 garbage".split())


def test_negative_tolerance_is_a_protocol_error():
    with pytest.raises(InvalidToleranceError) as exc_info:
        parse_tokens("1 1 1 1.0 1.0 -0.5".split())
    assert exc_info.value.eps == -0.5
    assert isinstance(exc_info.value, ProtocolError)


def test_nan_tolerance_is_a_protocol_error():
    with pytest.raises(InvalidToleranceError):
        parse_tokens("0 0 1 nan".split())


def test_trailing_tokens_are_ignored():
    assert check_stream(io.StringIO("1 1 1 3 3 0 extra 42")) == Verdict.OK


@pytest.mark.parametrize("text", [
    "",
    "1 1",
    "1 1 1 1.0",
    "1 1 1 1.0 1.0",
    "x 1 1 1.0 1.0 0",
    "1.5 1 1 1.0 1.0 0",
    "1 1 1 one 1.0 0",
    "-1 0 1 0",
])
def test_malformed_input(text):
    with pytest.raises(InputFormatError):
        parse_tokens(text.split())


def test_non_finite_values_parse():
    data = parse_tokens("2 2 1 inf nan inf nan 1".split())
    assert data.candidate[0] == float("inf")
    assert check_stream(io.StringIO("2 2 1 inf nan inf nan 1")) == Verdict.WA
    assert check_stream(io.StringIO("1 1 1 -inf -inf 0")) == Verdict.OK
