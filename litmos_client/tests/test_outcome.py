"""
Tests for status code classification.

The classification table is exhaustive, so besides the documented codes the
tests sweep every status from 100 to 599 and check nothing falls through.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from litmos_client.errors import ApiError, NotFound, RateLimited, ResponseError
from litmos_client.outcome import (
    Failure,
    FailureKind,
    Success,
    classify,
    raise_for_outcome,
)


class TestSuccess:
    @pytest.mark.parametrize("status", [200, 201])
    def test_body_is_kept(self, status):
        outcome = classify(status, '{"Id": "1"}')
        assert outcome == Success(status_code=status, body='{"Id": "1"}')
        assert outcome.is_empty is False

    @pytest.mark.parametrize("status", [200, 201])
    @pytest.mark.parametrize("body", [None, "", "   ", "\n"])
    def test_empty_or_blank_body(self, status, body):
        outcome = classify(status, body)
        assert isinstance(outcome, Success)
        assert outcome.is_empty is True


class TestFailure:
    def test_404_is_not_found(self):
        assert classify(404, "missing") == Failure(FailureKind.NOT_FOUND, 404, "missing")

    def test_503_is_rate_limited(self):
        assert classify(503, "slow down").kind is FailureKind.RATE_LIMITED

    @pytest.mark.parametrize("status", [400, 401, 403, 409, 429, 500, 502, 504, 204, 302])
    def test_everything_else_is_api_error(self, status):
        assert classify(status, "").kind is FailureKind.API_ERROR

    def test_table_is_exhaustive(self):
        for status in range(100, 600):
            outcome = classify(status, "body")
            if status in (200, 201):
                assert isinstance(outcome, Success)
            elif status == 404:
                assert outcome.kind is FailureKind.NOT_FOUND
            elif status == 503:
                assert outcome.kind is FailureKind.RATE_LIMITED
            else:
                assert outcome.kind is FailureKind.API_ERROR, status


class TestToException:
    @pytest.mark.parametrize(
        "status, error_cls",
        [(404, NotFound), (503, RateLimited), (400, ApiError), (500, ApiError)],
    )
    def test_failure_maps_to_typed_error(self, status, error_cls):
        exc = classify(status, "raw body").to_exception()
        assert type(exc) is error_cls
        assert isinstance(exc, ResponseError)
        assert exc.status_code == status
        assert exc.body == "raw body"
        assert str(status) in str(exc)

    def test_raise_for_outcome_passes_success_through(self):
        success = classify(200, "{}")
        assert raise_for_outcome(success) is success

    def test_raise_for_outcome_raises_failure(self):
        with pytest.raises(RateLimited):
            raise_for_outcome(classify(503, ""))
