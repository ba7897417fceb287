"""Unit tests for domain error to HTTP mapping."""

import pytest

from nyumba.domain.error import (
    AlreadyRespondedError,
    DuplicateMentorshipError,
    DuplicateRequestError,
    NotAuthorizedError,
    NotFoundError,
    RateLimitedError,
    TransientStoreError,
    ValidationError,
)
from nyumba.interface.error import to_http_exception, unauthorized


@pytest.mark.parametrize(
    "error, status_code, code",
    [
        (ValidationError("bad"), 400, "validation_error"),
        (NotAuthorizedError("no"), 403, "forbidden"),
        (NotFoundError("Mentorship", "1"), 404, "not_found"),
        (DuplicateRequestError(1, 2), 409, "duplicate_request"),
        (AlreadyRespondedError(1), 409, "already_responded"),
        (DuplicateMentorshipError(1, 2), 409, "duplicate_mentorship"),
        (TransientStoreError("down"), 503, "transient_store_error"),
    ],
)
def test_status_and_code(error, status_code, code):
    exc = to_http_exception(error)

    assert exc.status_code == status_code
    assert exc.detail["code"] == code
    assert exc.detail["message"] == str(error)


def test_rate_limited_sets_retry_after():
    exc = to_http_exception(RateLimitedError("send_message:1", 10, 60))

    assert exc.status_code == 429
    assert exc.headers == {"Retry-After": "60"}


def test_retry_after_uses_time_until_a_slot_frees():
    exc = to_http_exception(RateLimitedError("mentorship_request:1", 3, 3600, 120))

    assert exc.headers == {"Retry-After": "120"}


def test_unauthorized():
    exc = unauthorized()

    assert exc.status_code == 401
    assert exc.detail["code"] == "unauthenticated"
