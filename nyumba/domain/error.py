"""Domain layer errors.

Every error carries a stable ``code`` so callers can branch on the kind
without parsing messages.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "domain_error"


class ValidationError(DomainError):
    """Malformed input (lengths, unknown values, unavailable targets)."""

    code = "validation_error"


class NotFoundError(DomainError):
    """Raised when a resource is missing or the caller may not see it.

    Both cases look the same, so existence is never disclosed to
    outsiders.
    """

    code = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when the caller's role or relationship forbids the action."""

    code = "forbidden"

    def __init__(self, message: str):
        super().__init__(message)


class DuplicateRequestError(DomainError):
    """A pending or accepted request already exists for the pair."""

    code = "duplicate_request"

    def __init__(self, student_id: int, alumni_id: int):
        self.student_id = student_id
        self.alumni_id = alumni_id
        super().__init__(
            "You already have a pending or accepted mentorship request with this alumni"
        )


class AlreadyRespondedError(DomainError):
    """The request left the pending state before this response landed."""

    code = "already_responded"

    def __init__(self, request_id: int):
        self.request_id = request_id
        super().__init__(f"Mentorship request {request_id} has already been responded to")


class DuplicateMentorshipError(DomainError):
    """Another active mentorship already exists for the pair."""

    code = "duplicate_mentorship"

    def __init__(self, student_id: int, alumni_id: int):
        self.student_id = student_id
        self.alumni_id = alumni_id
        super().__init__(
            f"An active mentorship already exists between {student_id} and {alumni_id}"
        )


class RateLimitedError(DomainError):
    """Raised when an actor exceeded an action's sliding-window limit.

    ``retry_after_seconds`` is the time until the oldest counted event
    leaves the window; it falls back to the full window when unknown.
    """

    code = "rate_limited"

    def __init__(
        self,
        key: str,
        limit: int,
        window_seconds: int,
        retry_after_seconds: int | None = None,
    ):
        self.key = key
        self.limit = limit
        self.window_seconds = window_seconds
        self.retry_after_seconds = (
            window_seconds if retry_after_seconds is None else retry_after_seconds
        )
        super().__init__(
            f"Rate limit exceeded for {key}: at most {limit} per {window_seconds}s"
        )


class TransientStoreError(DomainError):
    """The persistence layer failed; the whole operation may be retried."""

    code = "transient_store_error"
