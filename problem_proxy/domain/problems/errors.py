"""
Domain-specific errors for the problems bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class ProblemDomainError(Exception):
    """Base error for all problems domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ProblemNotFoundError(ProblemDomainError):
    """Raised when the upstream holds no problem record for an ID."""

    def __init__(self, problem_id: str) -> None:
        super().__init__(f"Problem with ID {problem_id} not found")
        self.problem_id = problem_id


class ProblemOperationError(ProblemDomainError):
    """Raised when a problem operation fails on its upstream call.

    The message is safe to return to clients; the underlying cause
    is logged where the failure is caught.
    """


class UpstreamRequestError(ProblemDomainError):
    """Raised by a Table API adapter when an outbound call fails.

    Covers transport errors, non-2xx statuses and undecodable bodies.
    """

    def __init__(
        self,
        method: str,
        url: str,
        reason: str,
        status_code: int | None = None,
    ) -> None:
        status = f" ({status_code})" if status_code is not None else ""
        super().__init__(f"{method} {url} failed{status}: {reason}")
        self.method = method
        self.url = url
        self.reason = reason
        self.status_code = status_code
