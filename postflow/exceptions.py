"""
Custom exceptions for the post workflow.
"""


class PostflowError(Exception):
    """Base exception for post workflow errors."""

    pass


class InvalidOperationForState(PostflowError):
    """Raised when an operation is not permitted in the post's current state.

    Post operations never raise this themselves; rejections are reported on the
    returned Outcome. Callers that prefer exceptions opt in with
    ``Outcome.raise_for_rejection()``.
    """

    def __init__(self, state, operation, reason="Operation not permitted"):
        self.state = state
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation.value} rejected in {state.value} state: {reason}")


class TransitionError(PostflowError):
    """Raised when the internal transition plumbing is misused."""

    pass
