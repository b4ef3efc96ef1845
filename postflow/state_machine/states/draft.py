"""
Draft state: the only stage in which a post can be edited.
"""

from postflow.models import Operation, Outcome, PostStatus
from ..base import PostState


class DraftState(PostState):
    """Initial state. Accepts content, then hands the post over for review."""

    status = PostStatus.DRAFT

    def view_content(self, post) -> Outcome:
        return self._reject(Operation.VIEW_CONTENT, "Cannot view post yet.")

    def add_content(self, post, text: str) -> Outcome:
        post._append_content(text)
        outcome = self._accept(
            Operation.ADD_CONTENT,
            "Added content, changing to InReview state...",
            transitioned_to=PostStatus.IN_REVIEW,
        )

        from .review import InReviewState
        self._transition(post, InReviewState())
        return outcome

    def review_content(self, post, passed: bool) -> Outcome:
        return self._reject(Operation.REVIEW_CONTENT, "Cannot review post yet.")
