"""
InReview state: waiting on an editorial verdict.
"""

from postflow.models import Operation, Outcome, PostStatus
from ..base import PostState


class InReviewState(PostState):
    """Content is frozen until a reviewer passes or fails it.

    A failed review sends the post back to a fresh Draft with its content
    kept, so the author can append to it.
    """

    status = PostStatus.IN_REVIEW

    def view_content(self, post) -> Outcome:
        return self._reject(Operation.VIEW_CONTENT, "Cannot view post yet.")

    def add_content(self, post, text: str) -> Outcome:
        return self._reject(Operation.ADD_CONTENT, "Cannot edit post unless in Draft state.")

    def review_content(self, post, passed: bool) -> Outcome:
        if passed:
            outcome = self._accept(
                Operation.REVIEW_CONTENT,
                "Review successful, changing to Published state...",
                transitioned_to=PostStatus.PUBLISHED,
            )
            from .published import PublishedState
            self._transition(post, PublishedState())
            return outcome

        outcome = self._accept(
            Operation.REVIEW_CONTENT,
            "Review unsuccessful, changing back to draft state...",
            transitioned_to=PostStatus.DRAFT,
        )
        from .draft import DraftState
        self._transition(post, DraftState())
        return outcome
