"""
Published state: terminal, read-only.
"""

from postflow.models import Operation, Outcome, PostStatus
from ..base import PostState


class PublishedState(PostState):
    """Content can be viewed but no longer edited or reviewed."""

    status = PostStatus.PUBLISHED

    def view_content(self, post) -> Outcome:
        content = post._content
        return self._accept(Operation.VIEW_CONTENT, content, content=content)

    def add_content(self, post, text: str) -> Outcome:
        return self._reject(Operation.ADD_CONTENT, "Cannot edit post unless in Draft state.")

    def review_content(self, post, passed: bool) -> Outcome:
        return self._reject(Operation.REVIEW_CONTENT, "Cannot review post after publishing.")
