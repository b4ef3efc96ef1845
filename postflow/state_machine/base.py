"""
Base class for post lifecycle states.
"""

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Optional, TYPE_CHECKING

from postflow.models import INVALID_OPERATION_FOR_STATE, Operation, Outcome, PostStatus

if TYPE_CHECKING:
    from postflow.post import Post

logger = logging.getLogger(__name__)


class PostState(ABC):
    """Base class for all post lifecycle states.

    Each state decides how the three content operations resolve while a post
    is in that stage. The owning Post is passed in on every call rather than
    stored, so a state never holds a reference back to its post. All durable
    data lives on the Post.

    A state instance is active for exactly one post, once. It is discarded
    when superseded and never re-activated.
    """

    status: ClassVar[PostStatus]

    def __init__(self):
        self._activated = False
        self._superseded = False

    @property
    def name(self) -> str:
        """State name for logging and notices."""
        return self.status.value

    @property
    def is_active(self) -> bool:
        return self._activated and not self._superseded

    def on_enter(self, post: 'Post') -> None:
        """Called by the post once this state has been installed."""
        logger.info(f"[{self.name} State:] Welcome!")

    @abstractmethod
    def view_content(self, post: 'Post') -> Outcome:
        """Produce the post's content for display.

        Args:
            post: The post this state is active for

        Returns:
            Outcome carrying the content when viewing is permitted
        """
        pass

    @abstractmethod
    def add_content(self, post: 'Post', text: str) -> Outcome:
        """Append editorial text to the post.

        Args:
            post: The post this state is active for
            text: Text to append

        Returns:
            Outcome describing whether the text was appended
        """
        pass

    @abstractmethod
    def review_content(self, post: 'Post', passed: bool) -> Outcome:
        """Record an editorial verdict on the post.

        Args:
            post: The post this state is active for
            passed: Whether the review passed

        Returns:
            Outcome describing the verdict's effect
        """
        pass

    def _transition(self, post: 'Post', new_state: 'PostState') -> None:
        post._request_transition(self, new_state)

    def _accept(
        self,
        operation: Operation,
        message: str,
        transitioned_to: Optional[PostStatus] = None,
        content: Optional[str] = None,
    ) -> Outcome:
        outcome = Outcome(
            state=self.status,
            operation=operation,
            accepted=True,
            message=message,
            transitioned_to=transitioned_to,
            content=content,
        )
        logger.info(outcome.notice)
        return outcome

    def _reject(self, operation: Operation, reason: str) -> Outcome:
        outcome = Outcome(
            state=self.status,
            operation=operation,
            accepted=False,
            message=reason,
            error=INVALID_OPERATION_FOR_STATE,
        )
        logger.warning(f"{outcome.notice} ({operation.value} rejected)")
        return outcome

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} active={self.is_active}>"
