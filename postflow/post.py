"""
The Post: a piece of content under editorial control.
"""

import logging
from typing import Optional

from .exceptions import TransitionError
from .models import Outcome, PostStatus
from .state_machine import DraftState, PostState

logger = logging.getLogger(__name__)


class Post:
    """Context object that routes content operations to its active state.

    A post owns exactly one PostState at a time. It never looks at which
    state is active; every operation is forwarded unchanged and the state
    decides the outcome, including whether the post moves to a new stage.
    """

    def __init__(self):
        self._content = ""
        self._state: Optional[PostState] = None
        self._install(DraftState())

    @property
    def status(self) -> PostStatus:
        """Lifecycle stage of the active state."""
        return self._state.status

    def view_content(self) -> Outcome:
        return self._state.view_content(self)

    def add_content(self, text: str) -> Outcome:
        return self._state.add_content(self, text)

    def review_content(self, passed: bool) -> Outcome:
        return self._state.review_content(self, passed)

    def _append_content(self, text: str) -> None:
        self._content += text

    def _request_transition(self, requester: PostState, new_state: PostState) -> None:
        """Replace the active state. Only the active state may ask for this.

        Args:
            requester: The state asking for the transition
            new_state: A state instance that has never been active

        Raises:
            TransitionError: If the requester is not this post's active state
        """
        if requester is not self._state:
            raise TransitionError(
                f"{requester!r} is not the active state of this post and cannot change it"
            )
        previous = self._state
        self._install(new_state)
        logger.debug(f"Post transition: {previous.name} → {new_state.name}")

    def _install(self, new_state: PostState) -> None:
        if new_state._activated:
            raise TransitionError(f"{new_state!r} has already been active and cannot be reused")

        if self._state is not None:
            self._state._superseded = True

        new_state._activated = True
        self._state = new_state
        new_state.on_enter(self)

    def __repr__(self) -> str:
        return f"<Post status={self._state.name}>"
