"""
Class-based state machine for the post lifecycle.

Each lifecycle stage is a PostState subclass that resolves the content
operations for that stage and installs its successor on the post when an
operation moves the post forward.
"""

from .base import PostState
from .states import STATE_CLASSES, DraftState, InReviewState, PublishedState

__all__ = ["PostState", "DraftState", "InReviewState", "PublishedState", "STATE_CLASSES"]
