"""
Individual lifecycle state implementations.
"""

from typing import Dict, Type

from postflow.models import PostStatus
from ..base import PostState
from .draft import DraftState
from .review import InReviewState
from .published import PublishedState

STATE_CLASSES: Dict[PostStatus, Type[PostState]] = {
    PostStatus.DRAFT: DraftState,
    PostStatus.IN_REVIEW: InReviewState,
    PostStatus.PUBLISHED: PublishedState,
}

__all__ = [
    "DraftState",
    "InReviewState",
    "PublishedState",
    "STATE_CLASSES",
]
