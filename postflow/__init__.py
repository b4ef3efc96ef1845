"""
A post publishing workflow built on the State pattern.

A Post moves through Draft, InReview and Published. Each stage is a state
object that decides how viewing, editing and reviewing resolve, so the Post
itself never branches on which stage it is in.
"""

from .exceptions import InvalidOperationForState, PostflowError, TransitionError
from .models import Operation, Outcome, PostStatus
from .post import Post
from .state_machine import DraftState, InReviewState, PostState, PublishedState

__version__ = "0.1.0"
__author__ = "postflow Contributors"
__license__ = "MIT"

__all__ = [
    "Post",
    "PostState",
    "DraftState",
    "InReviewState",
    "PublishedState",
    "PostStatus",
    "Operation",
    "Outcome",
    "PostflowError",
    "InvalidOperationForState",
    "TransitionError",
]
