"""
Core data models for the post workflow.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InvalidOperationForState

INVALID_OPERATION_FOR_STATE = "InvalidOperationForState"


class PostStatus(Enum):
    """Enumeration of the lifecycle stages a post can be in."""

    DRAFT = "Draft"
    IN_REVIEW = "InReview"
    PUBLISHED = "Published"


class Operation(Enum):
    """Enumeration of the content operations a post exposes."""

    VIEW_CONTENT = "view_content"
    ADD_CONTENT = "add_content"
    REVIEW_CONTENT = "review_content"


class Outcome(BaseModel):
    """Result of a content operation.

    Every call on a Post returns one of these, whether the active state
    accepted it or not. Rejections carry ``error`` set to
    ``"InvalidOperationForState"`` and leave the post untouched.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "state": "InReview",
                "operation": "review_content",
                "accepted": True,
                "message": "Review successful, changing to Published state...",
                "transitioned_to": "Published",
            }
        },
    )

    state: PostStatus = Field(
        ...,
        description="Lifecycle stage whose handler processed the operation"
    )

    operation: Operation = Field(
        ...,
        description="Operation that was invoked"
    )

    accepted: bool = Field(
        ...,
        description="Whether the handler accepted the operation"
    )

    message: str = Field(
        ...,
        description="Human-readable description of what happened"
    )

    transitioned_to: Optional[PostStatus] = Field(
        None,
        description="Lifecycle stage the post moved to, if the operation caused a transition"
    )

    content: Optional[str] = Field(
        None,
        description="Post content, present only when viewing succeeded"
    )

    error: Optional[str] = Field(
        None,
        description="Error kind when the operation was rejected"
    )

    @property
    def rejected(self) -> bool:
        return not self.accepted

    @property
    def notice(self) -> str:
        """Console form of the outcome, prefixed with the handling state."""
        return f"[{self.state.value} State:] {self.message}"

    def raise_for_rejection(self) -> "Outcome":
        """Raise InvalidOperationForState if the operation was rejected.

        Returns:
            This outcome, so calls can be chained when it was accepted
        """
        if self.rejected:
            raise InvalidOperationForState(self.state, self.operation, self.message)
        return self

    def model_dump_json(self, **kwargs):
        """Override to drop unset optional fields by default."""
        kwargs.setdefault('exclude_none', True)
        return super().model_dump_json(**kwargs)
