"""Review aggregate — one user's assessment of one POS.

A review collects approvals from other users. Once ``approval_count``
reaches the configured threshold the review is approved; later approvals
keep counting and the review stays approved.

    submitted (count 0) → approval recorded (count n) → approved (count ≥ min_count)
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer, Text

from campuscoffee.domain import campuscoffee
from campuscoffee.review.events import (
    ReviewApprovalRecorded,
    ReviewApproved,
    ReviewEdited,
    ReviewSubmitted,
)


@campuscoffee.aggregate
class Review:
    """A user's written review of a POS."""

    pos_id = Identifier(required=True)
    author_id = Identifier(required=True)
    review = Text(required=True)

    approval_count = Integer(default=0, min_value=0)
    approved = Boolean(default=False)

    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def review_text_must_not_be_blank(self):
        if self.review is not None and len(self.review.strip()) == 0:
            raise ValidationError({"review": ["Review text cannot be empty"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, pos_id, author_id, review):
        """Write a new, not yet approved review."""
        now = datetime.now(UTC)

        instance = cls(
            pos_id=pos_id,
            author_id=author_id,
            review=review,
            approval_count=0,
            approved=False,
            created_at=now,
            updated_at=now,
        )

        instance.raise_(
            ReviewSubmitted(
                review_id=str(instance.id),
                pos_id=str(pos_id),
                author_id=str(author_id),
                review=review,
                submitted_at=now,
            )
        )

        return instance

    # -------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------
    def edit(self, review):
        now = datetime.now(UTC)

        with atomic_change(self):
            self.review = review
            self.updated_at = now

        self.raise_(
            ReviewEdited(
                review_id=str(self.id),
                review=review,
                edited_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Approval
    # -------------------------------------------------------------------
    def record_approval(self, approver_id):
        """Count one approval by ``approver_id``.

        Authors cannot approve their own review. Repeat approvals by the
        same user are counted again.
        """
        if str(approver_id) == str(self.author_id):
            raise ValidationError({"approval": ["Authors cannot approve their own review"]})

        now = datetime.now(UTC)

        with atomic_change(self):
            self.approval_count = (self.approval_count or 0) + 1
            self.updated_at = now

        self.raise_(
            ReviewApprovalRecorded(
                review_id=str(self.id),
                approver_id=str(approver_id),
                approval_count=self.approval_count,
                recorded_at=now,
            )
        )

    def refresh_approval(self, min_count):
        """Derive ``approved`` from ``approval_count`` and the threshold.

        Raises ReviewApproved only when the review crosses the threshold.
        """
        was_approved = bool(self.approved)
        self.approved = (self.approval_count or 0) >= min_count

        if self.approved and not was_approved:
            self.raise_(
                ReviewApproved(
                    review_id=str(self.id),
                    pos_id=str(self.pos_id),
                    author_id=str(self.author_id),
                    approval_count=self.approval_count,
                    approved_at=datetime.now(UTC),
                )
            )
