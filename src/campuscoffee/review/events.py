"""Domain events for the Review aggregate.

All events are versioned, immutable facts representing state changes.
"""

from protean.fields import DateTime, Identifier, Integer, Text

from campuscoffee.domain import campuscoffee


@campuscoffee.event(part_of="Review")
class ReviewSubmitted:
    """A user wrote a review of a POS."""

    __version__ = 1

    review_id = Identifier(required=True)
    pos_id = Identifier(required=True)
    author_id = Identifier(required=True)
    review = Text(required=True)
    submitted_at = DateTime(required=True)


@campuscoffee.event(part_of="Review")
class ReviewEdited:
    """The author changed the text of their review."""

    __version__ = 1

    review_id = Identifier(required=True)
    review = Text(required=True)
    edited_at = DateTime(required=True)


@campuscoffee.event(part_of="Review")
class ReviewApprovalRecorded:
    """Another user approved the review."""

    __version__ = 1

    review_id = Identifier(required=True)
    approver_id = Identifier(required=True)
    approval_count = Integer(required=True)
    recorded_at = DateTime(required=True)


@campuscoffee.event(part_of="Review")
class ReviewApproved:
    """The review reached the approval threshold."""

    __version__ = 1

    review_id = Identifier(required=True)
    pos_id = Identifier(required=True)
    author_id = Identifier(required=True)
    approval_count = Integer(required=True)
    approved_at = DateTime(required=True)
