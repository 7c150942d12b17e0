"""ApproveReview — a user endorses someone else's review.

Authors cannot approve their own review. The review becomes approved once
its approval count reaches the configured threshold.
"""

from protean.fields import Identifier
from protean.utils.mixins import handle

from campuscoffee.domain import campuscoffee
from campuscoffee.review.review import Review
from campuscoffee.review.service import get_review_service


@campuscoffee.command(part_of="Review")
class ApproveReview:
    review_id = Identifier(required=True)
    approver_id = Identifier(required=True)


@campuscoffee.command_handler(part_of=Review)
class ApproveReviewHandler:
    @handle(ApproveReview)
    def approve_review(self, command):
        service = get_review_service()
        review = service.get_by_id(command.review_id)

        approved = service.approve(review, command.approver_id)
        return str(approved.id)
