"""SubmitReview — write a new review of a POS.

One review per author per POS; the check lives in ReviewService.upsert.
"""

from protean.fields import Identifier, Text
from protean.utils.mixins import handle

from campuscoffee.domain import campuscoffee
from campuscoffee.review.review import Review
from campuscoffee.review.service import get_review_service


@campuscoffee.command(part_of="Review")
class SubmitReview:
    pos_id = Identifier(required=True)
    author_id = Identifier(required=True)
    review = Text(required=True)


@campuscoffee.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        review = Review.create(
            pos_id=command.pos_id,
            author_id=command.author_id,
            review=command.review,
        )
        persisted = get_review_service().upsert(review)
        return str(persisted.id)
