"""EditReview — replace the text of an existing review.

Only the original author can edit. Approval count and flag are kept.
"""

from protean.exceptions import ValidationError
from protean.fields import Identifier, Text
from protean.utils.mixins import handle

from campuscoffee.domain import campuscoffee
from campuscoffee.review.review import Review
from campuscoffee.review.service import get_review_service


@campuscoffee.command(part_of="Review")
class EditReview:
    review_id = Identifier(required=True)
    author_id = Identifier(required=True)  # Must match original author
    review = Text(required=True)


@campuscoffee.command_handler(part_of=Review)
class EditReviewHandler:
    @handle(EditReview)
    def edit_review(self, command):
        service = get_review_service()
        review = service.get_by_id(command.review_id)

        # Verify ownership
        if str(review.author_id) != str(command.author_id):
            raise ValidationError({"author_id": ["Only the review author can edit this review"]})

        review.edit(command.review)

        persisted = service.upsert(review)
        return str(persisted.id)
