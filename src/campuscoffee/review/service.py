"""ReviewService — the review lifecycle and approval rules.

The service is stateless. It reads POS, User and Review records through
their repositories, checks the business rules against what is persisted,
and writes reviews back through the Review repository. Every precondition
is checked before anything is written, so a failed call leaves the store
untouched.

Rules enforced here:
- a review can only reference an existing POS
- an author writes at most one review per POS
- authors cannot approve their own review
- ``approved`` is true exactly when ``approval_count >= min_count``
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from campuscoffee.configuration import ApprovalConfiguration, get_approval_configuration
from campuscoffee.exceptions import NotFoundError
from campuscoffee.pos.pos import Pos
from campuscoffee.review.review import Review
from campuscoffee.user.user import User
from campuscoffee.utils.logging import get_logger

logger = get_logger(__name__)


class ReviewService:
    def __init__(self, reviews, users, pos, approval_configuration: ApprovalConfiguration):
        self._reviews = reviews
        self._users = users
        self._pos = pos
        self._approval_configuration = approval_configuration

    @property
    def min_count(self) -> int:
        return self._approval_configuration.min_count

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def get_by_id(self, review_id) -> Review:
        return self._fetch(self._reviews, Review, review_id)

    def filter(self, pos_id, approved: bool) -> list[Review]:
        """List the reviews of a POS that are (or are not yet) approved."""
        pos = self._fetch(self._pos, Pos, pos_id)
        return self._reviews.filter_by_approval(pos.id, approved)

    # -------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------
    def upsert(self, review: Review) -> Review:
        """Create a review or overwrite a persisted one.

        New reviews, and reviews moved to another POS or author, are rejected
        when the author already reviewed that POS. Approval count and flag are
        stored as given.
        """
        pos = self._fetch(self._pos, Pos, review.pos_id)

        stored = self._reviews.get_or_none(review.id)
        is_new = stored is None
        if self._reviews_elsewhere(stored, review, pos):
            logger.info(
                "Duplicate review rejected",
                pos_id=str(pos.id),
                author_id=str(review.author_id),
            )
            raise ValidationError({"review": ["Author has already reviewed this POS"]})

        now = datetime.now(UTC)
        if review.created_at is None:
            review.created_at = now
        review.updated_at = now

        persisted = self._reviews.add(review)
        logger.info(
            "Review created" if is_new else "Review updated",
            review_id=str(persisted.id),
            pos_id=str(persisted.pos_id),
            author_id=str(persisted.author_id),
        )
        return persisted

    def approve(self, review: Review, approver_id) -> Review:
        """Record an approval of ``review`` by the user ``approver_id``.

        Count and flag are taken from the persisted review, not from the
        copy passed in.
        """
        approver = self._fetch(self._users, User, approver_id)
        persisted = self._fetch(self._reviews, Review, review.id)

        persisted.record_approval(approver.id)
        self.update_approval_status(persisted)

        updated = self._reviews.add(persisted)
        logger.info(
            "Review approval recorded",
            review_id=str(updated.id),
            approver_id=str(approver.id),
            approval_count=updated.approval_count,
            approved=updated.approved,
        )
        return updated

    def update_approval_status(self, review: Review) -> Review:
        review.refresh_approval(self.min_count)
        return review

    def delete(self, review_id) -> None:
        review = self._fetch(self._reviews, Review, review_id)
        self._reviews.delete(review)
        logger.info("Review deleted", review_id=str(review_id))

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    def _reviews_elsewhere(self, stored, review, pos) -> list[Review]:
        """Other reviews by the same author on the POS this review points to."""
        if stored is not None and (
            str(stored.pos_id) == str(review.pos_id) and str(stored.author_id) == str(review.author_id)
        ):
            return []
        existing = self._reviews.filter_by_author(pos.id, review.author_id)
        return [other for other in existing if str(other.id) != str(review.id)]

    @staticmethod
    def _fetch(repository, entity_cls, identifier):
        try:
            return repository.get(identifier)
        except ObjectNotFoundError as exc:
            raise NotFoundError(entity_cls, identifier) from exc


def get_review_service() -> ReviewService:
    """Build a ReviewService over the active domain's repositories."""
    return ReviewService(
        reviews=current_domain.repository_for(Review),
        users=current_domain.repository_for(User),
        pos=current_domain.repository_for(Pos),
        approval_configuration=get_approval_configuration(),
    )
