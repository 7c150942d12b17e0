"""Repository for the Review aggregate.

The base repository provides ``get`` (raises ObjectNotFoundError) and
``add`` (insert or overwrite). The queries below back the uniqueness check
and the approved/unapproved listing of a POS.
"""

from protean.exceptions import ObjectNotFoundError

from campuscoffee.domain import campuscoffee
from campuscoffee.review.review import Review


@campuscoffee.repository(part_of=Review)
class ReviewRepository:
    def get_or_none(self, identifier) -> Review | None:
        """Return the stored review, or None if it has not been persisted."""
        try:
            return self.get(identifier)
        except ObjectNotFoundError:
            return None

    def filter_by_approval(self, pos_id, approved: bool) -> list[Review]:
        """Reviews of a POS with the given approval flag, in store order."""
        return self._dao.query.filter(pos_id=str(pos_id), approved=approved).all().items

    def filter_by_author(self, pos_id, author_id) -> list[Review]:
        """Reviews written by one author for one POS."""
        return self._dao.query.filter(pos_id=str(pos_id), author_id=str(author_id)).all().items

    def delete(self, review: Review) -> None:
        self._dao.delete(review)
