"""Shared BDD fixtures and step definitions for CampusCoffee reviews."""

from uuid import uuid4

import pytest
from campuscoffee.configuration import ApprovalConfiguration, set_approval_configuration
from campuscoffee.pos.pos import Pos
from campuscoffee.review.review import Review
from campuscoffee.user.user import User
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def make_user():
    """Factory persisting a user with a unique login name."""
    return _add_user


def _add_user():
    login_name = f"user-{uuid4().hex[:8]}"
    return current_domain.repository_for(User).add(
        User(login_name=login_name, email_address=f"{login_name}@uni-heidelberg.de")
    )


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("the approval threshold is {min_count:d}"))
def approval_threshold(min_count):
    set_approval_configuration(ApprovalConfiguration(min_count=min_count))


@given(parsers.cfparse("a review with {approval_count:d} approvals"), target_fixture="review")
def review_with_approvals(approval_count):
    pos = current_domain.repository_for(Pos).add(Pos(name="Schmelzpunkt"))
    author = _add_user()

    review = Review.create(pos_id=pos.id, author_id=author.id, review="Great waffles, decent coffee.")
    review.approval_count = approval_count
    return current_domain.repository_for(Review).add(review)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the review has {approval_count:d} approvals"))
def review_has_approvals(review, approval_count):
    persisted = current_domain.repository_for(Review).get(review.id)
    assert persisted.approval_count == approval_count


@then("the review is approved")
def review_is_approved(review):
    assert current_domain.repository_for(Review).get(review.id).approved is True


@then("the review is not approved")
def review_is_not_approved(review):
    assert current_domain.repository_for(Review).get(review.id).approved is False


@then(parsers.cfparse('the approval fails with "{message}"'))
def approval_fails(error, message):
    assert error["exc"] is not None
    assert message in str(error["exc"])
