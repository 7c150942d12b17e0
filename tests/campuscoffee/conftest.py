from datetime import UTC, datetime

import pytest
from campuscoffee.configuration import (
    ApprovalConfiguration,
    reset_approval_configuration,
    set_approval_configuration,
)


@pytest.fixture(scope="session")
def _campuscoffee_domain():
    """Initialize the campuscoffee domain once per session."""
    from campuscoffee.domain import campuscoffee

    campuscoffee.init()
    return campuscoffee


@pytest.fixture(autouse=True)
def run_around_tests(_campuscoffee_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _campuscoffee_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture(autouse=True)
def approval_configuration():
    """Run every test with a threshold of three approvals."""
    configuration = ApprovalConfiguration(min_count=3)
    set_approval_configuration(configuration)
    yield configuration
    reset_approval_configuration()


@pytest.fixture()
def pos_fixtures():
    from campuscoffee.pos.pos import Pos

    return [
        Pos(name="Schmelzpunkt", description="Great waffles"),
        Pos(name="Bäcker Görtz", description="Bakery with coffee to go"),
        Pos(name="Café Botanik", description="Coffee in the botanical garden"),
    ]


@pytest.fixture()
def user_fixtures():
    from campuscoffee.user.user import User

    return [
        User(login_name="jane_doe", email_address="jane.doe@uni-heidelberg.de", first_name="Jane", last_name="Doe"),
        User(login_name="maxmustermann", email_address="max.mustermann@uni-heidelberg.de", first_name="Max", last_name="Mustermann"),
        User(login_name="student2023", email_address="student2023@stud.uni-heidelberg.de", first_name="Student", last_name="Example"),
    ]


@pytest.fixture()
def review_fixtures(pos_fixtures, user_fixtures):
    """Unpersisted reviews; the last user never authors one."""
    from campuscoffee.review.review import Review

    now = datetime.now(UTC)
    reviews = [
        Review(
            pos_id=pos_fixtures[0].id,
            author_id=user_fixtures[0].id,
            review="Great waffles, the coffee is fine too.",
            approval_count=0,
            approved=False,
            created_at=now,
            updated_at=now,
        ),
        Review(
            pos_id=pos_fixtures[1].id,
            author_id=user_fixtures[1].id,
            review="Good croissants, a bit crowded at noon.",
            approval_count=0,
            approved=False,
            created_at=now,
            updated_at=now,
        ),
    ]
    return reviews
