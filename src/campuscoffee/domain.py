"""CampusCoffee bounded context — POS reviews and their approval.

Users review points-of-sale, other users approve those reviews, and a review
counts as approved once it has collected enough approvals. POS and User are
owned elsewhere; this context only reads them through their repositories.
"""

from protean.domain import Domain

from campuscoffee.utils.logging import configure_logging

configure_logging()

# Domain Composition Root
campuscoffee = Domain(name="campuscoffee")
