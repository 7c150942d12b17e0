"""User aggregate — authors and approvers of reviews."""

from protean.fields import String

from campuscoffee.domain import campuscoffee


@campuscoffee.aggregate
class User:
    login_name = String(required=True, max_length=50)
    email_address = String(required=True, max_length=255)
    first_name = String(max_length=255)
    last_name = String(max_length=255)
