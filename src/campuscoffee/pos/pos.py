"""Pos aggregate — a point of sale that reviews are attached to.

POS records are maintained by the POS management side of the application;
this context only needs to confirm that a referenced POS exists.
"""

from protean.fields import String, Text

from campuscoffee.domain import campuscoffee


@campuscoffee.aggregate
class Pos:
    """A café, bakery or vending spot on campus."""

    name = String(required=True, max_length=255)
    description = Text()
