"""Domain exceptions for the CampusCoffee context.

Business-rule violations are raised as protean's ``ValidationError``.
Missing POS, User or Review records surface as ``NotFoundError``, which
names the kind of entity and the identifier that was looked up.
"""

from protean.exceptions import ObjectNotFoundError


class NotFoundError(ObjectNotFoundError):
    """A referenced POS, User or Review does not exist."""

    def __init__(self, entity_cls, identifier):
        self.entity_type = entity_cls.__name__
        self.identifier = identifier
        super().__init__({"entity": [f"{self.entity_type} with id {identifier} does not exist"]})

    def __str__(self) -> str:
        return f"{self.entity_type} with id {self.identifier} does not exist"
