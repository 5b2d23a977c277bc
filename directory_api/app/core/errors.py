"""
Lookup failures raised by the record store.

Every failure is a ``RecordNotFound`` tagged with the ``kind`` of
lookup that missed and the ``subject`` the caller asked for.  The
display text is produced by ``render`` so that tests can compare
kind and subject without parsing messages.  The HTTP layer turns any
``RecordNotFound`` into a 404 carrying the rendered text.
"""


class RecordNotFound(Exception):
    """Base class for lookups that matched no record."""

    kind: str = "record"
    template: str = "{subject} not found"

    def __init__(self, subject: str) -> None:
        self.subject = subject
        super().__init__(self.render())

    def render(self) -> str:
        return self.template.format(subject=self.subject)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordNotFound):
            return NotImplemented
        return (self.kind, self.subject) == (other.kind, other.subject)

    def __hash__(self) -> int:
        return hash((self.kind, self.subject))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.subject!r})"


class UserNotFound(RecordNotFound):
    """No record's first or last name matches the requested name."""

    kind = "user"
    template = "User {subject} not found"


class UserByCityNotFound(RecordNotFound):
    """No record belongs to the requested city code or alias."""

    kind = "city"
    template = "User from {subject} city not found"
