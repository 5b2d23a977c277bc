"""
In‑memory record store.

The ``RecordStore`` holds the fixed, ordered sequence of user records
the service was started with and answers lookups against it.  The
sequence is copied into a tuple at construction and never changes
afterwards, so one store can be shared by every request without
locking.

Matching is case‑insensitive.  City lookups accept either a short
city code (``jkt``) or one of the full city names in ``CITY_ALIASES``
(``jakarta``).  Lookups that match nothing raise a ``RecordNotFound``
subclass from ``core.errors``.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..core.errors import UserByCityNotFound, UserNotFound
from ..schemas.user import UserRecord


logger = logging.getLogger(__name__)

# Full city name -> short city code, both lower case.
CITY_ALIASES: Dict[str, str] = {
    "madiun": "mdn",
    "jakarta": "jkt",
}

DEFAULT_USERS: Tuple[UserRecord, ...] = (
    UserRecord(first_name="Hasbi", last_name="Qohar", city="JKT"),
    UserRecord(first_name="Hadi", last_name="Mustofa", city="MDN"),
    UserRecord(first_name="Haqi", last_name="Muttaqin", city="MDN"),
)


def normalize(value: str) -> str:
    """Return the form used for case‑insensitive comparison."""
    return value.lower()


class RecordStore:
    """Read‑only lookups over a fixed sequence of ``UserRecord``."""

    def __init__(
        self,
        records: Iterable[UserRecord] = DEFAULT_USERS,
        aliases: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._records: Tuple[UserRecord, ...] = tuple(records)
        source = CITY_ALIASES if aliases is None else aliases
        self._aliases: Dict[str, str] = {normalize(k): normalize(v) for k, v in source.items()}

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[UserRecord]:
        return iter(self._records)

    def list_all(self) -> List[UserRecord]:
        """Return every record in insertion order."""
        return list(self._records)

    def find_by_name(self, name: str) -> Tuple[int, UserRecord]:
        """Return ``(index, record)`` for the first record named ``name``.

        A record matches when its first name or its last name equals
        ``name`` ignoring case.  When several records match, the one
        inserted first wins.

        Raises
        ------
        UserNotFound
            If no record matches.
        """
        wanted = normalize(name)
        for index, record in enumerate(self._records):
            if normalize(record.first_name) == wanted or normalize(record.last_name) == wanted:
                return index, record
        logger.debug("No user named %r", name)
        raise UserNotFound(name)

    def find_by_city(self, city: str) -> List[UserRecord]:
        """Return the records living in ``city``, in insertion order.

        ``city`` may be a city code or a known alias.  For each record
        the code is compared directly first; the alias target is only
        checked when that comparison fails.

        Raises
        ------
        UserByCityNotFound
            If no record matches either way.
        """
        wanted = normalize(city)
        alias_target = self._aliases.get(wanted)
        matches: List[UserRecord] = []
        for record in self._records:
            code = normalize(record.city)
            if code == wanted:
                matches.append(record)
            elif alias_target is not None and code == alias_target:
                matches.append(record)
        if not matches:
            logger.debug("No users in city %r", city)
            raise UserByCityNotFound(city)
        return matches
