"""
Tests for the in-memory record store
"""

import pytest
from pydantic import ValidationError

from directory_api.app.core.errors import UserByCityNotFound, UserNotFound
from directory_api.app.schemas.user import UserRecord
from directory_api.app.services.record_store import CITY_ALIASES, DEFAULT_USERS, RecordStore


class TestFindByName:
    """Test lookups by first or last name"""

    def test_every_first_and_last_name_finds_its_record(self, store, users):
        for index, user in enumerate(users):
            assert store.find_by_name(user.first_name) == (index, user)
            assert store.find_by_name(user.last_name) == (index, user)

    def test_case_insensitive(self, store):
        assert store.find_by_name("HASBI") == store.find_by_name("hasbi")
        assert store.find_by_name("mUsToFa")[1].first_name == "Hadi"

    def test_first_inserted_match_wins(self):
        first = UserRecord(first_name="Ali", last_name="Rahman", city="JKT")
        second = UserRecord(first_name="Budi", last_name="Ali", city="MDN")
        store = RecordStore([first, second])
        assert store.find_by_name("ali") == (0, first)

    def test_no_partial_matches(self, store):
        with pytest.raises(UserNotFound):
            store.find_by_name("Has")

    def test_not_found(self, store):
        with pytest.raises(UserNotFound) as excinfo:
            store.find_by_name("nonexistent")
        assert excinfo.value == UserNotFound("nonexistent")
        assert excinfo.value.subject == "nonexistent"
        assert str(excinfo.value) == "User nonexistent not found"


class TestFindByCity:
    """Test city code and alias filtering"""

    def test_direct_code(self, store, users):
        assert store.find_by_city("jkt") == [users[0]]
        assert store.find_by_city("JKT") == [users[0]]

    def test_keeps_insertion_order(self, store, users):
        assert store.find_by_city("mdn") == [users[1], users[2]]

    def test_jakarta_alias(self, store):
        assert store.find_by_city("jakarta") == store.find_by_city("jkt")

    def test_madiun_alias(self, store, users):
        assert store.find_by_city("madiun") == [users[1], users[2]]

    def test_alias_ignores_case(self, store, users):
        assert store.find_by_city("Jakarta") == [users[0]]

    def test_unknown_city(self, store):
        with pytest.raises(UserByCityNotFound) as excinfo:
            store.find_by_city("atlantis")
        assert excinfo.value == UserByCityNotFound("atlantis")
        assert str(excinfo.value) == "User from atlantis city not found"

    def test_alias_without_matching_records(self):
        store = RecordStore([UserRecord(first_name="Hasbi", last_name="Qohar", city="JKT")])
        with pytest.raises(UserByCityNotFound):
            store.find_by_city("madiun")

    def test_direct_and_alias_matches_mix_in_order(self):
        # A record whose code equals the alias itself matches directly,
        # records with the alias target match through the alias.
        records = [
            UserRecord(first_name="A", last_name="One", city="mdn"),
            UserRecord(first_name="B", last_name="Two", city="Madiun"),
            UserRecord(first_name="C", last_name="Three", city="JKT"),
            UserRecord(first_name="D", last_name="Four", city="MDN"),
        ]
        store = RecordStore(records)
        assert store.find_by_city("madiun") == [records[0], records[1], records[3]]

    def test_custom_aliases(self, users):
        store = RecordStore(users, aliases={"Medan": "MDN"})
        assert store.find_by_city("medan") == [users[1], users[2]]
        with pytest.raises(UserByCityNotFound):
            store.find_by_city("jakarta")


class TestListAll:
    """Test listing and snapshot behaviour"""

    def test_insertion_order(self, store, users):
        assert store.list_all() == users

    def test_length_is_stable(self, store):
        assert len(store.list_all()) == len(store.list_all()) == len(store) == 3

    def test_mutating_result_does_not_touch_store(self, store):
        listed = store.list_all()
        listed.clear()
        assert len(store.list_all()) == 3

    def test_store_copies_input(self, users):
        store = RecordStore(users)
        users.append(UserRecord(first_name="X", last_name="Y", city="JKT"))
        assert len(store) == 3

    def test_repeated_lookups_are_identical(self, store):
        assert store.find_by_city("mdn") == store.find_by_city("mdn")
        assert store.find_by_name("qohar") == store.find_by_name("qohar")
        assert list(store) == store.list_all()


def test_defaults():
    store = RecordStore()
    assert store.list_all() == list(DEFAULT_USERS)
    assert CITY_ALIASES == {"madiun": "mdn", "jakarta": "jkt"}


def test_records_are_immutable(users):
    with pytest.raises(ValidationError):
        users[0].city = "MDN"
