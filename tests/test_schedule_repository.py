"""
Unit tests for the InMemoryScheduleRepository and its seed data.
"""
from dataclasses import replace
from datetime import date

import pytest

from schedule_engine.exceptions import (DuplicateIdentifierError,
                                        InvalidArgumentError)
from schedule_engine.models import (BulkyWaste, CollectionFrequency,
                                    RecurringBin, Weekday)
from schedule_engine.seed_data import build_seed_schedules, next_weekday_after
from schedule_engine.services.schedule_repository import \
    InMemoryScheduleRepository

TODAY = date(2025, 10, 15)  # A Wednesday


@pytest.fixture
def repository():
    """Creates a repository seeded with the static fixtures."""
    return InMemoryScheduleRepository(build_seed_schedules(TODAY))


def make_bin(address="9 New St", suburb="Newtown"):
    return RecurringBin(
        schedule_name="Newtown Red Bin Collection",
        bin_type="Red",
        bin_description="General Waste",
        address=address,
        suburb=suburb,
        collection_day=Weekday.THURSDAY,
        frequency=CollectionFrequency.WEEKLY,
        next_collection_date=date(2025, 10, 16),
    )


def test_seed_data_is_loaded(repository):
    assert repository.count() == 12
    assert len(repository.list_bulky_waste()) == 3


def test_seed_identifiers_are_unique_and_positive(repository):
    ids = [s.id for s in repository.get_all()]
    assert ids == list(range(1, 13))


def test_seed_anchors_fall_strictly_after_today():
    assert next_weekday_after(TODAY, Weekday.MONDAY) == date(2025, 10, 20)
    assert next_weekday_after(TODAY, Weekday.WEDNESDAY) == date(2025, 10, 22)

    schedules = build_seed_schedules(TODAY)
    for schedule in schedules:
        if isinstance(schedule, RecurringBin):
            assert schedule.next_collection_date.weekday() == schedule.collection_day
        else:
            assert schedule.next_collection_date == date(2025, 11, 14)


def test_bin_next_date_must_fall_on_collection_day():
    with pytest.raises(InvalidArgumentError):
        replace(make_bin(), next_collection_date=date(2025, 10, 14))


def test_add_never_stores_bin_off_its_collection_day(repository):
    with pytest.raises(InvalidArgumentError):
        repository.add(replace(make_bin(), collection_day=Weekday.MONDAY))

    assert repository.count() == 12


def test_add_assigns_next_identifier(repository):
    stored = repository.add(make_bin())

    assert stored.id == 13
    assert repository.get_by_id(13) == stored
    assert repository.count() == 13


def test_add_rejects_entity_with_identifier(repository):
    with pytest.raises(DuplicateIdentifierError):
        repository.add(replace(make_bin(), id=5))


def test_add_rejects_missing_entity(repository):
    with pytest.raises(InvalidArgumentError):
        repository.add(None)


def test_update_replaces_entity(repository):
    original = repository.get_by_id(1)
    updated = replace(original, bin_description="Landfill")

    repository.update(updated)

    assert repository.get_by_id(1).bin_description == "Landfill"
    assert repository.count() == 12


def test_update_unknown_identifier_is_ignored(repository):
    repository.update(replace(make_bin(), id=99))

    assert repository.get_by_id(99) is None
    assert repository.count() == 12


def test_delete_removes_entity(repository):
    repository.delete(1)

    assert repository.get_by_id(1) is None
    assert repository.count() == 11


def test_delete_unknown_identifier_is_ignored(repository):
    repository.delete(99)
    assert repository.count() == 12


def test_identifiers_are_not_reused_after_delete(repository):
    repository.delete(12)
    assert repository.add(make_bin()).id == 13


def test_find_by_address_matches_substring_ignoring_case(repository):
    schedules = repository.find_by_address("victoria")

    assert len(schedules) == 3
    assert all(s.address == "436 Victoria Ave" for s in schedules)


def test_find_by_suburb_is_exact(repository):
    assert len(repository.find_by_suburb("Chatswood")) == 3
    assert repository.find_by_suburb("chatswood") == []


def test_bulky_waste_not_returned_by_bin_lookups(repository):
    for schedule in repository.find_by_address(""):
        assert isinstance(schedule, RecurringBin)
    assert all(isinstance(s, BulkyWaste) for s in repository.list_bulky_waste())


def test_list_suburbs_sorted_and_distinct(repository):
    assert repository.list_suburbs() == ["Bondi Junction", "Chatswood", "Parramatta"]


def test_list_addresses_in_insertion_order(repository):
    assert repository.list_addresses() == ["436 Victoria Ave", "123 Oxford St", "159 Church St"]


def test_get_all_returns_a_copy(repository):
    schedules = repository.get_all()
    schedules.clear()
    assert repository.count() == 12
