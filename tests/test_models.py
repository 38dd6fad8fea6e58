"""Tests for the domain models."""

import pytest

from db.errors import QueryError
from models.property import Property, PropertySearchOptions, to_cents
from models.user import User
from tests.conftest import property_row


def test_to_cents_rounds():
    assert to_cents(50) == 5000
    assert to_cents("49.99") == 4999
    assert to_cents(0.29) == 29


def test_search_options_from_query_string():
    options = PropertySearchOptions.from_dict({
        "city": "Vancouver",
        "owner_id": "4",
        "minimum_price_per_night": "50",
        "maximum_price_per_night": "150",
        "minimum_rating": "",
        "unknown": "ignored",
    })
    assert options.city == "Vancouver"
    assert options.owner_id == 4
    assert options.minimum_rating is None
    assert options.price_range_in_cents() == (5000, 15000)


def test_price_range_needs_both_bounds():
    assert PropertySearchOptions(minimum_price_per_night=50).price_range_in_cents() is None
    assert PropertySearchOptions(maximum_price_per_night=150).price_range_in_cents() is None
    assert PropertySearchOptions(minimum_price_per_night=0, maximum_price_per_night=0).price_range_in_cents() == (0, 0)


def test_search_options_from_none():
    assert PropertySearchOptions.from_dict(None) == PropertySearchOptions()


def test_owner_id_accepts_integral_float_string():
    assert PropertySearchOptions.from_dict({"owner_id": "4.0"}).owner_id == 4
    assert PropertySearchOptions.from_dict({"owner_id": 4.0}).owner_id == 4


@pytest.mark.parametrize("options", [
    {"minimum_rating": "lots"},
    {"owner_id": "4.5"},
    {"minimum_price_per_night": ["50"], "maximum_price_per_night": "150"},
])
def test_bad_search_options_logged_and_raised(options, caplog):
    with pytest.raises(QueryError) as exc_info:
        PropertySearchOptions.from_dict(options)

    assert isinstance(exc_info.value.original, (TypeError, ValueError))
    assert exc_info.value.__cause__ is exc_info.value.original
    errors = [r for r in caplog.records if r.levelname == "ERROR"]
    assert len(errors) == 1
    assert errors[0].name == "models.property"
    assert "Invalid property search options" in errors[0].getMessage()


def test_property_from_dict_ignores_extra_keys():
    row = property_row(id=None)
    prop = Property.from_dict(row)
    assert prop.title == "Speed lamp"
    assert prop.id is None
    assert str(prop) == "Speed lamp (Sotboske) - 930.61/night"


def test_property_from_dict_missing_fields():
    row = property_row(id=None)
    del row["description"]
    del row["title"]
    del row["parking_spaces"]

    prop = Property.from_dict(row)

    assert prop.description is None
    assert prop.title is None
    assert prop.parking_spaces == 0


def test_user_from_dict():
    user = User.from_dict({"name": "Eva", "email": "eva@example.com", "password": "hash"})
    assert user.id is None
    assert str(user) == "Eva <eva@example.com>"


def test_user_from_dict_missing_password():
    user = User.from_dict({"name": "Eva", "email": "eva@example.com"})
    assert user.password is None
