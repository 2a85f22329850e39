import pytest

from cms_proxy.integrations.contracts.collections import CollectionKind, EcosystemEntry, Monument
from cms_proxy.processors.collection_normalizer import (
    first_present,
    geocode_location,
    map_type_and_category,
    normalize,
    normalize_items,
    parse_coordinates,
    parse_tags,
    strip_html,
)


# --- helpers -----------------------------------------------------------------

def test_strip_html_removes_markup_and_trims():
    assert strip_html("<p>Hi <b>there</b></p>") == "Hi there"
    assert strip_html("  <br/>plain  ") == "plain"


@pytest.mark.parametrize("value", [None, ""])
def test_strip_html_empty_input(value):
    assert strip_html(value) == ""


def test_parse_tags_variants():
    assert parse_tags("a, b ,c") == ["a", "b", "c"]
    assert parse_tags("a,,  ,b") == ["a", "b"]
    assert parse_tags([]) == []
    assert parse_tags(["x", "y"]) == ["x", "y"]
    assert parse_tags(None) == []
    assert parse_tags(42) == []


def test_parse_coordinates_from_string():
    assert parse_coordinates("40.7,-74.0") == [40.7, -74.0]
    assert parse_coordinates(" 40.6892 , -74.0445 ") == [40.6892, -74.0445]


def test_parse_coordinates_numeric_pair_passes_through():
    assert parse_coordinates([40.7, -74.0]) == [40.7, -74.0]


def test_parse_coordinates_string_pair_is_not_accepted():
    assert parse_coordinates(["40.7", "-74.0"]) is None


def test_parse_coordinates_falls_back_to_known_locations():
    assert parse_coordinates("New York, NY") == [40.7128, -74.0060]
    assert parse_coordinates("Texas") == [31.9686, -99.9018]


@pytest.mark.parametrize("value", [None, "", "somewhere, nowhere", "Atlantis", "nan,1", [1.0, 2.0, 3.0], {"lat": 1}])
def test_parse_coordinates_unmatched_is_none(value):
    assert parse_coordinates(value) is None


def test_geocode_location_returns_copy():
    coords = geocode_location("Florida")
    coords.append(0)
    assert geocode_location("Florida") == [27.7663, -82.6404]


def test_map_type_and_category_known_and_unknown_ids():
    assert map_type_and_category("6737f113b6ca753ef687b05fe225fb03", "51843361dbdbe24b3b64462d465f5a9f") == {
        "type": "Organization",
        "category": "Patrons",
    }
    assert map_type_and_category("nope", None) == {"type": "Unknown", "category": "Unknown"}
    assert map_type_and_category(["list"], {"x": 1}) == {"type": "Unknown", "category": "Unknown"}


def test_first_present_skips_blank_values_in_order():
    fields = {"name": "   ", "Name": "Title Case"}
    assert first_present(fields, ("name", "Name")) == "Title Case"
    assert first_present({}, ("name", "Name")) is None


# --- records -----------------------------------------------------------------

def test_normalize_monument_from_field_data():
    raw = {
        "id": "m1",
        "fieldData": {
            "name": "Statue of Liberty",
            "Status": "Standing",
            "location": "New York, NY",
            "locationcoords": "40.6892,-74.0445",
            "description": "<p>A <em>gift</em> from France</p>",
            "year": 1886,
            "Height": "93m",
            "built-by": "Eiffel",
            "Funded By": "Public subscription",
            "conceptualized-by": "Bartholdi",
            "tags": "liberty, harbor",
            "link-2": "https://example.test/liberty",
            "link": "https://example.test/ignored",
        },
    }

    monument = normalize(raw, "monument")

    assert isinstance(monument, Monument)
    assert monument.to_dict() == {
        "id": "m1",
        "name": "Statue of Liberty",
        "status": "Standing",
        "location": "New York, NY",
        "coordinates": [40.6892, -74.0445],
        "description": "A gift from France",
        "year": 1886,
        "height": "93m",
        "builtBy": "Eiffel",
        "fundedBy": "Public subscription",
        "conceptualizedBy": "Bartholdi",
        "tags": ["liberty", "harbor"],
        "link": "https://example.test/liberty",
    }


def test_normalize_monument_top_level_fields_and_title_case_location_fallback():
    raw = {"_id": "legacy-7", "Name": "Mount Rushmore", "Location": "South Dakota"}

    monument = normalize(raw, CollectionKind.MONUMENT)

    assert monument.id == "legacy-7"
    assert monument.name == "Mount Rushmore"
    assert monument.location == "South Dakota"
    assert monument.coordinates == [43.9695, -99.9018]
    assert monument.description == ""
    assert monument.tags == []
    assert monument.link is None


def test_normalize_ecosystem_maps_ids_and_notes():
    raw = {
        "id": "e1",
        "fieldData": {
            "name": "Friends of the Park",
            "type": "22d312e5d5bdb036a439464ba7db1649",
            "category": "unknown-category-id",
            "Association": "City",
            "website": "https://example.test",
            "notes": "<div>Volunteer group</div>",
            "Tags": ["parks"],
        },
    }

    entry = normalize(raw, "ecosystem")

    assert isinstance(entry, EcosystemEntry)
    assert entry.to_dict() == {
        "id": "e1",
        "name": "Friends of the Park",
        "type": "Program",
        "category": "Unknown",
        "association": "City",
        "location": None,
        "website": "https://example.test",
        "description": "Volunteer group",
        "tags": ["parks"],
    }


@pytest.mark.parametrize("raw", [None, "not a record", 3, []])
def test_normalize_never_fails_on_malformed_input(raw):
    entry = normalize(raw, "ecosystem")
    assert entry.id is None
    assert entry.type == "Unknown"
    assert entry.tags == []


def test_normalize_rejects_unknown_kind():
    with pytest.raises(ValueError):
        normalize({}, "gallery")


def test_normalize_items_keeps_order():
    raws = [{"id": str(i), "name": f"n{i}"} for i in range(5)]
    assert [m.id for m in normalize_items(raws, "monument")] == ["0", "1", "2", "3", "4"]
