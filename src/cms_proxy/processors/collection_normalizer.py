"""
Collection item normalization.

Maps raw Webflow CMS records onto the flat Monument / EcosystemEntry shapes:
- resolve each logical field from an ordered list of vendor key names
- strip HTML markup from rich-text fields
- accept tags as a list or a comma-separated string
- parse coordinates from a pair, a "lat,lng" string or a known place name
- translate ecosystem type/category option IDs into labels

Every helper degrades to None / "" / [] on bad input instead of raising.
"""

from __future__ import annotations

import math
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from cms_proxy.integrations.contracts.collections import (
    CollectionKind,
    EcosystemEntry,
    Monument,
    NormalizedItem,
)

_TAG_RE = re.compile(r"<[^>]*>")

UNKNOWN_LABEL = "Unknown"

# Webflow option-field IDs for the ecosystem collection.
ECOSYSTEM_TYPE_LABELS: Dict[str, str] = {
    "4366ebc98f6a5310d65de8fa30194fc3": "Concept",
    "22d312e5d5bdb036a439464ba7db1649": "Program",
    "6737f113b6ca753ef687b05fe225fb03": "Organization",
    "1f06ba3b3460d24d4fc5a9514218ab36": "Person",
}

ECOSYSTEM_CATEGORY_LABELS: Dict[str, str] = {
    "74d298c5fdf925022955774e728ae1f9": "Concepts",
    "1c06d86c3ae633dbc20c19e1d1c254e4": "Programs",
    "422c7e052591ecf49dad28dc44a1a4c5": "Organizations",
    "51843361dbdbe24b3b64462d465f5a9f": "Patrons",
    "75a13f4fd7c61b3339c61c0a7612c0d3": "Founders",
}

# Rough centroids for place names that appear without coordinates.
KNOWN_LOCATIONS: Dict[str, List[float]] = {
    "New York, NY": [40.7128, -74.0060],
    "Washington, DC": [38.9072, -77.0369],
    "South Dakota": [43.9695, -99.9018],
    "California": [36.7783, -119.4179],
    "Texas": [31.9686, -99.9018],
    "Florida": [27.7663, -82.6404],
}

# Candidate vendor keys per logical field, first non-empty wins.
ID_KEYS = ("id", "_id")
NAME_KEYS = ("name", "Name")
STATUS_KEYS = ("status", "Status")
LOCATION_KEYS = ("location", "Location")
COORDINATE_KEYS = ("locationcoords", "coordinates", "Location")
DESCRIPTION_KEYS = ("description", "Description")
ECOSYSTEM_DESCRIPTION_KEYS = ("description", "Description", "notes")
YEAR_KEYS = ("year", "Year")
HEIGHT_KEYS = ("height", "Height")
BUILT_BY_KEYS = ("built-by", "Built By")
FUNDED_BY_KEYS = ("funded-by", "Funded By")
CONCEPTUALIZED_BY_KEYS = ("conceptualized-by", "Conceptualized By")
TAG_KEYS = ("tags", "Tags")
LINK_KEYS = ("link-2", "link", "Link")
ASSOCIATION_KEYS = ("association", "Association")
WEBSITE_KEYS = ("website", "Website")


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def first_present(fields: Mapping[str, Any], candidates: Sequence[str]) -> Any:
    for key in candidates:
        value = fields.get(key)
        if not _is_empty(value):
            return value
    return None


def strip_html(text: Any) -> str:
    if _is_empty(text):
        return ""
    if not isinstance(text, str):
        text = str(text)
    return _TAG_RE.sub("", text).strip()


def parse_tags(tags: Any) -> List[Any]:
    if isinstance(tags, list):
        return tags
    if isinstance(tags, str):
        return [tag.strip() for tag in tags.split(",") if tag.strip()]
    return []


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_float(text: str) -> Optional[float]:
    try:
        value = float(text.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def geocode_location(location: Any) -> Optional[List[float]]:
    if not isinstance(location, str):
        return None
    coords = KNOWN_LOCATIONS.get(location)
    return list(coords) if coords is not None else None


def parse_coordinates(location_data: Any) -> Optional[List[Any]]:
    if _is_empty(location_data):
        return None

    if isinstance(location_data, (list, tuple)) and len(location_data) == 2:
        if all(_is_number(v) for v in location_data):
            return list(location_data)
        return None

    if isinstance(location_data, str) and "," in location_data:
        parts = location_data.split(",")
        if len(parts) == 2:
            lat, lng = _parse_float(parts[0]), _parse_float(parts[1])
            if lat is not None and lng is not None:
                return [lat, lng]

    return geocode_location(location_data)


def map_type_and_category(type_id: Any, category_id: Any) -> Dict[str, str]:
    type_label = ECOSYSTEM_TYPE_LABELS.get(type_id) if isinstance(type_id, str) else None
    category_label = ECOSYSTEM_CATEGORY_LABELS.get(category_id) if isinstance(category_id, str) else None
    return {
        "type": type_label or UNKNOWN_LABEL,
        "category": category_label or UNKNOWN_LABEL,
    }


def _field_data(raw_item: Mapping[str, Any]) -> Mapping[str, Any]:
    nested = raw_item.get("fieldData")
    return nested if isinstance(nested, dict) else raw_item


def _item_id(raw_item: Mapping[str, Any]) -> Optional[str]:
    value = first_present(raw_item, ID_KEYS)
    return str(value) if value is not None else None


def normalize_monument(raw_item: Mapping[str, Any]) -> Monument:
    fields = _field_data(raw_item)
    return Monument(
        id=_item_id(raw_item),
        name=first_present(fields, NAME_KEYS),
        status=first_present(fields, STATUS_KEYS),
        location=first_present(fields, LOCATION_KEYS),
        coordinates=parse_coordinates(first_present(fields, COORDINATE_KEYS)),
        description=strip_html(first_present(fields, DESCRIPTION_KEYS)),
        year=first_present(fields, YEAR_KEYS),
        height=first_present(fields, HEIGHT_KEYS),
        builtBy=first_present(fields, BUILT_BY_KEYS),
        fundedBy=first_present(fields, FUNDED_BY_KEYS),
        conceptualizedBy=first_present(fields, CONCEPTUALIZED_BY_KEYS),
        tags=parse_tags(first_present(fields, TAG_KEYS)),
        link=first_present(fields, LINK_KEYS),
    )


def normalize_ecosystem(raw_item: Mapping[str, Any]) -> EcosystemEntry:
    fields = _field_data(raw_item)
    labels = map_type_and_category(fields.get("type"), fields.get("category"))
    return EcosystemEntry(
        id=_item_id(raw_item),
        name=first_present(fields, NAME_KEYS),
        type=labels["type"],
        category=labels["category"],
        association=first_present(fields, ASSOCIATION_KEYS),
        location=first_present(fields, LOCATION_KEYS),
        website=first_present(fields, WEBSITE_KEYS),
        description=strip_html(first_present(fields, ECOSYSTEM_DESCRIPTION_KEYS)),
        tags=parse_tags(first_present(fields, TAG_KEYS)),
    )


def normalize(raw_item: Any, kind: Union[CollectionKind, str]) -> NormalizedItem:
    """Normalize one raw CMS record for the given collection kind."""
    kind = CollectionKind(kind)
    item = raw_item if isinstance(raw_item, dict) else {}
    if kind is CollectionKind.MONUMENT:
        return normalize_monument(item)
    return normalize_ecosystem(item)


def normalize_items(raw_items: Iterable[Any], kind: Union[CollectionKind, str]) -> List[NormalizedItem]:
    return [normalize(item, kind) for item in raw_items]
