from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class CollectionKind(str, Enum):
    MONUMENT = "monument"
    ECOSYSTEM = "ecosystem"


# ---------------------------------------------------------------------------
# Normalized records
# ---------------------------------------------------------------------------

Coordinates = List[Any]                  # [lat, lng]


@dataclass(frozen=True)
class Monument:
    id: Optional[str] = None
    name: Optional[str] = None
    status: Optional[str] = None
    location: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    description: str = ""
    year: Any = None
    height: Any = None
    builtBy: Optional[str] = None
    fundedBy: Optional[str] = None
    conceptualizedBy: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    link: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class EcosystemEntry:
    id: Optional[str] = None
    name: Optional[str] = None
    type: str = "Unknown"
    category: str = "Unknown"
    association: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    description: str = ""
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


NormalizedItem = Union[Monument, EcosystemEntry]
