from .collections import CollectionKind, EcosystemEntry, Monument, NormalizedItem

__all__ = ["CollectionKind", "EcosystemEntry", "Monument", "NormalizedItem"]
