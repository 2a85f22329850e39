"""
Record processors.

collection_normalizer maps raw CMS items onto the normalized collection
contracts in cms_proxy.integrations.contracts.
"""

from .collection_normalizer import normalize, normalize_items

__all__ = ["normalize", "normalize_items"]
