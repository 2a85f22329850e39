"""
Integrations layer.
This package contains all code used to communicate with the Webflow CMS API.

Key rule:
- Route handlers MUST NOT call the CMS API directly.
- They go through CollectionService, which owns the paginator and the cache.
"""
