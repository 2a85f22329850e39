"""
Webflow CMS collection proxy.

Pages through Webflow CMS collections, normalizes vendor field naming into a
flat shape, caches the result in memory and serves it as JSON over HTTP.
"""

__version__ = "1.0.0"
