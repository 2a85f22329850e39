"""
Real HTTP integration clients.

These clients communicate with the Webflow CMS API over HTTP and return raw
vendor records. Normalization happens in cms_proxy.processors.
"""
