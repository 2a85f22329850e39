"""
Utility modules for the collection proxy
"""
from .config_loader import CollectionCredentials, ProxyConfig, load_collection_credentials, load_proxy_config

__all__ = [
    'CollectionCredentials',
    'ProxyConfig',
    'load_collection_credentials',
    'load_proxy_config',
]
