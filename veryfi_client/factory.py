"""
Helpers for building a VeryfiClient with the default settings.
"""

from .client import VeryfiClient
from .constants import DEFAULT_API_VERSION


def create_client(client_id: str, client_secret: str, username: str, api_key: str,
                  **config) -> VeryfiClient:
    """
    Create a client for the default API version (v8).

    Example:
        client = create_client("your_client_id", "your_client_secret",
                               "your_username", "your_api_key")
    """
    return create_client_with_custom_api_version(
        client_id, client_secret, username, api_key, DEFAULT_API_VERSION, **config
    )


def create_client_with_custom_api_version(client_id: str, client_secret: str, username: str,
                                          api_key: str, api_version: str, **config) -> VeryfiClient:
    """Create a client for a specific API version, e.g. "v7"."""
    config['api_version'] = api_version
    return VeryfiClient(client_id, client_secret, username, api_key, **config)
