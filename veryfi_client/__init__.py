"""
Veryfi Client Library

A Python client library that signs requests for the Veryfi document
extraction API and returns the raw JSON responses.

Example usage:
    from veryfi_client import create_client

    client = create_client("client_id", "client_secret", "username", "api_key")
    response = client.process_document("receipt.jpg")
"""

from .client import VeryfiClient, read_file_as_base64
from .factory import create_client, create_client_with_custom_api_version
from .signature import (
    build_canonical_string,
    generate_signature,
    verify_signature
)
from .exceptions import (
    VeryfiClientError,
    ConfigurationError,
    TransportError,
    FileReadError
)
from .constants import (
    HEADER_REQUEST_TIMESTAMP,
    HEADER_REQUEST_SIGNATURE,
    DEFAULT_CONFIG,
    DEFAULT_CATEGORIES,
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT
)

__version__ = "1.0.0"
__author__ = "Veryfi"
__all__ = [
    "VeryfiClient",
    "read_file_as_base64",
    "create_client",
    "create_client_with_custom_api_version",
    "build_canonical_string",
    "generate_signature",
    "verify_signature",
    "VeryfiClientError",
    "ConfigurationError",
    "TransportError",
    "FileReadError",
    "HEADER_REQUEST_TIMESTAMP",
    "HEADER_REQUEST_SIGNATURE",
    "DEFAULT_CONFIG",
    "DEFAULT_CATEGORIES",
    "DEFAULT_API_VERSION",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT"
]
