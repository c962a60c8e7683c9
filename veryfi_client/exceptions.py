"""
Custom exceptions for the Veryfi client library.
"""


class VeryfiClientError(Exception):
    """Base exception for Veryfi client errors."""
    pass


class ConfigurationError(VeryfiClientError):
    """Raised when client configuration or credentials are invalid."""
    pass


class TransportError(VeryfiClientError):
    """Raised when the HTTP request cannot be completed."""
    pass


class FileReadError(VeryfiClientError, OSError):
    """Raised when a local document cannot be read."""
    pass
