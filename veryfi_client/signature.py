"""
Request signing for the Veryfi partner API.

Every request carries an HMAC-SHA256 signature computed over a canonical
string built from the request timestamp and the payload fields:

    timestamp:<T>,<key1>:<value1>,<key2>:<value2>,...

The digest is keyed with the client secret and sent base64-encoded in the
X-Veryfi-Request-Signature header.
"""

import base64
import hashlib
import hmac
import json
from typing import Any, Dict

from .exceptions import ConfigurationError


def render_value(value: Any) -> str:
    """
    Render a payload value the way it appears in the canonical string.

    Strings are left unquoted, booleans and None use their JSON spelling,
    and numbers, lists and objects use compact JSON text.
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(',', ':'), ensure_ascii=False)


def build_canonical_string(payload: Dict[str, Any], timestamp: int) -> str:
    """
    Build the string that gets signed.

    Args:
        payload: Request fields, enumerated in iteration order
        timestamp: Milliseconds since the Unix epoch

    Returns:
        Canonical string for the HMAC
    """
    parts = [f"timestamp:{timestamp}"]
    for key, value in payload.items():
        parts.append(f"{key}:{render_value(value)}")
    return ",".join(parts)


def generate_signature(client_secret: str, payload: Dict[str, Any], timestamp: int) -> str:
    """
    Generate the request signature.

    Args:
        client_secret: Client secret provided by Veryfi
        payload: Request fields that will be sent as the JSON body
        timestamp: Milliseconds since the Unix epoch, also sent as a header

    Returns:
        Base64-encoded HMAC-SHA256 signature

    Raises:
        ConfigurationError: If client_secret is empty
    """
    if not client_secret:
        raise ConfigurationError("client_secret cannot be empty")

    message = build_canonical_string(payload, timestamp)
    mac = hmac.new(
        client_secret.encode('utf-8'),
        message.encode('utf-8'),
        hashlib.sha256
    )
    return base64.b64encode(mac.digest()).decode('ascii')


def verify_signature(client_secret: str, payload: Dict[str, Any], timestamp: int, signature: str) -> bool:
    """
    Check a signature against the payload and timestamp it claims to cover.

    Returns:
        True if the signature matches; False for any other value,
        including malformed or non-ASCII input
    """
    expected = generate_signature(client_secret, payload, timestamp)
    try:
        # Constant-time comparison on bytes, str only accepts ASCII
        return hmac.compare_digest(expected.encode('ascii'), signature.encode('utf-8'))
    except (AttributeError, UnicodeEncodeError):
        return False
