"""
Veryfi API client.

This module signs requests with the client secret, attaches the Veryfi
authentication headers and returns raw response bodies to the caller.
"""

import base64
import http.cookiejar
import json
import logging
import os
import time
from typing import Any, Dict, List, Optional, Tuple

import requests

from .constants import (
    HEADER_USER_AGENT,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    HEADER_CLIENT_ID,
    HEADER_AUTHORIZATION,
    HEADER_REQUEST_TIMESTAMP,
    HEADER_REQUEST_SIGNATURE,
    CONTENT_TYPE_JSON,
    USER_AGENT,
    DEFAULT_CONFIG,
    DEFAULT_CATEGORIES
)
from .exceptions import (
    ConfigurationError,
    TransportError,
    FileReadError
)
from .signature import generate_signature

logger = logging.getLogger(__name__)


def read_file_as_base64(file_path: str) -> Tuple[str, str]:
    """
    Read a local document and encode it for JSON transport.

    Args:
        file_path: Path on disk to the document

    Returns:
        Tuple of (file name without directories, base64-encoded contents)

    Raises:
        FileReadError: If the file does not exist or cannot be read
    """
    try:
        with open(file_path, 'rb') as f:
            content = f.read()
    except OSError as e:
        logger.error("Could not read document %s: %s", file_path, e)
        raise FileReadError(f"Could not read file {file_path}: {e}") from e

    file_name = os.path.basename(file_path)
    logger.debug("Encoded %s (%d bytes)", file_name, len(content))
    return file_name, base64.b64encode(content).decode('ascii')


class VeryfiClient:
    """
    Client for the Veryfi partner API.

    Each call builds its own timestamp, signature and payload, so a client
    holds no per-request state and its credentials never change.
    """

    def __init__(self, client_id: str, client_secret: str, username: str, api_key: str,
                 session=None, **config):
        """
        Initialize Veryfi client.

        Args:
            client_id: Client id provided by Veryfi
            client_secret: Client secret provided by Veryfi, used to sign requests
            username: Username provided by Veryfi
            api_key: Api key provided by Veryfi
            session: Optional requests.Session-compatible transport
            **config: Configuration options (base_url, api_version, timeout)
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.username = username
        self.api_key = api_key

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            # Each call stands alone; never store or replay cookies
            session.cookies.set_policy(http.cookiejar.DefaultCookiePolicy(allowed_domains=[]))
        self.session = session

    def _validate_config(self):
        """Validate credentials and client configuration."""
        for name in ('client_id', 'client_secret', 'username', 'api_key'):
            if not getattr(self, name):
                raise ConfigurationError(f"{name} cannot be empty")

        if not self.config['base_url']:
            raise ConfigurationError("base_url cannot be empty")

        if not self.config['api_version']:
            raise ConfigurationError("api_version cannot be empty")

        if self.config['timeout'] <= 0:
            raise ConfigurationError("timeout must be positive")

    @property
    def api_version(self) -> str:
        return self.config['api_version']

    @property
    def timeout(self):
        return self.config['timeout']

    def get_url(self) -> str:
        """Return the partner API root, e.g. https://api.veryfi.com/api/v8/partner."""
        return f"{self.config['base_url']}{self.config['api_version']}/partner"

    def get_headers(self, timestamp: int, signature: str) -> Dict[str, str]:
        """
        Build the headers for a signed request.

        Args:
            timestamp: Milliseconds since the Unix epoch, the same value that was signed
            signature: Signature produced for this request

        Returns:
            Header dict
        """
        return {
            HEADER_USER_AGENT: USER_AGENT,
            HEADER_ACCEPT: CONTENT_TYPE_JSON,
            HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON,
            HEADER_CLIENT_ID: self.client_id,
            HEADER_AUTHORIZATION: f"apikey {self.username}:{self.api_key}",
            HEADER_REQUEST_TIMESTAMP: str(timestamp),
            HEADER_REQUEST_SIGNATURE: signature,
        }

    def _prepare_request_body(self, payload: Dict[str, Any]) -> bytes:
        """Serialize the payload as the JSON request body."""
        return json.dumps(payload).encode('utf-8')

    def execute(self, method: str, endpoint_path: str, payload: Dict[str, Any]) -> str:
        """
        Make a signed HTTP request.

        Args:
            method: HTTP method
            endpoint_path: Resource path, e.g. "/documents/"
            payload: Fields to sign and send as the JSON body

        Returns:
            Raw response body text, whatever the HTTP status

        Raises:
            TransportError: If the request fails or times out
        """
        timestamp = int(time.time() * 1000)
        signature = generate_signature(self.client_secret, payload, timestamp)

        url = f"{self.get_url()}{endpoint_path}"
        headers = self.get_headers(timestamp, signature)
        body = self._prepare_request_body(payload)

        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                data=body,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise TransportError(f"HTTP request failed: {e}") from e

        logger.debug("%s %s -> %s (%d chars)", method, url, response.status_code, len(response.text))
        return response.text

    def get_documents(self) -> str:
        """
        Get list of documents.

        Returns:
            JSON text with the processed documents and metadata
        """
        return self.execute('GET', "/documents/", {})

    def get_document(self, document_id: str) -> str:
        """
        Retrieve document by ID.

        Args:
            document_id: ID of the document to retrieve

        Returns:
            JSON text with the data extracted from the document
        """
        payload = {"id": document_id}
        return self.execute('GET', f"/documents/{document_id}/", payload)

    def process_document(self, file_path: str, categories: Optional[List[str]] = None,
                         delete_after_processing: bool = False, **additional_parameters) -> str:
        """
        Process a local document and extract all the fields from it.

        Args:
            file_path: Path on disk to the file to submit
            categories: Categories Veryfi can use to categorize the document;
                DEFAULT_CATEGORIES when empty
            delete_after_processing: Delete the document from Veryfi once data is extracted
            **additional_parameters: Extra request fields, applied last

        Returns:
            JSON text with the data extracted from the document

        Raises:
            FileReadError: If the file cannot be read; no request is made
        """
        file_name, file_data = read_file_as_base64(file_path)

        payload = {
            "file_name": file_name,
            "file_data": file_data,
            "categories": list(categories) if categories else list(DEFAULT_CATEGORIES),
            "auto_delete": delete_after_processing,
        }
        payload.update(additional_parameters)
        return self.execute('POST', "/documents/", payload)

    def process_document_url(self, file_url: str, categories: Optional[List[str]] = None,
                             delete_after_processing: bool = False, boost_mode: int = 0,
                             external_id: str = "", max_pages_to_process: int = 0,
                             file_urls: Optional[List[str]] = None, **additional_parameters) -> str:
        """
        Process a document from a URL and extract all the fields from it.

        Args:
            file_url: Publicly accessible URL to a file
            categories: Categories to use when categorizing the document, sent as given
            delete_after_processing: Delete the document(s) from Veryfi once data is extracted
            boost_mode: When 1, Veryfi skips data enrichment and processes faster
            external_id: Optional custom document identifier
            max_pages_to_process: How many pages to read, starting from page 1
            file_urls: Optional list of publicly accessible URLs
            **additional_parameters: Extra request fields, applied last

        Returns:
            JSON text with the data extracted from the document
        """
        payload = {
            "auto_delete": delete_after_processing,
            "boost_mode": boost_mode,
            "categories": list(categories) if categories is not None else [],
        }
        if external_id:
            payload["external_id"] = external_id
        payload["file_url"] = file_url
        if file_urls:
            payload["file_urls"] = list(file_urls)
        if max_pages_to_process > 0:
            payload["max_pages_to_process"] = max_pages_to_process
        payload.update(additional_parameters)
        return self.execute('POST', "/documents/", payload)

    def update_document(self, document_id: str, fields: Dict[str, Any]) -> str:
        """
        Update data for a previously processed document (vendor, date, notes, ...).

        Args:
            document_id: ID of the document to update
            fields: Fields to update, sent as given

        Returns:
            JSON text with the document after the update
        """
        return self.execute('PUT', f"/documents/{document_id}/", dict(fields))

    def delete_document(self, document_id: str) -> str:
        """Delete a document from Veryfi."""
        payload = {"id": document_id}
        return self.execute('DELETE', f"/documents/{document_id}/", payload)

    def close(self):
        """Close the HTTP session if this client created it."""
        if self.session and self._owns_session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
