"""
Integration tests against the live Veryfi API.

Skipped unless VERYFI_CLIENT_ID, VERYFI_CLIENT_SECRET, VERYFI_USERNAME and
VERYFI_API_KEY are set. These calls create and delete real documents.
"""

import json
import os
import random
import string

import pytest

from veryfi_client import create_client


CREDENTIAL_VARS = ("VERYFI_CLIENT_ID", "VERYFI_CLIENT_SECRET", "VERYFI_USERNAME", "VERYFI_API_KEY")
RECEIPT_URL = "https://veryfi-testing-public.s3.us-west-2.amazonaws.com/receipt.jpg"

pytestmark = pytest.mark.skipif(
    not all(os.environ.get(var) for var in CREDENTIAL_VARS),
    reason="Veryfi credentials not configured"
)


class TestIntegration:
    """Integration tests with the Veryfi API."""

    @pytest.fixture(scope="class")
    def client(self):
        """Create authenticated client from the environment."""
        client = create_client(*(os.environ[var] for var in CREDENTIAL_VARS))
        yield client
        client.close()

    @pytest.fixture(scope="class")
    def document(self, client):
        """Process a public receipt and delete it afterwards."""
        response = json.loads(client.process_document_url(RECEIPT_URL, max_pages_to_process=1))
        assert "id" in response, response
        yield response

        client.delete_document(str(response["id"]))

    def test_get_documents(self, client):
        data = json.loads(client.get_documents())

        assert isinstance(data, (dict, list))

    def test_get_document(self, client, document):
        data = json.loads(client.get_document(str(document["id"])))

        assert data["id"] == document["id"]

    def test_update_document(self, client, document):
        notes = "".join(random.choices(string.ascii_letters, k=10))

        data = json.loads(client.update_document(str(document["id"]), {"notes": notes}))

        assert data["notes"] == notes

    def test_bad_signature_is_returned_as_text(self, document):
        """Test that an authentication failure comes back as a response body."""
        client = create_client(
            os.environ["VERYFI_CLIENT_ID"],
            "wrong-secret",
            os.environ["VERYFI_USERNAME"],
            os.environ["VERYFI_API_KEY"]
        )
        with client:
            body = client.get_document(str(document["id"]))

        assert isinstance(body, str)
        assert body
