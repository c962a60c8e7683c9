#!/usr/bin/env python3
"""
Basic usage examples for the Veryfi client library.

Reads credentials from VERYFI_CLIENT_ID, VERYFI_CLIENT_SECRET,
VERYFI_USERNAME and VERYFI_API_KEY, then walks through the document
endpoints. Pass a local file path as the first argument to upload it.
"""

import json
import logging
import os
import sys

from veryfi_client import (
    VeryfiClientError,
    create_client,
    generate_signature,
    verify_signature
)


RECEIPT_URL = "https://veryfi-testing-public.s3.us-west-2.amazonaws.com/receipt.jpg"


def main():
    """Run basic usage examples."""
    logging.basicConfig(level=logging.DEBUG if os.environ.get("VERBOSE") else logging.INFO)

    try:
        credentials = [os.environ[var] for var in (
            "VERYFI_CLIENT_ID", "VERYFI_CLIENT_SECRET", "VERYFI_USERNAME", "VERYFI_API_KEY"
        )]
    except KeyError as e:
        print(f"Missing environment variable: {e}")
        return 1

    print("=== Veryfi Python Client Basic Usage Examples ===\n")

    print("1. Signing a payload locally...")
    payload = {"id": "123"}
    signature = generate_signature(credentials[1], payload, 1000000)
    print(f"   Payload: {payload}")
    print(f"   Signature: {signature}")
    print(f"   Verification: {'✓ Valid' if verify_signature(credentials[1], payload, 1000000, signature) else '✗ Invalid'}")
    print()

    with create_client(*credentials) as client:
        print(f"   Client created for: {client.get_url()}\n")
        try:
            print("2. Processing a document by URL...")
            document = json.loads(client.process_document_url(RECEIPT_URL, max_pages_to_process=1))
            print(f"   Document id: {document.get('id')}")
            print(f"   Vendor: {document.get('vendor', {}).get('name')}")
            print()

            if len(sys.argv) > 1:
                print(f"3. Uploading {sys.argv[1]}...")
                uploaded = json.loads(client.process_document(sys.argv[1], delete_after_processing=True))
                print(f"   Document id: {uploaded.get('id')}")
                print()

            if "id" in document:
                document_id = str(document["id"])

                print("4. Updating notes...")
                updated = json.loads(client.update_document(document_id, {"notes": "example run"}))
                print(f"   Notes: {updated.get('notes')}")
                print()

                print("5. Deleting the document...")
                print(f"   {client.delete_document(document_id)}")
                print()

            print("6. Listing documents...")
            documents = json.loads(client.get_documents())
            print(f"   Response type: {type(documents).__name__}")
        except VeryfiClientError as e:
            print(f"   ✗ {type(e).__name__}: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
