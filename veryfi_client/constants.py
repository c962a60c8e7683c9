"""
Constants for the Veryfi client library.
Header names and defaults expected by the Veryfi partner API.
"""

# HTTP Headers
HEADER_USER_AGENT = "User-Agent"
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CLIENT_ID = "Client-Id"
HEADER_AUTHORIZATION = "Authorization"
HEADER_REQUEST_TIMESTAMP = "X-Veryfi-Request-Timestamp"
HEADER_REQUEST_SIGNATURE = "X-Veryfi-Request-Signature"

CONTENT_TYPE_JSON = "application/json"
USER_AGENT = "Python Veryfi-Python-Client/1.0.0"

DEFAULT_BASE_URL = "https://api.veryfi.com/api/"
DEFAULT_API_VERSION = "v8"
DEFAULT_TIMEOUT = 120  # seconds

# Default configuration values
DEFAULT_CONFIG = {
    'base_url': DEFAULT_BASE_URL,
    'api_version': DEFAULT_API_VERSION,
    'timeout': DEFAULT_TIMEOUT,
}

# Sent when process_document is called without categories
DEFAULT_CATEGORIES = (
    "Advertising & Marketing",
    "Automotive",
    "Bank Charges & Fees",
    "Legal & Professional Services",
    "Insurance",
    "Meals & Entertainment",
    "Office Supplies & Software",
    "Taxes & Licenses",
    "Travel",
    "Rent & Lease",
    "Repairs & Maintenance",
    "Payroll",
    "Utilities",
    "Job Supplies",
    "Grocery",
)
