# inventory_sdk/config.py
import os

# API endpoints
BASE_URL = os.getenv("INVENTORYHUB_API_URL", "http://localhost:5107")
PRODUCT_LIST_ENDPOINT = "/api/productlist"

# Timeouts
REQUEST_TIMEOUT_SECONDS = 30
CACHE_VALIDITY_MINUTES = 5  # no cache yet

# UI strings
LOADING_MESSAGE = "Loading products..."
NO_DATA_MESSAGE = "No products found."
RETRY_BUTTON_TEXT = "Retry"

# Error messages
EMPTY_RESPONSE_ERROR = "Received empty response from server."
PARSE_ERROR = "Failed to parse product data from server response."
NETWORK_ERROR_PREFIX = "Network error: "
NETWORK_ERROR_SUFFIX = ". Please check your connection and server availability."
TIMEOUT_ERROR_TEMPLATE = "Request timed out after {0} seconds. Please check your connection and try again."
UNEXPECTED_ERROR_PREFIX = "An unexpected error occurred: "
SERVER_ERROR_TEMPLATE = "Server returned error: {0} {1}"
JSON_ERROR_PREFIX = "Failed to parse server response: "


def product_list_url(base_url: str = BASE_URL) -> str:
    return f"{base_url.rstrip('/')}{PRODUCT_LIST_ENDPOINT}"
