"""Shared partition endpoint constants.

This module centralizes URLs, header names and form keys used by the client
and its hooks so the pipeline can stay small and focused.
"""

from __future__ import annotations

DEFAULT_SERVER_URL = "https://api.unstructuredapp.io"
PARTITION_PATH = "/general/v0/general"

# Header carrying the API key
API_KEY_HEADER = "unstructured-api-key"

# Multipart form keys of the partition operation
PARTITION_FORM_FILES_KEY = "files"
PARTITION_FORM_SPLIT_PDF_PAGE_KEY = "split_pdf_page"

DEFAULT_TIMEOUT_SECONDS = 60.0
