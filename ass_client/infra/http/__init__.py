"""HTTP layer used to talk to the storage.

This package holds the transport protocol, the ``requests`` implementation,
header and URL construction, and response decoding.
"""

from .client import HttpClient, HttpResponse, MultipartFile
from .decoding import decode_document, decode_documents, decode_record, decode_records
from .request_builder import build_headers, resolve, resolve_with_query
from .requests_client import RequestsHttpClient

__all__ = [
    "HttpClient",
    "HttpResponse",
    "MultipartFile",
    "RequestsHttpClient",
    "build_headers",
    "decode_document",
    "decode_documents",
    "decode_record",
    "decode_records",
    "resolve",
    "resolve_with_query",
]
