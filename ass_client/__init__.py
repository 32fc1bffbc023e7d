"""Client library for Aptoma Smooth Storage.

Example::

    from ass_client import Account, create_client

    account = Account.create("https://url-to-storage", "account-name", "secretkey")
    with create_client(account=account) as client:
        image_url = client.get_image_url(123)
        image_data = client.get_image_information(123)
        file_data = client.upload_file("/data/file.pdf", "destination/")
"""

from ass_client.common.errors import (
    AssError,
    AssErrorKind,
    InvalidAccountFileError,
    InvalidFileNameError,
    InvalidUrlError,
    IOFailureError,
    JsonError,
    NotFoundError,
    PermissionDeniedError,
    TransportError,
    UrlDoesNotMatchAccountError,
)
from ass_client.common.paths import filename_of
from ass_client.domain import Account, AssData, FileData, ImageData, access_token, sign_url
from ass_client.infra.http import HttpClient, HttpResponse, MultipartFile, RequestsHttpClient
from ass_client.services import AssClient, FileService, ImageService, create_client

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AssClient",
    "AssData",
    "AssError",
    "AssErrorKind",
    "FileData",
    "FileService",
    "HttpClient",
    "HttpResponse",
    "ImageData",
    "ImageService",
    "IOFailureError",
    "InvalidAccountFileError",
    "InvalidFileNameError",
    "InvalidUrlError",
    "JsonError",
    "MultipartFile",
    "NotFoundError",
    "PermissionDeniedError",
    "RequestsHttpClient",
    "TransportError",
    "UrlDoesNotMatchAccountError",
    "access_token",
    "create_client",
    "filename_of",
    "sign_url",
]
