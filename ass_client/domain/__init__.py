"""
Domain layer: account credentials, URL signing and storage records.
"""

from .account import Account
from .document import AssData
from .records import FileData, ImageData
from .signing import access_token, sign_url

__all__ = [
    "Account",
    "AssData",
    "FileData",
    "ImageData",
    "access_token",
    "sign_url",
]
