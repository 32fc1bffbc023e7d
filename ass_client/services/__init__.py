from .base import BaseService
from .bundle import AssClient, create_client
from .file_service import FileService
from .image_service import ImageService

__all__ = [
    "AssClient",
    "BaseService",
    "FileService",
    "ImageService",
    "create_client",
]
