"""
Services Package

Exports all services for easy importing.
"""

from catalog_admin.services.uploads import (
    CloudinaryStore, ImageUploader, UploadError, UploadedImage, get_uploader, init_uploads
)

__all__ = [
    'CloudinaryStore',
    'ImageUploader',
    'UploadError',
    'UploadedImage',
    'get_uploader',
    'init_uploads',
]
