"""
Image Upload Service

Sends product images to the remote blob store (Cloudinary) and deletes them
again. Image handling is best-effort: callers log failures and carry on.
"""

import io
import logging
from collections import namedtuple

import cloudinary.uploader
from flask import current_app

logger = logging.getLogger(__name__)

UploadedImage = namedtuple('UploadedImage', ['url', 'public_id'])


class UploadError(Exception):
    """The blob store did not accept an upload or a delete."""


class CloudinaryStore:
    """Cloudinary blob store.

    Credentials are passed with every call instead of through the global
    `cloudinary.config`, so each app instance carries its own account.
    """

    def __init__(self, cloud_name, api_key, api_secret):
        self._options = {
            'cloud_name': cloud_name,
            'api_key': api_key,
            'api_secret': api_secret,
        }

    @property
    def configured(self):
        return all(self._options.values())

    def upload(self, data, folder):
        return cloudinary.uploader.upload(io.BytesIO(data), folder=folder,
                                          resource_type='image', **self._options)

    def delete(self, public_id):
        result = cloudinary.uploader.destroy(public_id, **self._options)
        outcome = result.get('result')
        if outcome == 'not found':
            logger.warning('Image %s was already gone from Cloudinary', public_id)
        elif outcome != 'ok':
            raise UploadError(f'Cloudinary refused to delete {public_id}: {outcome}')
        return result


def _read_part(part):
    """Buffer one multipart file part; None and missing parts read as empty."""
    if part is None:
        return b''
    if isinstance(part, (bytes, bytearray)):
        return bytes(part)
    return part.read() or b''


class ImageUploader:
    """Upload pipeline for product images.

    Args:
        store: blob store exposing `upload(data, folder)` returning a mapping
            with `secure_url` and `public_id`, and `delete(public_id)`.
        folder: logical folder the images are filed under.
    """

    def __init__(self, store, folder='products'):
        self.store = store
        self.folder = folder

    def upload(self, part):
        """Upload a file part.

        The part is read into memory once; the emptiness check and the upload
        both use that buffer. Returns None when the part is empty (the form
        was sent without a file), an UploadedImage otherwise.

        Raises:
            UploadError: the store failed or answered without a URL/handle.
        """
        data = _read_part(part)
        if not data:
            return None

        try:
            result = self.store.upload(data, self.folder)
        except Exception as e:
            logger.warning('Image upload to folder %r failed: %s', self.folder, e)
            raise UploadError(str(e)) from e

        try:
            return UploadedImage(url=result['secure_url'], public_id=result['public_id'])
        except (KeyError, TypeError) as e:
            raise UploadError(f'unexpected upload response: {result!r}') from e

    def delete(self, public_id):
        """Delete a remote image. Failures are logged, never raised."""
        try:
            self.store.delete(public_id)
        except Exception:
            logger.exception('Could not delete image %s from the blob store', public_id)
            return False
        return True


def init_uploads(app, store=None):
    """Build the app's ImageUploader from its config.

    `store` overrides the Cloudinary store (tests pass an in-memory fake).
    """
    if store is None:
        store = CloudinaryStore(
            cloud_name=app.config.get('CLOUDINARY_CLOUD_NAME'),
            api_key=app.config.get('CLOUDINARY_API_KEY'),
            api_secret=app.config.get('CLOUDINARY_API_SECRET'),
        )
        if not store.configured:
            app.logger.warning('Cloudinary credentials are not set; image uploads will fail')

    app.extensions['image_uploader'] = ImageUploader(store, folder=app.config['UPLOAD_FOLDER_NAME'])


def get_uploader():
    return current_app.extensions['image_uploader']
