"""
Local disk storage for uploaded images.
"""
import logging
import secrets
import time
from pathlib import Path
from typing import Dict, Optional, Union

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from .config import settings

logger = logging.getLogger(__name__)

# Stored extension per accepted MIME type; the client filename is never trusted
IMAGE_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}
ALLOWED_IMAGE_TYPES = list(IMAGE_EXTENSIONS)
UPLOADS_URL_PREFIX = "/uploads"


class UploadError(ValueError):
    """Rejected upload: missing file, wrong type or too large."""


def build_filename(prefix: str, content_type: str) -> str:
    """
    <prefix>-<epoch ms>-<random><ext>, the extension derived from the
    accepted content type.
    """
    ext = IMAGE_EXTENSIONS[content_type]
    return f"{prefix}-{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{ext}"


async def save_image(
    upload: Optional[UploadFile],
    prefix: str = "image",
    upload_dir: Optional[Union[str, Path]] = None,
    max_bytes: Optional[int] = None,
) -> Dict[str, Union[str, int]]:
    """
    Validate and store an uploaded image.

    Returns:
        {"url", "filename", "originalname", "size"}; url is the public path

    Raises:
        UploadError: If no file was sent, the MIME type is not an allowed
            image type, or the file exceeds the size limit
    """
    if upload is None or not upload.filename:
        raise UploadError("No file uploaded")

    if upload.content_type not in ALLOWED_IMAGE_TYPES:
        raise UploadError("Unsupported file format. Allowed formats: JPG, PNG, GIF, WEBP.")

    max_bytes = max_bytes if max_bytes is not None else settings.MAX_UPLOAD_BYTES
    content = await upload.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise UploadError(f"File too large. Maximum size is {max_bytes // (1024 * 1024)} MB.")

    target_dir = Path(upload_dir) if upload_dir is not None else settings.upload_path
    target_dir.mkdir(parents=True, exist_ok=True)

    filename = build_filename(prefix, upload.content_type)
    await run_in_threadpool((target_dir / filename).write_bytes, content)
    logger.info(f"[UPLOADS] Stored {upload.filename} as {filename} ({len(content)} bytes)")

    return {
        "url": f"{UPLOADS_URL_PREFIX}/{filename}",
        "filename": filename,
        "originalname": upload.filename,
        "size": len(content),
    }
