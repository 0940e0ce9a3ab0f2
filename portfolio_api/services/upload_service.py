import logging
import secrets
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from portfolio_api.core.exceptions import BadRequestException, InternalServerErrorException, NotFoundException

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif", ".webp"}
ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}


class UploadService:
    """Stores uploaded images on local disk, served under /uploads"""

    def __init__(self, upload_dir: str, max_size: int):
        """
        Initialize upload service.

        Args:
            upload_dir: Directory the files are written to (created on demand)
            max_size: Largest accepted file in bytes
        """
        self.upload_dir = Path(upload_dir)
        self.max_size = max_size

    def _resolve(self, filename: str) -> Path:
        """Path of a stored file, refusing anything outside the upload dir"""
        if not filename or Path(filename).name != filename or filename in (".", ".."):
            raise BadRequestException("Invalid filename")
        return self.upload_dir / filename

    def save_image(self, original_name: Optional[str], content_type: Optional[str], content: bytes) -> dict:
        """
        Validate and store one image

        Returns:
            dict: filename, original_name and size of the stored file

        Raises:
            BadRequestException: Empty upload, not an image or too large
        """
        if not content:
            raise BadRequestException("No file uploaded")

        extension = Path(original_name or "").suffix.lower()
        if extension not in ALLOWED_EXTENSIONS or (content_type or "").lower() not in ALLOWED_CONTENT_TYPES:
            raise BadRequestException("Only image files are allowed!")

        if len(content) > self.max_size:
            raise BadRequestException(f"File too large, the limit is {self.max_size // (1024 * 1024)}MB")

        filename = f"image-{int(time.time() * 1000)}-{secrets.randbelow(10 ** 9)}{extension}"
        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            (self.upload_dir / filename).write_bytes(content)
        except OSError as e:
            raise InternalServerErrorException(f"Failed to store upload {filename}: {e}")
        logger.info("Stored upload %s (%d bytes)", filename, len(content))

        return {
            "filename": filename,
            "original_name": original_name,
            "size": len(content),
        }

    def list_files(self) -> List[dict]:
        if not self.upload_dir.is_dir():
            return []
        files = []
        for path in sorted(self.upload_dir.iterdir()):
            if not path.is_file():
                continue
            stat = path.stat()
            files.append({
                "name": path.name,
                "size": stat.st_size,
                "created": datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            })
        return files

    def delete_file(self, filename: str) -> None:
        path = self._resolve(filename)
        if not path.is_file():
            raise NotFoundException("File not found")
        path.unlink()
        logger.info("Deleted upload %s", filename)
