# storefront/services/asset_storage.py
import os
import time
import uuid
from pathlib import Path

from storefront.domain.errors import ValidationError
from storefront.utils.settings import UPLOAD_DIR, PUBLIC_BASE_URL
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class AssetStorage:
    """Zapisuje obrazki produktow na dysku i zwraca ich publiczny URL."""

    def __init__(self, directory: str | None = None, base_url: str | None = None):
        self.directory = Path(directory or UPLOAD_DIR)
        self.base_url = (base_url or PUBLIC_BASE_URL).rstrip("/")

    def save(self, field_name: str, original_name: str | None, data: bytes) -> str:
        if not data:
            raise ValidationError("No file uploaded.")

        ext = os.path.splitext(original_name or "")[1].lower()
        #sufiks - dwa uploady w tej samej ms nie nadpisza sie
        filename = f"{field_name}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}{ext}"

        self.directory.mkdir(parents=True, exist_ok=True)
        (self.directory / filename).write_bytes(data)

        logger.info(f"Stored upload {filename} ({len(data)} bytes)")
        return f"{self.base_url}/images/{filename}"
