"""
Export artifacts: written locally, optionally copied to a GCS bucket.

The local file is never removed; the uploaded object is a copy under
exports/<run-id>/<file name>.
"""

import os
from datetime import datetime, timezone
from typing import Optional, Union

from google.cloud import storage

from url_harvester.config import get_config
from url_harvester.utils.logger import setup_logger

logger = setup_logger()


class StorageManager:
    def __init__(self, base_path: Optional[str] = None, bucket_name: Optional[str] = None):
        config = get_config()
        # default home for artifacts when the caller gives no path
        self.base_path = base_path or config.cache_dir

        self.bucket_name = (bucket_name if bucket_name is not None else config.gcs_bucket).strip()
        self.client = None
        self.bucket = None

        if self.bucket_name:
            try:
                self.client = storage.Client()
                self.bucket = self.client.bucket(self.bucket_name)
                logger.info(f"GCS enabled → bucket: {self.bucket_name}")
            except Exception as e:
                logger.error(f"Could not init GCS client: {e}")

    def default_path(self, filename: str) -> str:
        return os.path.join(self.base_path, filename)

    def save_file(self, path: str, content: Union[str, bytes]) -> str:
        """Write content to exactly `path`, creating parent directories."""
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)

        if isinstance(content, bytes):
            with open(path, "wb") as f:
                f.write(content)
        else:
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        logger.info(f"Saved locally: {path}")
        return path

    def upload_file(self, local_path: str) -> Optional[str]:
        """
        Copy one local artifact to the bucket.

        Returns:
            gs:// URI of the uploaded object, or None when GCS is not
            configured or the upload failed.
        """
        if not self.bucket:
            logger.info("Skipping GCS upload: bucket not configured.")
            return None

        run_id = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S")
        remote_path = f"exports/{run_id}/{os.path.basename(local_path)}"
        uri = f"gs://{self.bucket_name}/{remote_path}"

        try:
            self.bucket.blob(remote_path).upload_from_filename(local_path)
        except Exception as e:
            logger.error(f"Upload failed ({local_path}): {e}")
            return None

        logger.info(f"Uploaded {local_path} → {uri}")
        return uri
