"""
Trace payload acquisition and the last-loaded payload.
"""

import threading
from typing import Optional

import requests

from ..utils.logging import get_logger

logger = get_logger(__name__)


class PayloadSession:
    """
    Owns the most recently loaded trace payload.

    A payload arrives either from a local file or from a remote URL. A failed
    remote fetch leaves the previous payload in place. ``lock`` serialises
    analysis runs so only one run works on the session at a time.

    Args:
        fetch_timeout: Seconds to wait for a remote fetch, None to wait indefinitely
    """

    def __init__(self, fetch_timeout: Optional[float] = None):
        self.fetch_timeout = fetch_timeout
        self.last_payload = ""
        self.last_source: Optional[str] = None
        self.lock = threading.Lock()

    def set_payload(self, payload: str, source: Optional[str] = None) -> str:
        """Replace the last-loaded payload."""
        self.last_payload = payload
        self.last_source = source
        return payload

    def load_file(self, file_path: str) -> str:
        """
        Read a UTF-8 trace file and make it the last-loaded payload.

        Args:
            file_path: Path to the CSV file

        Returns:
            The file contents
        """
        with open(file_path, 'r', encoding='utf-8') as f:
            payload = f.read()
        return self.set_payload(payload, file_path)

    def load_bytes(self, data: bytes, source: Optional[str] = None) -> str:
        """Decode an uploaded UTF-8 payload and make it the last-loaded payload."""
        return self.set_payload(data.decode('utf-8', errors='replace'), source)

    def fetch_remote(self, url: str) -> Optional[str]:
        """
        Fetch a payload from a URL.

        Args:
            url: Location of the CSV payload

        Returns:
            The response body on a 2xx response, None on any failure
        """
        try:
            response = requests.get(url, timeout=self.fetch_timeout)
        except requests.RequestException as exc:
            logger.debug("Remote fetch of %s failed: %s", url, exc)
            return None

        if not 200 <= response.status_code < 300:
            logger.debug("Remote fetch of %s returned HTTP %d", url, response.status_code)
            return None

        return response.text

    def resolve(self, csv_url: Optional[str] = None) -> str:
        """
        Return the payload to analyze.

        When a URL is given and the fetch succeeds its body becomes the
        last-loaded payload; otherwise the previous payload is returned.

        Args:
            csv_url: Optional remote payload location

        Returns:
            Payload text, empty when nothing was ever loaded
        """
        if csv_url:
            fetched = self.fetch_remote(csv_url)
            if fetched is not None:
                self.set_payload(fetched, csv_url)
        return self.last_payload
