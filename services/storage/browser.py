"""
Browser storage backend.

Keeps values in the viewer's localStorage through the
streamlit-local-storage component, so the list lives on the user's
machine and survives page reloads.

The component answers through a Streamlit rerun: in the run where it is
first rendered it only returns its default (an empty dict), which cannot
be told apart from an empty localStorage. Reads in that run raise
StorageNotReady; the browser's values are read from the next run on.
"""

import json
import logging
from itertools import count
from typing import Any, Optional

from streamlit_local_storage import LocalStorage

from services.storage.base import StorageError, StorageGateway, StorageNotReady

logger = logging.getLogger(__name__)


class BrowserLocalStorage(StorageGateway):
    """localStorage gateway. Values are stored as JSON strings."""

    def __init__(self):
        self._local_storage: Optional[LocalStorage] = None
        # True once the component was rendered in an earlier script run
        self._browser_answered = False
        # Each component call in a script run needs its own widget key
        self._write_counter = count()

    @property
    def backend_name(self) -> str:
        return "browser"

    def refresh(self) -> None:
        """Drop the component from the previous run so its latest values are read."""
        if self._local_storage is not None:
            self._browser_answered = True
            self._local_storage = None

    def _get_local_storage(self) -> LocalStorage:
        """Render the component once per script run."""
        if self._local_storage is None:
            self._local_storage = LocalStorage()
        return self._local_storage

    async def get(self, key: str) -> Optional[Any]:
        try:
            local_storage = self._get_local_storage()
            if not self._browser_answered:
                raise StorageNotReady("Browser storage has not answered yet")
            raw = local_storage.getItem(key)
        except StorageNotReady:
            logger.debug(f"localStorage not ready for key '{key}', waiting for the next run")
            raise
        except Exception as e:
            logger.error(f"localStorage read failed for key '{key}': {e}")
            raise StorageError(f"Could not read '{key}' from browser storage") from e

        if raw is None:
            return None
        if isinstance(raw, str):
            try:
                return json.loads(raw)
            except json.JSONDecodeError:
                logger.warning(f"localStorage value for '{key}' is not JSON, using raw string")
                return raw
        return raw

    async def set(self, key: str, value: Any) -> None:
        encoded = json.dumps(value, ensure_ascii=False)
        try:
            self._get_local_storage().setItem(
                key,
                encoded,
                key=f"set_{key}_{next(self._write_counter)}"
            )
        except Exception as e:
            logger.error(f"localStorage write failed for key '{key}': {e}")
            raise StorageError(f"Could not save '{key}' to browser storage") from e
