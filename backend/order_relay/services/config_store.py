import threading
from typing import Any

from ..errors import NotFoundError, ValidationError
from ..schemas import ClientConfig


class ConfigStore:
    """
    In-memory mapping of clientId -> ClientConfig.

    Lives as long as the process; nothing is persisted and entries are never
    removed. Concurrent writers to the same clientId race, the last write wins.
    """

    def __init__(self) -> None:
        self._configs: dict[str, ClientConfig] = {}
        self._lock = threading.Lock()

    def set_config(self, client_id: Any, key: Any, version: Any, token: Any) -> ClientConfig:
        if not client_id:
            raise ValidationError("clientId is required")
        if not isinstance(key, str) or not isinstance(version, str) or not isinstance(token, str):
            raise ValidationError("key/version/token must be strings")

        # JSON numbers are accepted as ids; store them under their string form
        # so that `GET /api/config?clientId=...` finds them.
        conf = ClientConfig(client_id=str(client_id), key=key, version=version, token=token)
        with self._lock:
            self._configs[conf.client_id] = conf
        return conf.model_copy()

    def find(self, client_id: Any) -> ClientConfig | None:
        """Return a copy of the stored config, or None if there is none."""
        if not client_id:
            return None
        with self._lock:
            conf = self._configs.get(str(client_id))
        return conf.model_copy() if conf is not None else None

    def get_config(self, client_id: Any) -> ClientConfig:
        conf = self.find(client_id)
        if conf is None:
            raise NotFoundError("config not found")
        return conf

    def __len__(self) -> int:
        with self._lock:
            return len(self._configs)
