# vasstra/repositories/json_repo.py
import json
import logging
from typing import Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from vasstra.core.storage import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class JsonListRepository(Generic[T]):
    """
    Persist a list of pydantic records as one JSON array under a fixed key.

    Contract:
      - load()  -> the stored list, or [] when the key is missing or the
                   payload cannot be parsed (corrupt data is not fatal)
      - save()  -> overwrite the key with the full snapshot

    Last write wins; there is no merge with concurrent writers.
    """

    def __init__(self, store: KeyValueStore, key: str, model: type[T]):
        self.store = store
        self.key = key
        self.model = model
        self._adapter = TypeAdapter(list[model])

    def load(self) -> list[T]:
        raw = self.store.get(self.key)
        if not raw:
            return []
        try:
            return self._adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Discarding malformed data under '{self.key}': {e}")
            return []

    def save(self, items: list[T]) -> None:
        payload = [item.model_dump(mode="json", by_alias=True) for item in items]
        self.store.set(self.key, json.dumps(payload))
