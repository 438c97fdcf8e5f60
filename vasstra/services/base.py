# vasstra/services/base.py
from typing import Callable, Generic, TypeVar

from pydantic import BaseModel

from vasstra.repositories.json_repo import JsonListRepository

T = TypeVar("T", bound=BaseModel)


class PersistentListStore(Generic[T]):
    """
    In-memory list of records mirrored to a JsonListRepository.

    - hydrate once from the repository on construction
    - every mutation goes through _commit(), which persists the full
      snapshot synchronously and then notifies subscribers
    """

    def __init__(self, repo: JsonListRepository[T]):
        self.repo = repo
        self._items: list[T] = repo.load()
        self._listeners: list[Callable[["PersistentListStore[T]"], None]] = []

    @property
    def items(self) -> list[T]:
        return list(self._items)

    def subscribe(
        self, listener: Callable[["PersistentListStore[T]"], None]
    ) -> Callable[[], None]:
        """
        Register a change listener. Returns a callable that unsubscribes it.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, items: list[T]) -> None:
        self._items = items
        self.repo.save(self._items)
        for listener in list(self._listeners):
            listener(self)
