"""
Menu fetch scheduling: a fixed pool of worker threads drains a queue of
restaurants, persisting each one and then fetching its menu.

Two independent locks are involved. Restaurant writes are serialized by the
database lock; appends to the fetched menu collection by the pool's own lock.
Neither is held across network I/O.
"""

import logging
import queue
import threading
from typing import Callable, Iterable, List, Optional

from app.exceptions import ApiError, PersistenceError
from domain.schemas import Menu, Restaurant

logger = logging.getLogger("chipotle.fetch")

DEFAULT_WORKER_COUNT = 75

_CLOSED = object()


class MenuPool:
    """Append-only, thread-safe collection of fetched menus"""

    def __init__(self):
        self._menus: List[Menu] = []
        self._lock = threading.Lock()

    def append(self, menu: Menu):
        with self._lock:
            self._menus.append(menu)

    def snapshot(self) -> List[Menu]:
        with self._lock:
            return list(self._menus)

    def __len__(self) -> int:
        with self._lock:
            return len(self._menus)


class FetchScheduler:
    """
    Bounded worker pool over a shared restaurant queue.

    Menu fetch failures of any kind are logged and skipped. Any failure while
    persisting a restaurant is fatal: workers stop taking work and run()
    raises it once every worker has exited.
    """

    def __init__(
        self,
        persist_restaurant: Callable[[Restaurant], object],
        fetch_menu: Callable[[int], Menu],
        worker_count: int = DEFAULT_WORKER_COUNT,
        db_lock: Optional[threading.Lock] = None,
    ):
        if worker_count < 1:
            raise ValueError("worker_count must be at least 1")
        self.persist_restaurant = persist_restaurant
        self.fetch_menu = fetch_menu
        self.worker_count = worker_count
        self.db_lock = db_lock or threading.Lock()
        self.failed_fetches = 0

        self._counter_lock = threading.Lock()
        self._stop = threading.Event()
        self._fatal: Optional[BaseException] = None

    def run(self, restaurants: Iterable[Restaurant]) -> List[Menu]:
        """
        Persist every restaurant and fetch its menu.

        Blocks until the queue is drained and all workers have exited.

        Returns:
            Fetched menus, in completion order

        Raises:
            PersistenceError: If any restaurant could not be written
        """
        work: "queue.Queue" = queue.Queue()
        pool = MenuPool()
        self._stop.clear()
        self._fatal = None
        self.failed_fetches = 0

        workers = [
            threading.Thread(
                target=self._work,
                args=(work, pool),
                name=f"menu-fetch-{i}",
                daemon=True,
            )
            for i in range(self.worker_count)
        ]
        for worker in workers:
            worker.start()

        for restaurant in restaurants:
            work.put(restaurant)
        # Close the queue: one marker per worker
        for _ in workers:
            work.put(_CLOSED)

        for worker in workers:
            worker.join()

        if self._fatal is not None:
            if isinstance(self._fatal, PersistenceError):
                raise self._fatal
            raise PersistenceError(
                f"error inserting restaurant: {self._fatal}"
            ) from self._fatal

        menus = pool.snapshot()
        logger.info(
            "Fetched %d menus (%d fetch failures)", len(menus), self.failed_fetches
        )
        return menus

    def _work(self, work: "queue.Queue", pool: MenuPool):
        while True:
            restaurant = work.get()
            if restaurant is _CLOSED:
                return
            if self._stop.is_set():
                continue

            try:
                with self.db_lock:
                    self.persist_restaurant(restaurant)
            except Exception as exc:
                self._fail(restaurant, exc)
                return

            try:
                menu = self.fetch_menu(restaurant.restaurant_number)
            except ApiError as exc:
                logger.warning(
                    "Error getting menu for restaurant %s: %s",
                    restaurant.display_name,
                    exc,
                )
                self._count_failed_fetch()
                continue
            except Exception:
                # Nothing raised by a fetch may end the worker
                logger.exception(
                    "Unexpected error getting menu for restaurant %s",
                    restaurant.display_name,
                )
                self._count_failed_fetch()
                continue

            pool.append(menu)

    def _count_failed_fetch(self):
        with self._counter_lock:
            self.failed_fetches += 1

    def _fail(self, restaurant: Restaurant, exc: Exception):
        logger.error(
            "Failed to insert restaurant %s: %s", restaurant.display_name, exc
        )
        with self._counter_lock:
            if self._fatal is None:
                self._fatal = exc
        self._stop.set()
