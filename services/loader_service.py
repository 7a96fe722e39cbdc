"""
Batch loader: search, fetch and persist every restaurant and menu, then
normalize the item catalog and write it with the per-menu facts.
"""

import logging
import time
from dataclasses import dataclass

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.config import Settings
from domain.models import fast_load, init_database, reset_database
from domain.schemas import Restaurant, SearchEmbeds, SearchQuery
from repositories import CatalogRepository, MenuRepository, RestaurantRepository
from services.catalog_service import optimize_items
from services.fetch_service import DEFAULT_WORKER_COUNT, FetchScheduler

logger = logging.getLogger("chipotle.loader")


@dataclass(frozen=True)
class LoadSummary:
    """Counts reported at the end of a run"""

    restaurants: int
    menus: int
    failed_menus: int
    items: int
    elapsed_sec: float


def build_default_query(cfg: Settings) -> SearchQuery:
    """Query covering every open restaurant around the configured origin, all embeds on"""
    return SearchQuery(
        latitude=cfg.search_latitude,
        longitude=cfg.search_longitude,
        radius=cfg.search_radius,
        restaurant_statuses=cfg.search_restaurant_statuses,
        concept_ids=cfg.search_concept_ids,
        order_by=cfg.search_order_by,
        order_by_descending=False,
        page_size=cfg.search_page_size,
        page_index=0,
        embeds=SearchEmbeds(
            address_types=["MAIN"],
            real_hours=True,
            directions=True,
            catering=True,
            online_ordering=True,
            timezone=True,
            marketing=True,
            chipotlane=True,
            sustainability=True,
            experience=True,
        ),
    )


class LoaderService:
    """
    Runs the phases of one load in a fixed order.

    The store is reset only after the search succeeded. Normalization starts
    after every fetch worker has finished. Search and persistence errors
    propagate to the caller; menu fetch errors are skipped by the pool.
    """

    def __init__(
        self,
        client,
        engine: Engine,
        worker_count: int = DEFAULT_WORKER_COUNT,
        fast_load_pragmas: bool = True,
    ):
        """
        Args:
            client: Object with search(query) and get_menu(restaurant_number)
            engine: Engine of the destination store
            worker_count: Concurrent menu fetch workers
            fast_load_pragmas: Relax SQLite durability during the load
        """
        self.client = client
        self.engine = engine
        self.worker_count = worker_count
        self.fast_load_pragmas = fast_load_pragmas
        self.session_factory = sessionmaker(bind=engine, future=True)

    def run(self, query: SearchQuery) -> LoadSummary:
        started = time.monotonic()

        logger.info("Searching for restaurants...")
        restaurants = self.client.search(query)
        logger.info("Total restaurants: %d", len(restaurants))

        reset_database(self.engine)
        logger.info("Creating tables...")
        init_database(self.engine)

        with fast_load(self.engine, enabled=self.fast_load_pragmas):
            logger.info("Fetching menus and inserting restaurants...")
            scheduler = FetchScheduler(
                persist_restaurant=self._persist_restaurant,
                fetch_menu=self.client.get_menu,
                worker_count=self.worker_count,
            )
            menus = scheduler.run(restaurants)

            logger.info("Optimizing items...")
            optimized = optimize_items(menus)

            with self.session_factory() as session:
                logger.info("Inserting optimized items into the database...")
                CatalogRepository(session).insert_optimized_items(optimized)

                logger.info("Inserting menus into the database...")
                self._insert_menus(session, menus, optimized)

        summary = LoadSummary(
            restaurants=len(restaurants),
            menus=len(menus),
            failed_menus=scheduler.failed_fetches,
            items=len(optimized.items),
            elapsed_sec=round(time.monotonic() - started, 3),
        )
        logger.info(
            "Loaded %d restaurants, %d menus (%d failed), %d items in %.1fs",
            summary.restaurants,
            summary.menus,
            summary.failed_menus,
            summary.items,
            summary.elapsed_sec,
        )
        return summary

    def _persist_restaurant(self, restaurant: Restaurant) -> int:
        # Called by fetch workers while holding the database lock
        with self.session_factory() as session:
            return RestaurantRepository(session).insert_restaurant(restaurant)

    @staticmethod
    def _insert_menus(session, menus, optimized):
        repo = MenuRepository(session)
        for menu in menus:
            repo.insert_menu(menu, optimized)
