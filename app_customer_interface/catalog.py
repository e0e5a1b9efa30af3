# app_customer_interface/catalog.py
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .data_store import RowNotFound, StoreError
from .records import DishRecord, RecordError, RestaurantRecord

logger = logging.getLogger(__name__)

RESTAURANT_NOT_FOUND = "Restaurant not found"
MENU_LOAD_FAILED = "Failed to load menu"
RESTAURANTS_LOAD_FAILED = "Failed to load restaurants"

RESTAURANT_COLUMNS = ('id', 'name', 'location')


@dataclass
class Catalog:
    restaurant: Optional[RestaurantRecord] = None
    dishes: List[DishRecord] = field(default_factory=list)
    notices: List[str] = field(default_factory=list)

    def dish(self, dish_id):
        dish_id = str(dish_id)
        for dish in self.dishes:
            if dish.id == dish_id:
                return dish
        return None


def _dish_records(rows):
    dishes = []
    for row in rows:
        try:
            dishes.append(DishRecord.from_row(row))
        except RecordError as e:
            logger.warning("Skipping malformed dish row %s: %s", row.get('id'), e)
    return dishes


def load_catalog(store, restaurant_id):
    """
    A restaurant and the dishes it currently offers, ordered by name.

    Store failures never escape: they come back as notices, with the
    restaurant left as None or the dish list left empty.
    """
    catalog = Catalog()
    try:
        row = store.single('restaurants', {'id': restaurant_id}, columns=RESTAURANT_COLUMNS)
        catalog.restaurant = RestaurantRecord.from_row(row)
    except (StoreError, RecordError) as e:
        if not isinstance(e, RowNotFound):
            logger.error("Failed to load restaurant %s: %s", restaurant_id, e)
        catalog.notices.append(RESTAURANT_NOT_FOUND)
        return catalog

    try:
        rows = store.select(
            'dishes',
            {'restaurant_id': restaurant_id, 'availability': True},
            order_by='name',
        )
    except StoreError as e:
        logger.error("Failed to load dishes for restaurant %s: %s", restaurant_id, e)
        catalog.notices.append(MENU_LOAD_FAILED)
        return catalog

    catalog.dishes = _dish_records(rows)
    return catalog


def list_restaurants(store):
    """Every restaurant ordered by name, plus any notices."""
    try:
        rows = store.select('restaurants', order_by='name', columns=RESTAURANT_COLUMNS)
    except StoreError as e:
        logger.error("Failed to load restaurants: %s", e)
        return [], [RESTAURANTS_LOAD_FAILED]
    restaurants = []
    for row in rows:
        try:
            restaurants.append(RestaurantRecord.from_row(row))
        except RecordError as e:
            logger.warning("Skipping malformed restaurant row %s: %s", row.get('id'), e)
    return restaurants, []
