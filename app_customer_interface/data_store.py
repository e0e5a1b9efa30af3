# app_customer_interface/data_store.py
"""
Table-oriented access to the persisted entities.

The ordering core never touches model classes directly; it talks to the
``restaurants``, ``dishes``, ``orders`` and ``profiles`` tables through
:class:`DataStore`, which answers with plain row dictionaries. Every failure
coming out of the ORM is re-raised as :class:`StoreError`.
"""
import logging

from django.apps import apps
from django.core.exceptions import FieldDoesNotExist, FieldError, ValidationError
from django.db import DatabaseError

logger = logging.getLogger(__name__)

TABLES = {
    'restaurants': 'app_owner_admin_panel.Restaurant',
    'dishes': 'app_owner_admin_panel.Dish',
    'orders': 'app_customer_interface.Order',
    'profiles': 'app_owner_admin_panel.Profile',
}


class StoreError(Exception):
    """A read or write against the data store failed."""

    def __init__(self, message, table=None):
        super().__init__(message)
        self.table = table


class RowNotFound(StoreError):
    pass


class DataStore:

    def _model(self, table):
        try:
            return apps.get_model(TABLES[table])
        except KeyError:
            raise StoreError(f"Unknown table '{table}'", table=table)

    def _queryset(self, table, filters=None, order_by=None):
        model = self._model(table)
        try:
            queryset = model.objects.filter(**(filters or {}))
            if order_by:
                if isinstance(order_by, str):
                    order_by = [order_by]
                queryset = queryset.order_by(*order_by)
        except (FieldError, ValueError, ValidationError) as e:
            raise StoreError(f"Invalid query on '{table}': {e}", table=table) from e
        return queryset

    def insert(self, table, row):
        """Insert one row and return ``{'id': <generated id>}``."""
        model = self._model(table)
        try:
            instance = model(**row)
            instance.full_clean()
            instance.save(force_insert=True)
        except (TypeError, ValueError, ValidationError, DatabaseError) as e:
            logger.warning("Insert into %s failed: %s", table, e)
            raise StoreError(f"Insert into '{table}' failed", table=table) from e
        return {'id': instance.pk}

    def select(self, table, filters=None, order_by=None, limit=None, columns=None, annotate=None):
        """
        Matching rows as dictionaries. ``annotate`` maps extra column names
        to aggregate expressions computed per row, e.g. ``Count('dishes')``.
        """
        queryset = self._queryset(table, filters, order_by)
        try:
            if annotate:
                queryset = queryset.annotate(**annotate)
                if columns:
                    columns = tuple(columns) + tuple(annotate)
            rows = queryset.values(*(columns or ()))
            if limit is not None:
                rows = rows[:limit]
            return list(rows)
        except (FieldError, ValueError, ValidationError, DatabaseError) as e:
            logger.warning("Select from %s failed: %s", table, e)
            raise StoreError(f"Select from '{table}' failed", table=table) from e

    def single(self, table, filters, columns=None):
        """Exactly one row, :class:`RowNotFound` when nothing matches."""
        rows = self.select(table, filters, columns=columns, limit=2)
        if not rows:
            raise RowNotFound(f"No row in '{table}' matches {filters}", table=table)
        if len(rows) > 1:
            raise StoreError(f"More than one row in '{table}' matches {filters}", table=table)
        return rows[0]

    def update(self, table, patch, filters):
        """Apply ``patch`` to every matching row; returns the number of rows changed."""
        model = self._model(table)
        queryset = self._queryset(table, filters)
        try:
            cleaned = {}
            for name, value in patch.items():
                field = model._meta.get_field(name)
                cleaned[name] = field.clean(value, None)
            return queryset.update(**cleaned)
        except FieldDoesNotExist as e:
            raise StoreError(f"Unknown column in update of '{table}': {e}", table=table) from e
        except (ValidationError, ValueError, DatabaseError) as e:
            logger.warning("Update of %s failed: %s", table, e)
            raise StoreError(f"Update of '{table}' failed", table=table) from e

    def count(self, table, filters=None):
        queryset = self._queryset(table, filters)
        try:
            return queryset.count()
        except (FieldError, ValueError, ValidationError, DatabaseError) as e:
            raise StoreError(f"Count on '{table}' failed", table=table) from e

    def delete(self, table, filters):
        """Delete matching rows one by one so model clean-up hooks run."""
        queryset = self._queryset(table, filters)
        deleted = 0
        try:
            for instance in queryset:
                instance.delete()
                deleted += 1
        except (ValidationError, DatabaseError) as e:
            raise StoreError(f"Delete from '{table}' failed", table=table) from e
        return deleted


_default_store = None


def get_store():
    global _default_store
    if _default_store is None:
        _default_store = DataStore()
    return _default_store
