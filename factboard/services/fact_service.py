import logging
import math
from dataclasses import dataclass, field
from flask import current_app, has_app_context
from factboard.errors import EmptyDatasetError
from factboard.services.fact_store import FactOrder, FactStore

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10


@dataclass
class Page:
    page_index: int
    page_size: int
    total_items: int
    items: list = field(default_factory=list)

    @property
    def total_pages(self):
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_items / self.page_size)

    def to_dict(self):
        return {
            'items': [item.to_dict() for item in self.items],
            'page_index': self.page_index,
            'page_size': self.page_size,
            'total_items': self.total_items,
            'total_pages': self.total_pages,
        }


class FactService:
    def __init__(self, store=None, page_size=None):
        self.store = store or FactStore()
        self._page_size = page_size

    @property
    def page_size(self):
        if self._page_size is not None:
            return self._page_size
        if has_app_context():
            return int(current_app.config.get('PAGE_SIZE', DEFAULT_PAGE_SIZE))
        return DEFAULT_PAGE_SIZE

    def list_facts(self, order=FactOrder.ALPHABETICAL, descending=False, page_index=0):
        """Return one page of facts sorted by ``order``."""
        order = FactOrder.parse(order)
        page_index = int(page_index)
        if page_index < 0:
            raise ValueError("page_index must be >= 0")

        page_size = self.page_size
        items, total = self.store.list_ordered(
            order,
            descending=descending,
            skip=page_index * page_size,
            take=page_size,
        )
        if total == 0:
            raise EmptyDatasetError()

        logger.debug(
            "Listed %s facts (order=%s desc=%s page=%s total=%s)",
            len(items), order.name, descending, page_index, total,
        )
        return Page(page_index=page_index, page_size=page_size, total_items=total, items=items)

    def get(self, fact_id):
        return self.store.get(fact_id)

    def like(self, fact_id):
        self.store.increment_like(fact_id)
        return self.store.get(fact_id)

    def dislike(self, fact_id):
        self.store.increment_dislike(fact_id)
        return self.store.get(fact_id)
