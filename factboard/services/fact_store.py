import logging
from enum import Enum
from sqlalchemy.exc import IntegrityError
from factboard.errors import ConflictError, NotFoundError
from factboard.extensions import db
from factboard.models.fact import Fact
from factboard.utils.text import fact_key, normalize_fact

logger = logging.getLogger(__name__)


class FactOrder(Enum):
    ALPHABETICAL = 0
    INSERTION = 1
    OCCURRENCE = 2
    LIKE = 3
    DISLIKE = 4
    POPULARITY = 5

    @classmethod
    def parse(cls, value):
        """Accept a FactOrder, its name (any case) or its integer position."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raw = str(value or '').strip()
        if raw.isdigit():
            return cls(int(raw))
        try:
            return cls[raw.upper()]
        except KeyError:
            raise ValueError(f"Invalid order: {value!r}")


_ORDER_COLUMNS = {
    FactOrder.ALPHABETICAL: Fact.text_key,
    FactOrder.INSERTION: Fact.inserted_at,
    FactOrder.OCCURRENCE: Fact.occurrence_count,
    FactOrder.LIKE: Fact.like_count,
    FactOrder.DISLIKE: Fact.dislike_count,
    FactOrder.POPULARITY: Fact.popularity,
}


class FactStore:
    """All reads and writes against the ``facts`` table go through here."""

    def find_by_text(self, text):
        key = fact_key(text)
        if not key:
            return None
        return Fact.query.filter_by(text_key=key).first()

    def find_by_texts(self, texts):
        """Bulk dedup lookup. Returns ``{collation key: Fact}``."""
        keys = {fact_key(t) for t in texts}
        keys.discard('')
        if not keys:
            return {}
        rows = Fact.query.filter(Fact.text_key.in_(keys)).all()
        return {row.text_key: row for row in rows}

    def get(self, fact_id):
        fact = db.session.get(Fact, fact_id)
        if fact is None:
            raise NotFoundError()
        return fact

    def build(self, text, source, occurrence_count=1, inserted_at=None):
        text = normalize_fact(text)
        fact = Fact(
            text=text,
            text_key=fact_key(text),
            source=source,
            occurrence_count=occurrence_count,
            like_count=0,
            dislike_count=0,
        )
        if inserted_at is not None:
            fact.inserted_at = inserted_at
        return fact

    def insert(self, fact):
        db.session.add(fact)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            logger.debug("Insert lost uniqueness race for %r", fact.text)
            raise ConflictError(text=f'"{fact.text[:80]}" already exists')
        return fact

    def increment_occurrence(self, fact_id, by=1, commit=True):
        return self._increment(fact_id, Fact.occurrence_count, by, commit)

    def increment_like(self, fact_id, commit=True):
        return self._increment(fact_id, Fact.like_count, 1, commit)

    def increment_dislike(self, fact_id, commit=True):
        return self._increment(fact_id, Fact.dislike_count, 1, commit)

    def _increment(self, fact_id, column, by, commit):
        # Single UPDATE so concurrent increments on the same row never lose writes
        updated = Fact.query.filter(Fact.id == fact_id).update(
            {column: column + by}, synchronize_session=False
        )
        if updated == 0:
            raise NotFoundError()
        if commit:
            db.session.commit()
        return updated

    def count(self):
        return db.session.query(db.func.count(Fact.id)).scalar() or 0

    def list_ordered(self, order, descending=False, skip=0, take=10):
        """
        Return ``(items, total)`` for one page.

        Ties fall back to insertion time then id, both ascending, so the
        ordering is total and consecutive pages never overlap. A skip past
        the end returns no rows without reaching the database.
        """
        order = FactOrder.parse(order)
        column = _ORDER_COLUMNS[order]
        primary = column.desc() if descending else column.asc()

        total = self.count()
        skip = max(skip, 0)
        if skip >= total or take <= 0:
            return [], total

        query = Fact.query.order_by(primary, Fact.inserted_at.asc(), Fact.id.asc())
        items = query.offset(skip).limit(take).all()
        return items, total
