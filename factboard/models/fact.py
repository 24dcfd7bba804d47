import uuid
from datetime import datetime, timezone
from sqlalchemy.ext.hybrid import hybrid_property
from factboard.extensions import db
from factboard.utils.text import MAX_FACT_LENGTH


def _utcnow():
    return datetime.now(timezone.utc)


class Fact(db.Model):
    __tablename__ = 'facts'

    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    text = db.Column(db.String(MAX_FACT_LENGTH), nullable=False, unique=True)
    # casefold/NFKD can lengthen the key (ß -> ss), so it is not length-bounded
    text_key = db.Column(db.Text, nullable=False, unique=True)
    inserted_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)
    source = db.Column(db.String(2048), nullable=False, default='')
    occurrence_count = db.Column(db.Integer, nullable=False, default=1)
    like_count = db.Column(db.Integer, nullable=False, default=0)
    dislike_count = db.Column(db.Integer, nullable=False, default=0)

    __table_args__ = (
        db.Index('ix_facts_inserted_at', 'inserted_at'),
    )

    @hybrid_property
    def popularity(self):
        return self.like_count - self.dislike_count

    def to_dict(self):
        return {
            'id': str(self.id),
            'text': self.text,
            'inserted_at': self.inserted_at.isoformat() if self.inserted_at else None,
            'occurrence_count': self.occurrence_count,
            'like_count': self.like_count,
            'dislike_count': self.dislike_count,
            'popularity': self.popularity,
        }

    def __repr__(self):
        return f'<Fact {self.id} x{self.occurrence_count}>'
