from factboard.extensions import db
from sqlalchemy import func

RUN_STATUSES = ('running', 'succeeded', 'empty', 'fetch_failed', 'failed')


class IngestionRun(db.Model):
    __tablename__ = 'ingestion_runs'

    id = db.Column(db.Integer, primary_key=True)
    source = db.Column(db.String(2048), nullable=False)
    status = db.Column(db.String(16), nullable=False, default='running')
    started_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    finished_at = db.Column(db.DateTime(timezone=True))
    fetched = db.Column(db.Integer, default=0)
    inserted = db.Column(db.Integer, default=0)
    incremented = db.Column(db.Integer, default=0)
    conflicts = db.Column(db.Integer, default=0)
    latency_ms = db.Column(db.Float)
    error = db.Column(db.String(512))

    __table_args__ = (
        db.Index('ix_ingestion_runs_started_at', 'started_at'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'source': self.source,
            'status': self.status,
            'started_at': self.started_at.isoformat() if self.started_at else None,
            'finished_at': self.finished_at.isoformat() if self.finished_at else None,
            'fetched': self.fetched or 0,
            'inserted': self.inserted or 0,
            'incremented': self.incremented or 0,
            'conflicts': self.conflicts or 0,
            'latency_ms': round(self.latency_ms, 1) if self.latency_ms is not None else None,
            'error': self.error,
        }
