import logging
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)

INGEST_JOB_ID = 'ingest_facts'
STARTUP_JOB_ID = 'ingest_facts_startup'


def _ingest_job(app):
    """Run boundary: nothing raised by one run may reach the scheduler."""
    with app.app_context():
        logger.info("[Job] Fact ingestion")
        from factboard.extensions import db
        from factboard.pipeline.ingest import run
        try:
            result = run()
        except Exception:
            db.session.rollback()
            logger.exception("[Job] Fact ingestion crashed; next run is unaffected")
            return None
        logger.info(f"[Job] Fact ingestion: {result['status']}")
        return result


def _upsert_job(scheduler, **kwargs):
    scheduler.add_job(replace_existing=True, **kwargs)


def register_jobs(scheduler, app):
    """Register the recurring ingestion job (and an optional boot-time run)."""
    interval = max(int(app.config.get('INGEST_INTERVAL_SECONDS', 3600)), 1)

    _upsert_job(
        scheduler,
        id=INGEST_JOB_ID,
        func=_ingest_job,
        trigger='interval',
        args=[app],
        seconds=interval,
        misfire_grace_time=max(interval // 2, 1),
        coalesce=True,
        max_instances=max(int(app.config.get('INGEST_MAX_INSTANCES', 1)), 1),
    )

    if app.config.get('INGEST_ON_STARTUP'):
        _upsert_job(
            scheduler,
            id=STARTUP_JOB_ID,
            func=_ingest_job,
            trigger='date',
            args=[app],
            run_date=datetime.now(timezone.utc) + timedelta(seconds=5),
        )

    logger.info(f"Fact ingestion scheduled every {interval}s")
