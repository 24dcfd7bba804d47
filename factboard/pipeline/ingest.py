import logging
from datetime import datetime, timedelta, timezone
from time import perf_counter
from sqlalchemy.exc import IntegrityError
from flask import current_app, has_app_context
from factboard.errors import ConflictError, FetchFailure, ParseFailure
from factboard.extensions import db
from factboard.integrations.facts_api import DEFAULT_TIMEOUT, FactsAPIClient
from factboard.models.ingestion_run import IngestionRun
from factboard.services.fact_store import FactStore
from factboard.utils.text import collapse_batch

logger = logging.getLogger(__name__)


def run(request_uri=None, timeout=None, client=None, store=None):
    """
    One ingestion run: fetch -> parse -> normalize -> upsert.

    Fetch failures and unparseable payloads are reported in the returned
    dict and never touch the facts table. Any other exception is recorded
    on the run row and re-raised for the scheduler boundary to handle.
    """
    request_uri = request_uri or _config('FACTS_API_URL')
    timeout = timeout or _config('FETCH_TIMEOUT_SECONDS', DEFAULT_TIMEOUT)
    client = client or FactsAPIClient(request_uri, timeout=timeout)
    store = store or FactStore()

    logger.info(f"[Ingest] Starting run against {request_uri}")
    run_row = _start_run(request_uri)
    t0 = perf_counter()

    try:
        result = _ingest(client, store, request_uri)
    except Exception as e:
        db.session.rollback()
        result = _result('failed', error=str(e))
        _finish_run(run_row, result, t0)
        raise

    _finish_run(run_row, result, t0)
    logger.info(
        f"[Ingest] Complete ({result['status']}): {result['fetched']} fetched, "
        f"{result['inserted']} inserted, {result['incremented']} incremented, "
        f"{result['conflicts']} conflicts"
    )
    return result


def _ingest(client, store, request_uri):
    try:
        raw_items = client.fetch_facts()
    except FetchFailure as e:
        logger.warning(f"[Ingest] Fetch failed, nothing ingested: {e}")
        return _result('fetch_failed', error=str(e))
    except ParseFailure as e:
        logger.info(f"[Ingest] Unparseable payload treated as empty batch: {e}")
        return _result('empty')

    batch, dropped = collapse_batch(raw_items)
    if dropped:
        logger.debug(f"[Ingest] Dropped {dropped} empty or oversize items")
    if not batch:
        return _result('empty', fetched=len(raw_items))

    counts = _upsert_batch(batch, request_uri, store)
    return _result('succeeded', fetched=len(raw_items), **counts)


def _upsert_batch(batch, request_uri, store):
    existing = store.find_by_texts([entry['text'] for entry in batch.values()])

    incremented = 0
    for key, entry in batch.items():
        fact = existing.get(key)
        if fact is not None:
            store.increment_occurrence(fact.id, by=entry['count'], commit=False)
            incremented += 1

    inserted = 0
    stamps = _insertion_stamps(batch)
    for key, entry in batch.items():
        if key not in existing:
            db.session.add(store.build(
                entry['text'], request_uri, entry['count'], inserted_at=stamps[key]
            ))
            inserted += 1

    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        logger.warning("[Ingest] Batch collided with a concurrent insert, replaying fact by fact")
        return _replay_per_fact(batch, request_uri, store, set(existing))

    return {'inserted': inserted, 'incremented': incremented, 'conflicts': 0}


def _replay_per_fact(batch, request_uri, store, known_keys):
    """Apply each entry in its own transaction; a lost insert becomes an increment."""
    inserted = incremented = conflicts = 0
    stamps = _insertion_stamps(batch)

    for key, entry in batch.items():
        fact = store.find_by_text(entry['text'])
        if fact is None:
            try:
                store.insert(store.build(
                    entry['text'], request_uri, entry['count'], inserted_at=stamps[key]
                ))
                inserted += 1
                continue
            except ConflictError:
                fact = store.find_by_text(entry['text'])
                if fact is None:
                    raise

        if key not in known_keys:
            conflicts += 1
        store.increment_occurrence(fact.id, by=entry['count'])
        incremented += 1

    return {'inserted': inserted, 'incremented': incremented, 'conflicts': conflicts}


def _insertion_stamps(batch):
    """One timestamp per entry, a microsecond apart in first-seen order."""
    base = datetime.now(timezone.utc)
    return {key: base + timedelta(microseconds=i) for i, key in enumerate(batch)}


def _result(status, fetched=0, inserted=0, incremented=0, conflicts=0, error=None):
    return {
        'status': status,
        'fetched': fetched,
        'inserted': inserted,
        'incremented': incremented,
        'conflicts': conflicts,
        'error': error,
    }


def _start_run(request_uri):
    run_row = IngestionRun(
        source=request_uri,
        status='running',
        started_at=datetime.now(timezone.utc),
    )
    db.session.add(run_row)
    db.session.commit()
    return run_row


def _finish_run(run_row, result, t0):
    run_row.status = result['status']
    run_row.finished_at = datetime.now(timezone.utc)
    run_row.fetched = result['fetched']
    run_row.inserted = result['inserted']
    run_row.incremented = result['incremented']
    run_row.conflicts = result['conflicts']
    run_row.latency_ms = (perf_counter() - t0) * 1000.0
    run_row.error = (result['error'] or '')[:512] or None
    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        logger.error(f"[Ingest] Could not record run {run_row.id}: {e}")


def _config(key, default=None):
    if has_app_context():
        return current_app.config.get(key, default)
    return default
