from flask import Blueprint, jsonify
from sqlalchemy import text
from factboard.extensions import db
from factboard.models.ingestion_run import IngestionRun

health_bp = Blueprint('health', __name__)


@health_bp.route('/health')
def health():
    return jsonify({'status': 'ok'})


@health_bp.route('/ready')
def ready():
    try:
        db.session.execute(text('SELECT 1'))
        db_ok = True
    except Exception:
        db.session.rollback()
        db_ok = False

    last_run = None
    if db_ok:
        latest = IngestionRun.query.order_by(IngestionRun.id.desc()).first()
        last_run = latest.status if latest else None

    status = 'ready' if db_ok else 'not_ready'
    code = 200 if db_ok else 503
    return jsonify({'status': status, 'db': db_ok, 'last_ingestion': last_run}), code
