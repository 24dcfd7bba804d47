from flask import Blueprint, jsonify, request
from factboard.models.ingestion_run import IngestionRun

ingestion_bp = Blueprint('ingestion', __name__)


@ingestion_bp.route('/runs')
def list_runs():
    """List recent ingestion runs, newest first."""
    page = request.args.get('page', 1, type=int)
    per_page = min(request.args.get('per_page', 20, type=int), 100)

    pagination = IngestionRun.query.order_by(
        IngestionRun.started_at.desc(), IngestionRun.id.desc()
    ).paginate(page=page, per_page=per_page, error_out=False)

    return jsonify({
        'runs': [r.to_dict() for r in pagination.items],
        'total': pagination.total,
        'page': page,
    })
