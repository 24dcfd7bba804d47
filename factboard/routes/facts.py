from flask import Blueprint, jsonify, request
from factboard.services.fact_service import FactService

facts_bp = Blueprint('facts', __name__)
fact_service = FactService()

_TRUTHY = ('true', '1', 'yes')


@facts_bp.route('')
def list_facts():
    """Paginated facts. Query: order, descending, page_index."""
    order = request.args.get('order', 'alphabetical')
    descending = request.args.get('descending', 'false').lower() in _TRUTHY
    page_index = request.args.get('page_index', 0, type=int)

    try:
        page = fact_service.list_facts(order, descending=descending, page_index=page_index)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(page.to_dict())


@facts_bp.route('/<uuid:fact_id>')
def get_fact(fact_id):
    return jsonify(fact_service.get(fact_id).to_dict())


@facts_bp.route('/<uuid:fact_id>/like', methods=['POST'])
def like_fact(fact_id):
    return jsonify(fact_service.like(fact_id).to_dict())


@facts_bp.route('/<uuid:fact_id>/dislike', methods=['POST'])
def dislike_fact(fact_id):
    return jsonify(fact_service.dislike(fact_id).to_dict())
