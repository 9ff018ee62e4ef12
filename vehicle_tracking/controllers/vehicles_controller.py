from flask import Blueprint, jsonify, request, current_app
from vehicle_tracking.exceptions import StorageError, ValidationError
from vehicle_tracking.middlewares.request_middleware import json_object_required

vehicles_bp = Blueprint('vehicles', __name__)

def _services():
    return current_app.extensions['tracking']

@vehicles_bp.route('/vehicles', methods=['GET'], strict_slashes=False)
def get_vehicles():
    try:
        vehicles = _services().snapshot_service.get_snapshot()
    except StorageError as e:
        return jsonify({'error': str(e)}), 500
    return jsonify([v.to_dict() for v in vehicles]), 200

@vehicles_bp.route('/update-position', methods=['POST'], strict_slashes=False)
@json_object_required()
def update_position():
    data = request.get_json()
    try:
        result = _services().position_service.report_position(
            data.get('plat_nomor'),
            data.get('latitude'),
            data.get('longitude'),
            data.get('speed')
        )
    except ValidationError as e:
        return jsonify({'error': str(e), 'errors': e.messages}), 400
    except StorageError as e:
        return jsonify({'error': str(e)}), 500
    return jsonify(result), 200
