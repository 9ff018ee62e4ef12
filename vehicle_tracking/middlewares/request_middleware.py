from functools import wraps
from flask import jsonify, request

# Rejects requests whose body is not a JSON object
def json_object_required():
    def wrapper(fn):
        @wraps(fn)
        def decorator(*args, **kwargs):
            data = request.get_json(silent=True)

            if not isinstance(data, dict):
                return jsonify({
                    'error': 'Request body must be a JSON object'
                }), 400

            return fn(*args, **kwargs)
        return decorator
    return wrapper
