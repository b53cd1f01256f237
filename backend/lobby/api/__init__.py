from flask import request


def request_fields():
    """Body fields of a POST, whether sent as JSON or form-encoded."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()
