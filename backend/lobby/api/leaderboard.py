from flask import Blueprint, jsonify, request, current_app
from lobby.api import request_fields
from lobby.services.leaderboard import submit_record, query_records, FILTER_KEYS
from lobby.storage import get_store

leaderboard = Blueprint('leaderboard', __name__)


@leaderboard.route('/submitRecord/', methods=['POST'])
def submit_record_route():
    data = request_fields()
    result = submit_record(
        get_store(),
        driver_name=data.get('driver_name'),
        timing=data.get('timing'),
        track=data.get('track'),
        layout=data.get('layout'),
        condition=data.get('condition'),
        car=data.get('car'),
    )
    current_app.logger.info(f"[submit] id={result['id']} driver={data.get('driver_name')} timing={data.get('timing')}")
    return jsonify(result)


@leaderboard.route('/getRecords/', methods=['GET'])
def get_records():
    filters = {k: request.args.get(k) for k in FILTER_KEYS}
    return jsonify({'records': query_records(get_store(), **filters)})
