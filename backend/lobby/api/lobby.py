from flask import Blueprint, jsonify, current_app
from lobby.api import request_fields
from lobby.services.hosts import register_host, unregister_host, list_hosts
from lobby.services.races import add_race, list_races
from lobby.storage import get_store

lobby = Blueprint('lobby', __name__)


@lobby.route('/registerHost/', methods=['POST'])
def register_host_route():
    data = request_fields()
    result = register_host(
        get_store(),
        driver_name=data.get('driver_name'),
        ip_address=data.get('ip_address'),
        game_version=data.get('game_version'),
        locked=data.get('locked'),
        player_count=data.get('player_count'),
        accepted_version=current_app.config.get('LOBBY_GAME_VERSION', '300'),
    )
    current_app.logger.info(f"[register] ip={data.get('ip_address')} driver={data.get('driver_name')}")
    return jsonify(result)


@lobby.route('/unregisterHost/', methods=['POST'])
def unregister_host_route():
    data = request_fields()
    result = unregister_host(get_store(), data.get('ip_address'))
    current_app.logger.info(f"[unregister] ip={data.get('ip_address')}")
    return jsonify(result)


@lobby.route('/getHosts/', methods=['GET'])
def get_hosts():
    return jsonify({'hosts': list_hosts(get_store())})


@lobby.route('/getRaces/', methods=['GET'])
def get_races():
    return jsonify({'races': list_races(get_store())})


@lobby.route('/addRace/', methods=['POST'])
def add_race_route():
    # Test hook: lets tools inject a race without a running host
    data = request_fields()
    result = add_race(get_store(), data.get('driver_name'), data.get('player_count'))
    current_app.logger.info(f"[race] driver={data.get('driver_name')}")
    return jsonify(result)
