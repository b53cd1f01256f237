from lobby.errors import VersionMismatch
from lobby.storage import HOSTS
from .coerce import count_or_default, to_bool

GAME_VERSION = '300'
HOST_PORT = 8765
DEFAULT_HOST_PLAYERS = 1


def register_host(store, driver_name, ip_address, game_version, locked=None, player_count=None,
                  accepted_version=GAME_VERSION):
    """Insert or overwrite the host advertised from ``ip_address``.

    Raises VersionMismatch (without touching the registry) when the client's
    game version differs from ``accepted_version``.
    """
    if not isinstance(game_version, str) or game_version != str(accepted_version):
        raise VersionMismatch()

    locked = to_bool(locked)
    player_count = count_or_default(player_count, DEFAULT_HOST_PLAYERS)

    with store.update(HOSTS) as hosts:
        found = next((h for h in hosts if h.get('ip_address') == ip_address), None)
        if found:
            found['driver_name'] = driver_name
            found['locked'] = locked
            found['player_count'] = player_count
        else:
            hosts.append({
                'driver_name': driver_name,
                'ip_address': ip_address,
                'port': HOST_PORT,
                'locked': locked,
                'player_count': player_count,
            })
    return {'success': True}


def unregister_host(store, ip_address):
    with store.update(HOSTS) as hosts:
        hosts[:] = [h for h in hosts if h.get('ip_address') != ip_address]
    return {'success': True}


def list_hosts(store):
    return store.load(HOSTS)
