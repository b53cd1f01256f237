from lobby.storage import RACES
from .coerce import count_or_default

DEFAULT_RACE_PLAYERS = 2


def add_race(store, driver_name, player_count=None):
    # Manual injection point; races are never completed or removed
    with store.update(RACES) as races:
        races.append({
            'driver_name': driver_name,
            'player_count': count_or_default(player_count, DEFAULT_RACE_PLAYERS),
        })
    return {'success': True}


def list_races(store):
    return store.load(RACES)
