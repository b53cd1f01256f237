import time

from lobby.errors import InvalidField, MissingField, MissingParameter
from lobby.storage import LEADERBOARD
from .coerce import canonical_int, parse_float, parse_int

FILTER_KEYS = ('track', 'layout', 'condition', 'car')


def _next_record_id(records):
    """Millisecond timestamp id, bumped past the newest stored id.

    Called with the leaderboard lock held, so ids stay unique and increasing
    even when several runs are submitted within the same millisecond.
    """
    now_ms = int(time.time() * 1000)
    last = max((parse_int(r.get('id')) or 0 for r in records), default=0)
    return str(max(now_ms, last + 1))


def submit_record(store, driver_name, timing, track, layout, condition, car):
    if not driver_name or any(v is None for v in (timing, track, layout, condition, car)):
        raise MissingField()

    parsed_timing = parse_float(timing)
    key = {name: parse_int(value) for name, value in zip(FILTER_KEYS, (track, layout, condition, car))}
    invalid = [name for name, value in key.items() if value is None]
    if parsed_timing is None:
        invalid.insert(0, 'timing')
    if invalid:
        raise InvalidField(f"Invalid numeric field(s): {', '.join(invalid)}")

    with store.update(LEADERBOARD) as records:
        record_id = _next_record_id(records)
        records.append({
            'id': record_id,
            'driver_name': driver_name,
            'timing': parsed_timing,
            **key,
        })
        # Lower is better; the whole board stays ordered, not per filter key
        records.sort(key=lambda r: r['timing'])
    return {'success': True, 'id': record_id}


def query_records(store, track, layout, condition, car):
    values = (track, layout, condition, car)
    if any(v is None for v in values):
        raise MissingParameter()

    wanted = tuple(canonical_int(v) for v in values)
    if None in wanted:
        return []
    return [
        r for r in store.load(LEADERBOARD)
        if tuple(canonical_int(r.get(k)) for k in FILTER_KEYS) == wanted
    ]
