"""Collection stores: whole-collection load/save with a per-collection lock.

Every collection is a JSON array. Mutations go through ``store.update(name)``
which holds the collection's lock across load, mutate and save, so two
requests touching the same collection can no longer overwrite each other.
If the body of the ``with`` block raises, nothing is saved.
"""

import json
import os
import tempfile
import threading
from contextlib import contextmanager

from flask import current_app

from lobby import db

HOSTS = 'hosts'
RACES = 'races'
LEADERBOARD = 'leaderboard'
COLLECTIONS = (HOSTS, RACES, LEADERBOARD)


class CollectionStore:
    def __init__(self):
        self._locks = {name: threading.Lock() for name in COLLECTIONS}

    def load(self, name):
        raise NotImplementedError

    def save(self, name, items):
        raise NotImplementedError

    def _lock(self, name):
        try:
            return self._locks[name]
        except KeyError:
            raise KeyError(f"Unknown collection: {name}") from None

    @contextmanager
    def update(self, name):
        with self._lock(name):
            items = self.load(name)
            yield items
            self.save(name, items)

    def reset(self):
        for name in COLLECTIONS:
            with self._lock(name):
                self.save(name, [])


class JsonFileStore(CollectionStore):
    """One ``<name>.json`` file per collection inside ``data_dir``."""

    def __init__(self, data_dir):
        super().__init__()
        self.data_dir = os.path.abspath(data_dir)
        os.makedirs(self.data_dir, exist_ok=True)
        for name in COLLECTIONS:
            if not os.path.exists(self._path(name)):
                self.save(name, [])

    def _path(self, name):
        return os.path.join(self.data_dir, f"{name}.json")

    def load(self, name):
        with open(self._path(name), encoding='utf-8') as fh:
            return json.load(fh)

    def save(self, name, items):
        # Write to a sibling temp file and swap it in so readers never see a partial file
        fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=f".{name}.", suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as fh:
                json.dump(items, fh, indent=2)
            os.replace(tmp_path, self._path(name))
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise


class SqlCollectionStore(CollectionStore):
    """Collections stored as rows of ``stored_collection`` via Flask-SQLAlchemy."""

    def _find(self, name, for_update=False):
        from lobby.models import StoredCollection
        query = db.select(StoredCollection).filter_by(name=name)
        if for_update:
            query = query.with_for_update()
        return db.session.execute(query).scalar_one_or_none()

    def _row(self, name, for_update=False):
        from lobby.models import StoredCollection
        row = self._find(name, for_update)
        if row is None:
            row = StoredCollection(name=name, payload='[]')
            db.session.add(row)
        return row

    def load(self, name):
        row = self._find(name)
        return row.items() if row else []

    def save(self, name, items):
        row = self._row(name)
        row.set_items(items)
        db.session.commit()

    @contextmanager
    def update(self, name):
        with self._lock(name):
            row = self._row(name, for_update=True)
            items = row.items()
            try:
                yield items
                row.set_items(items)
                db.session.commit()
            except BaseException:
                db.session.rollback()
                raise


def init_store(flask_app):
    backend = flask_app.config.get('LOBBY_STORE', 'json')
    if backend == 'json':
        data_dir = flask_app.config.get('LOBBY_DATA_DIR', 'data')
        store = JsonFileStore(data_dir)
        flask_app.logger.info(f"[store] json collections in {store.data_dir}")
    elif backend == 'sql':
        import lobby.models  # noqa: F401
        with flask_app.app_context():
            db.create_all()
        store = SqlCollectionStore()
        flask_app.logger.info(f"[store] sql collections at {flask_app.config.get('SQLALCHEMY_DATABASE_URI')}")
    else:
        raise ValueError(f"Unknown LOBBY_STORE backend: {backend!r}")
    flask_app.extensions['lobby_store'] = store
    return store


def get_store():
    return current_app.extensions['lobby_store']
