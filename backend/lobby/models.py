from lobby import db
import json


class StoredCollection(db.Model):
    """One whole collection (hosts, races, leaderboard) as a JSON array."""
    __tablename__ = 'stored_collection'
    name = db.Column(db.String(64), primary_key=True)
    payload = db.Column(db.Text, nullable=False, default='[]')

    def items(self):
        return json.loads(self.payload) if self.payload else []

    def set_items(self, items):
        self.payload = json.dumps(items)
