import os

class Config:
    # Collection store backend: 'json' (flat files) or 'sql' (Flask-SQLAlchemy)
    LOBBY_STORE = os.environ.get('LOBBY_STORE', 'json')
    LOBBY_DATA_DIR = os.environ.get('LOBBY_DATA_DIR', 'data')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///lobby.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Hosts advertising any other client version are rejected
    LOBBY_GAME_VERSION = os.environ.get('LOBBY_GAME_VERSION', '300')
    CORS_ORIGINS = [o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()]
    PORT = int(os.environ.get('PORT', '5000'))
