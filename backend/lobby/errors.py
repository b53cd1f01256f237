from flask import jsonify
from werkzeug.exceptions import HTTPException


class LobbyError(Exception):
    status = 400
    message = 'Bad request'

    def __init__(self, message=None, status=None):
        if message is not None:
            self.message = message
        if status is not None:
            self.status = status
        super().__init__(self.message)


class VersionMismatch(LobbyError):
    status = 403
    message = 'Version mismatch'


class MissingField(LobbyError):
    message = 'Missing required fields'


class MissingParameter(LobbyError):
    message = 'Missing query parameters'


class InvalidField(LobbyError):
    message = 'Invalid numeric field'


def register_error_handlers(flask_app):
    @flask_app.errorhandler(LobbyError)
    def handle_lobby_error(exc):
        return jsonify({'error': exc.message}), exc.status

    @flask_app.errorhandler(Exception)
    def handle_unexpected(exc):
        # Let Flask render its own 404/405/redirects
        if isinstance(exc, HTTPException):
            return exc
        flask_app.logger.exception(f"[fault] unhandled error: {exc}")
        return jsonify({'error': 'Internal server error'}), 500
