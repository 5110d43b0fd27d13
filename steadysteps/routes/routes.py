from flask import jsonify
from werkzeug.exceptions import HTTPException


def register_routes(app):

    @app.route('/api/v2/health', methods=['GET'])
    def health():
        return jsonify({'status': 'ready'}), 200

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'error': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        app.logger.exception(f"Unhandled error: {error}")
        return jsonify({'error': 'Internal server error'}), 500
