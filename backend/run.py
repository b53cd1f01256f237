import logging

from lobby import create_app

logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

app = create_app()

if __name__ == '__main__':
    port = app.config.get('PORT', 5000)
    app.logger.info(f"Lobby server listening on http://localhost:{port}")
    app.run(host='0.0.0.0', port=port)
