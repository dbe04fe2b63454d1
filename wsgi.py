import eventlet
eventlet.monkey_patch()

import logging

from config import load_config, setup_logging
from main import create_app, socketio

logger = logging.getLogger(__name__)


def main():
    config = load_config()
    setup_logging(config.log_level)

    app = create_app(config)
    logger.info("start server http://localhost:%d", config.port)
    socketio.run(app, host=config.host, port=config.port)


if __name__ == '__main__':
    main()
