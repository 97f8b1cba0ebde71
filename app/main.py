"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
import os
import sys

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.append(ROOT_DIR)

from app.config import Config
from app.bootstrap import Bootstrap
from utils.logging.logger import setup_logging
from waitress import serve

logger = logging.getLogger(__name__)


def create_app():
    setup_logging(Config.LOG_LEVEL, Config.LOG_FORMAT)
    return Bootstrap.create_app()


# Sobe o servidor WSGI (waitress) com a API de links magnet
def run():
    app = create_app()
    logger.info(f"Escutando em {Config.HOST}:{Config.PORT} | Threads: {Config.SERVER_THREADS}")
    serve(app, host=Config.HOST, port=Config.PORT, threads=Config.SERVER_THREADS)


if __name__ == '__main__':
    run()
