"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
from flask import Flask
from app.config import Config
from api.routes import register_routes

logger = logging.getLogger(__name__)


class Bootstrap:
    @staticmethod
    def create_app() -> Flask:
        """Cria e configura aplicação Flask"""
        app = Flask(__name__)
        app.json.sort_keys = False

        register_routes(app)

        if Config.MAGNET_STRICT_TOPICS:
            logger.info("[[ Tópicos URN: modo estrito ]]")
        else:
            logger.warning("[[ Tópicos URN: modo leniente ]] - namespaces desconhecidos aceitos como UNKNOWN")

        logger.info(f"Servidor iniciado na porta {Config.PORT}")

        return app
