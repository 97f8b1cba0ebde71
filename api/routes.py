"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from flask import Flask
from api.handlers import index_handler, magnet_handler, magnet_batch_handler


def register_routes(app: Flask):
    app.add_url_rule('/', 'index', index_handler, methods=['GET'])
    app.add_url_rule('/magnet', 'magnet', magnet_handler, methods=['GET'])
    app.add_url_rule('/magnet', 'magnet_batch', magnet_batch_handler, methods=['POST'])
