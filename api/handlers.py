"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
from datetime import datetime
from typing import Any, Dict, Tuple
from flask import jsonify, request
from app.config import Config
from exceptions.magnet_exceptions import (
    MagnetError,
    InvalidMagnetLinkError,
    InvalidFieldError,
    InvalidTopicError
)
from magnet.parser import parse

logger = logging.getLogger(__name__)


# Extrai os atributos da exceção para a resposta JSON
def _error_details(error: MagnetError) -> Dict[str, Any]:
    if isinstance(error, InvalidFieldError):
        return {'key': error.key, 'value': error.value}
    if isinstance(error, InvalidTopicError):
        return {'diagnostic': error.diagnostic, 'topic': error.topic}
    if isinstance(error, InvalidMagnetLinkError):
        details = {'reason': error.reason}
        diagnostic = getattr(error, 'diagnostic', None)
        if diagnostic:
            details['diagnostic'] = diagnostic
        return details
    return {}


def _error_body(error: MagnetError) -> Dict[str, Any]:
    return {
        'error': str(error),
        'type': type(error).__name__,
        'details': _error_details(error)
    }


# Faz o parse de um link e retorna (corpo, status)
def _parse_one(uri: str) -> Tuple[Dict[str, Any], int]:
    if len(uri) > Config.MAGNET_MAX_URI_LENGTH:
        return {
            'error': f'Link magnet excede {Config.MAGNET_MAX_URI_LENGTH} caracteres',
            'type': 'UriTooLong',
            'details': {'length': len(uri)}
        }, 413
    try:
        magnet_uri = parse(uri, strict_topics=Config.MAGNET_STRICT_TOPICS)
    except MagnetError as e:
        logger.warning(f"Link magnet recusado: {type(e).__name__}: {e}")
        return _error_body(e), 400
    return magnet_uri.to_dict(), 200


def index_handler():
    endpoints = {
        'GET /magnet': {
            'description': 'Interpreta um link magnet',
            'query_params': {
                'uri': 'link magnet completo (magnet:?...), com percent-encoding'
            }
        },
        'POST /magnet': {
            'description': 'Interpreta um ou vários links magnet',
            'body': {
                'uri': 'link magnet único',
                'uris': f'lista de links magnet (máximo {Config.MAGNET_MAX_BATCH})'
            }
        }
    }

    return jsonify({
        'time': datetime.now().strftime('%A, %d-%b-%y %H:%M:%S UTC'),
        'build': 'Python Magnet Parser v1.0.0',
        'endpoints': endpoints,
        'strict_topics': Config.MAGNET_STRICT_TOPICS
    })


def magnet_handler():
    uri = request.args.get('uri')
    if not uri:
        return jsonify({'error': 'Parâmetro uri não informado', 'type': 'MissingParameter', 'details': {}}), 400

    # Link colado sem encoding: o Flask separa dn, tr etc. como parâmetros da própria requisição
    extra_params = [key for key in request.args if key != 'uri']
    if extra_params or len(request.args.getlist('uri')) > 1:
        logger.warning(f"Query ambígua em /magnet | Parâmetros extras: {extra_params}")
        return jsonify({
            'error': 'Query ambígua: codifique o link magnet (percent-encoding) no parâmetro uri',
            'type': 'AmbiguousQuery',
            'details': {'extra_params': extra_params}
        }), 400

    body, status = _parse_one(uri)
    if status == 200:
        logger.info(f"Link magnet interpretado | Campos: {body['count']}")
    return jsonify(body), status


def magnet_batch_handler():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({'error': 'Corpo JSON inválido', 'type': 'InvalidBody', 'details': {}}), 400

    if 'uri' in payload:
        uri = payload['uri']
        if not isinstance(uri, str):
            return jsonify({'error': 'uri deve ser string', 'type': 'InvalidBody', 'details': {}}), 400
        body, status = _parse_one(uri)
        return jsonify(body), status

    uris = payload.get('uris')
    if not isinstance(uris, list) or not all(isinstance(u, str) for u in uris):
        return jsonify({'error': 'uris deve ser lista de strings', 'type': 'InvalidBody', 'details': {}}), 400
    if len(uris) > Config.MAGNET_MAX_BATCH:
        return jsonify({
            'error': f'Máximo de {Config.MAGNET_MAX_BATCH} links por requisição',
            'type': 'BatchTooLarge',
            'details': {'count': len(uris)}
        }), 413

    # Cada link é reportado de forma independente; falha em um não afeta os outros
    results = []
    for uri in uris:
        body, status = _parse_one(uri)
        results.append({'uri': uri, 'status': status, 'result': body})

    ok_count = sum(1 for r in results if r['status'] == 200)
    logger.info(f"Lote de links magnet | Total: {len(results)} | OK: {ok_count}")
    return jsonify({'results': results, 'count': len(results)}), 200
