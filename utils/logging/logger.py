"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import json
import logging
import sys


# Converte nível numérico para nível do logging do Python
def _get_log_level_from_numeric(level: int) -> int:
    level_map = {
        0: logging.DEBUG,
        1: logging.INFO,
        2: logging.WARNING,
        3: logging.ERROR
    }
    return level_map.get(level, logging.INFO)


# Formatter JSON: uma linha por registro, com a mensagem escapada por json.dumps
class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'time': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage()
        }
        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


# Configura o sistema de logging
def setup_logging(log_level: int, log_format: str = 'console'):
    python_log_level = _get_log_level_from_numeric(log_level)

    if log_format == 'json':
        # Formato JSON estruturado
        formatter = JsonFormatter(datefmt='%Y-%m-%d %H:%M:%S')
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(python_log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(python_log_level)
    root_logger.handlers = []  # Remove handlers existentes
    root_logger.addHandler(handler)

    # O parser loga cada link recusado em DEBUG; só aparece com LOG_LEVEL=0
    logging.getLogger('magnet').setLevel(python_log_level)

    # waitress loga cada fila de requisições em INFO
    logging.getLogger('waitress.queue').setLevel(logging.WARNING)

    # Silencia werkzeug apenas se nível for alto (para não perder logs importantes do Flask)
    if log_level >= 2:  # warn ou error
        logging.getLogger('werkzeug').setLevel(logging.WARNING)

    return python_log_level
