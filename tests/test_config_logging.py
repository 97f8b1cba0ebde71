import json
import logging

import pytest

from app.config import _parse_bool
from utils.logging.logger import JsonFormatter, setup_logging, _get_log_level_from_numeric


@pytest.mark.parametrize('value,expected', [
    ('true', True), ('1', True), (' YES ', True), ('on', True),
    ('false', False), ('0', False), ('no', False), ('', False),
])
def test_parse_bool(value, expected):
    assert _parse_bool(value) is expected


def test_parse_bool_rejects_garbage():
    with pytest.raises(ValueError):
        _parse_bool('maybe')


def test_numeric_log_levels():
    assert _get_log_level_from_numeric(0) == logging.DEBUG
    assert _get_log_level_from_numeric(3) == logging.ERROR
    assert _get_log_level_from_numeric(42) == logging.INFO


def test_setup_logging_installs_single_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        assert setup_logging(2, 'json') == logging.WARNING
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert logging.getLogger('magnet').level == logging.WARNING
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_main_create_app_configures_logging_and_routes():
    from app.main import create_app

    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        app = create_app()
        rules = {rule.rule for rule in app.url_map.iter_rules()}
        assert {'/', '/magnet'} <= rules
        assert len(root.handlers) == 1
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_json_formatter_escapes_user_input():
    formatter = JsonFormatter(datefmt='%Y-%m-%d %H:%M:%S')
    record = logging.LogRecord(
        'api.handlers', logging.WARNING, __file__, 1,
        'Link magnet recusado: %s', ('magnet:?dn="quoted"\\path\nnext',), None
    )
    entry = json.loads(formatter.format(record))
    assert entry['level'] == 'WARNING'
    assert entry['logger'] == 'api.handlers'
    assert entry['message'] == 'Link magnet recusado: magnet:?dn="quoted"\\path\nnext'
