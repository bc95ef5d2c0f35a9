"""Tests for the command-line entry point."""
import sys
import os
import io
import logging
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest
from unittest.mock import patch

from layoutswap import main as cli


def run(argv, stdin_text=""):
    out = io.StringIO()
    code = cli.main(argv, stdin=io.StringIO(stdin_text), stdout=out)
    return code, out.getvalue()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    with patch('layoutswap.config.CONFIG_FILE', tmp_path / 'config.json'):
        yield


def test_args():
    code, out = run(['qwerty'])
    assert code == 0
    assert out == 'йцукен\n'


def test_args_joined():
    # space has no mapping and is dropped
    assert run(['qw', 'er'])[1] == 'йцук\n'


def test_stdin_lines():
    code, out = run([], 'qwe\nйцу\n1\n')
    assert code == 0
    assert out == 'йцу\nqwe\n\n'


def test_list():
    assert run(['--list']) == (0, 'en_ua\n')


def test_filter():
    code, out = run(['--filter', 'kmr'], 'Калькулятор\nFirefox\n\nТермінал\n')
    assert code == 0
    assert out == 'Калькулятор\n'


def test_unknown_layout_exits_2(capsys):
    with pytest.raises(SystemExit) as exc:
        run(['--layout', 'nope', 'q'])
    assert exc.value.code == 2
    assert 'unknown layout' in capsys.readouterr().err


def test_layout_from_config(tmp_path):
    path = tmp_path / 'cfg.json'
    path.write_text('{"layout": "missing"}', encoding='utf-8')
    with patch('layoutswap.config.CONFIG_FILE', path):
        with pytest.raises(SystemExit):
            run(['q'])
        assert run(['--layout', 'en_ua', 'q'])[1] == 'й\n'


def test_non_string_layout_in_config_exits_2(tmp_path, capsys):
    path = tmp_path / 'cfg.json'
    path.write_text('{"layout": ["en_ua"]}', encoding='utf-8')
    with patch('layoutswap.config.CONFIG_FILE', path):
        with pytest.raises(SystemExit) as exc:
            run(['q'])
    assert exc.value.code == 2
    assert 'unknown layout' in capsys.readouterr().err


@pytest.mark.parametrize('argv', [['--list', 'qwerty'], ['--filter', 'x', 'qwerty']])
def test_text_with_list_or_filter_rejected(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        run(argv)
    assert exc.value.code == 2
    assert 'cannot be combined' in capsys.readouterr().err


def test_debug_flag_enables_debug_logging():
    with patch('layoutswap.main.setup_logging') as setup:
        run(['--debug', 'q'])
    setup.assert_called_once_with(True)


def test_debug_logging_from_config(tmp_path):
    path = tmp_path / 'cfg.json'
    path.write_text('{"debug_logging": true}', encoding='utf-8')
    with patch('layoutswap.config.CONFIG_FILE', path):
        with patch('layoutswap.main.setup_logging') as setup:
            run(['q'])
    setup.assert_called_once_with(True)


def test_info_logging_by_default():
    with patch('layoutswap.main.setup_logging') as setup:
        run(['q'])
    setup.assert_called_once_with(False)


def test_setup_logging_level():
    with patch('logging.basicConfig') as basic:
        cli.setup_logging(True)
        assert basic.call_args.kwargs['level'] == logging.DEBUG
        cli.setup_logging(False)
        assert basic.call_args.kwargs['level'] == logging.INFO
