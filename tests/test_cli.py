import argparse
import logging

import pytest

from numberstacks.__main__ import build_parser, number_in_range
from numberstacks.config import DEFAULT_NUMBER, get_env_float
from numberstacks.logging_config import setup_logging


def test_defaults():
    args = build_parser().parse_args([])
    assert args.number == DEFAULT_NUMBER
    assert args.debug is False
    assert args.log_file is None


def test_number_option():
    assert build_parser().parse_args(["--number", "36"]).number == 36
    assert build_parser().parse_args(["-n", "2"]).number == 2


@pytest.mark.parametrize("text", ["1", "201", "abc", "2.5"])
def test_number_out_of_range_is_rejected(text):
    with pytest.raises(argparse.ArgumentTypeError):
        number_in_range(text)


def test_parser_exits_on_bad_number():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--number", "0"])


@pytest.mark.parametrize("raw,expected", [(None, 26.0), ("30", 30.0), ("x", 26.0), ("-1", 26.0)])
def test_env_float(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("NUMBERSTACKS_TEST_CELL", raising=False)
    else:
        monkeypatch.setenv("NUMBERSTACKS_TEST_CELL", raw)
    assert get_env_float("NUMBERSTACKS_TEST_CELL", 26.0) == expected


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logger = logging.getLogger("numberstacks")
    try:
        assert len(logger.handlers) == 2
        logging.getLogger("numberstacks.test").debug("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
