import logging

import orjson

from seabattle.game.infra.config import GameSettings
from seabattle.game.infra.json_codec import dumps_text
from seabattle.game.infra.logging import (
    JsonFormatter,
    LoggingConfig,
    configure_logging,
    setup_logging,
    shutdown_logging,
)


def test_json_formatter_includes_fields_and_message() -> None:
    logger = logging.getLogger("test.json.formatter")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
        extra={"custom": 1},
    )
    payload = orjson.loads(JsonFormatter().format(record))
    assert payload["msg"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.json.formatter"
    assert payload["fields"] == {"custom": 1}


def test_dumps_text_options() -> None:
    assert dumps_text({"b": 1, "a": 2}, sort_keys=True) == '{"a":2,"b":1}'
    assert "\n" in dumps_text({"a": 1}, pretty=True)


def test_configure_logging_text_and_json() -> None:
    configure_logging(LoggingConfig(level_name="DEBUG", console_format="text"))
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert logging.getLogger("seabattle").level == logging.DEBUG
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)

    configure_logging(LoggingConfig(level_name="warning", console_format="json"))
    assert logging.getLogger("seabattle").level == logging.WARNING
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_setup_logging_without_log_dir_skips_file() -> None:
    assert setup_logging(GameSettings(log_level="INFO")) is None


def test_setup_logging_writes_jsonl_run_file(tmp_path) -> None:
    log_dir = tmp_path / "logs"
    file_path = setup_logging(GameSettings(log_level="INFO", log_dir=log_dir))
    assert file_path is not None
    logging.getLogger("seabattle.game.test").info("hello", extra={"turn": 3})
    logging.getLogger("other.library").info("ignored")
    shutdown_logging()

    files = list(log_dir.glob("seabattle_run_*.jsonl"))
    assert files
    records = [orjson.loads(line) for line in files[0].read_text(encoding="utf-8").splitlines()]
    assert any(record["msg"] == "hello" and record["fields"] == {"turn": 3} for record in records)
    assert all(record["msg"] != "ignored" for record in records)


def test_json_formatter_lifts_event_name() -> None:
    record = logging.LogRecord(
        "seabattle.game.core.battlefield",
        logging.INFO,
        __file__,
        1,
        "ship_placed owner=%s ship=%s",
        ("Ann", "destroyer"),
        None,
    )
    payload = orjson.loads(JsonFormatter().format(record))
    assert payload["event"] == "ship_placed"
    assert payload["msg"] == "ship_placed owner=Ann ship=destroyer"
    assert "fields" not in payload

    record.msg, record.args = "logging_file=%s", ("x.jsonl",)
    assert "event" not in orjson.loads(JsonFormatter().format(record))


def test_file_records_omit_console_timestamp(tmp_path) -> None:
    file_path = tmp_path / "run.jsonl"
    configure_logging(LoggingConfig(level_name="INFO", console_format="text", file_path=str(file_path)))
    logging.getLogger("seabattle.game.test").info("turn_passed to=%s", "Bob")
    shutdown_logging()

    records = [orjson.loads(line) for line in file_path.read_text(encoding="utf-8").splitlines()]
    assert [record["event"] for record in records] == ["turn_passed"]
    assert "fields" not in records[0]
