import io
import json
import logging

from policy_evidence.logging import JsonFormatter, configure_logging, get_logger, get_run_id


def test_json_formatter_includes_extra_fields_only():
    record = logging.LogRecord("policy_evidence.test", logging.INFO, __file__, 10, "hello %s", ("world",), None)
    record.run_id = "abc"
    out = json.loads(JsonFormatter().format(record))
    assert out == {"level": "INFO", "name": "policy_evidence.test", "message": "hello world", "run_id": "abc"}


def test_configure_logging_writes_json_lines():
    stream = io.StringIO()
    configure_logging("DEBUG", stream=stream)
    get_logger("policy_evidence.test").debug("claim annotated", extra={"score": 0.5})
    line = stream.getvalue().strip().splitlines()[-1]
    out = json.loads(line)
    assert out["message"] == "claim annotated"
    assert out["score"] == 0.5


def test_configure_logging_plain_text():
    stream = io.StringIO()
    configure_logging("INFO", json_output=False, stream=stream)
    get_logger("policy_evidence.test").info("plain message")
    assert "INFO policy_evidence.test: plain message" in stream.getvalue()


def test_run_ids_are_unique():
    assert get_run_id() != get_run_id()


def test_run_id_stamped_on_every_record():
    stream = io.StringIO()
    configure_logging("DEBUG", stream=stream, run_id="run-1")
    log = get_logger("policy_evidence.test")
    log.info("first")
    log.debug("second", extra={"score": 0.2})
    log.info("explicit", extra={"run_id": "other"})
    records = [json.loads(line) for line in stream.getvalue().strip().splitlines()]
    assert [r["run_id"] for r in records] == ["run-1", "run-1", "other"]


def test_no_run_id_without_filter():
    stream = io.StringIO()
    configure_logging("INFO", stream=stream)
    get_logger("policy_evidence.test").info("bare")
    assert "run_id" not in json.loads(stream.getvalue().strip())
