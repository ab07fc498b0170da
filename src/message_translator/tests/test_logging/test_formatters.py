# src/message_translator/tests/test_logging/test_formatters.py
import json
import logging
import sys

from message_translator.core.logging.formatters import ColorFormatter, JsonFormatter, PROJECT_VERSION


def make_record(msg="hello %s", args=("tester",), level=logging.INFO):
    return logging.LogRecord("message_translator", level, __file__, 10, msg, args, None)


def test_json_formatter_basic_fields():
    rec = make_record()
    rec.custom = "value"
    fmt = JsonFormatter(env="testing", service="svc")
    data = json.loads(fmt.format(rec))
    assert data["message"] == "hello tester"
    assert data["level"] == "INFO"
    assert data["logger"] == "message_translator"
    assert data["service"] == "svc"
    assert data["env"] == "testing"
    assert data["version"] == PROJECT_VERSION
    assert "timestamp" in data
    assert data["custom"] == "value"
    # bookkeeping attributes stay out of the payload
    assert "args" not in data
    assert "msecs" not in data


def test_json_formatter_keeps_unicode():
    rec = make_record("%s", ("Usuário não encontrado",))
    out = JsonFormatter(env="dev").format(rec)
    assert "Usuário não encontrado" in out


def test_json_formatter_non_serializable_extra():
    rec = make_record()

    class X:
        def __repr__(self):
            return "<X>"

    rec.obj = X()
    data = json.loads(JsonFormatter(env="dev", service="svc").format(rec))
    assert data["obj"] == "<X>"


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        rec = logging.LogRecord("t", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
    data = json.loads(JsonFormatter().format(rec))
    assert "ValueError: boom" in data["exc_info"]


def test_color_formatter_colours_level_only():
    rec = make_record(level=logging.WARNING)
    out = ColorFormatter().format(rec)
    assert out.count("\033[33m") == 1
    assert out.endswith("hello tester")
