import contextvars
import logging

from adspend_utils.context import LogContextFilter, instance_context, stage_context


def _record():
    return logging.LogRecord("adspend", logging.INFO, __file__, 1, "msg", None, None)


def test_filter_fills_context_fields():
    record = _record()
    with instance_context("tight", size=(1, 2)):
        with stage_context("primal solve"):
            LogContextFilter().filter(record)
    assert (record.instance_id, record.stage, record.size) == ("tight", "primal solve", "1x2")


def test_filter_uses_dashes_outside_any_context():
    record = _record()
    contextvars.Context().run(LogContextFilter().filter, record)
    assert (record.instance_id, record.stage, record.size) == ("-", "-", "-")
