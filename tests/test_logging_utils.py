import logging

import numpy as np

from arc_edges.logging_utils import _safe_repr, apply_debug_logging, debug_log_call


def test_debug_log_call_logs_entry_and_exit(caplog):
    logger = logging.getLogger("arc_edges.tests.debug")

    @debug_log_call(logger)
    def double(values):
        return values * 2

    with caplog.at_level(logging.DEBUG, logger="arc_edges.tests.debug"):
        result = double(np.arange(3))

    assert result.tolist() == [0, 2, 4]
    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("Entering") and "double" in m for m in messages)
    assert any(m.startswith("Exiting") and "values=[0, 2, 4]" in m for m in messages)


def test_debug_log_call_is_silent_above_debug(caplog):
    logger = logging.getLogger("arc_edges.tests.quiet")
    wrapped = debug_log_call(logger)(lambda: 1)

    with caplog.at_level(logging.INFO, logger="arc_edges.tests.quiet"):
        assert wrapped() == 1

    assert not caplog.records


def test_debug_log_call_does_not_wrap_twice():
    logger = logging.getLogger("arc_edges.tests.twice")
    wrapped = debug_log_call(logger)(lambda: 1)

    assert debug_log_call(logger)(wrapped) is wrapped


def test_apply_debug_logging_wraps_public_functions_only():
    def public():
        return "ok"

    def _private():
        return "hidden"

    public.__module__ = "fake_module"
    _private.__module__ = "fake_module"
    namespace = {"__name__": "fake_module", "public": public, "_private": _private}

    apply_debug_logging(namespace)

    assert getattr(namespace["public"], "_debug_logging_wrapped", False)
    assert namespace["_private"] is _private
    assert namespace["public"]() == "ok"


def test_safe_repr_summarizes_large_arrays():
    text = _safe_repr({"x": np.linspace(0.0, 1.0, 50), "circular": np.zeros(10, dtype=bool)})

    assert "shape=(50,)" in text
    assert "min=0" in text and "max=1" in text
    assert "true=0" in text
