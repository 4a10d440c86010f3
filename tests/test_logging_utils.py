import logging

import numpy as np

from ringplot import Arc, COMPLETE, GappedArcs, Segment
from ringplot.logging_utils import _safe_repr, debug_log_call


def test_debug_log_call_records_entry_and_exit(caplog) -> None:
    logger = logging.getLogger("ringplot.tests.trace")

    @debug_log_call(logger)
    def add(a, b):
        return a + b

    with caplog.at_level(logging.DEBUG, logger="ringplot.tests.trace"):
        assert add(1, 2) == 3

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Entering") and "add" in message for message in messages)
    assert any(message.startswith("Exiting") and message.endswith("-> 3") for message in messages)


def test_debug_log_call_is_silent_above_debug(caplog) -> None:
    logger = logging.getLogger("ringplot.tests.quiet")

    @debug_log_call(logger)
    def noop():
        return None

    with caplog.at_level(logging.INFO, logger="ringplot.tests.quiet"):
        noop()

    assert caplog.records == []


def test_layout_calls_are_traced(caplog) -> None:
    chromosomes = [Segment("chr1", 0, 10)]

    with caplog.at_level(logging.DEBUG, logger="ringplot.arcs"):
        layout = GappedArcs(Arc(0.0, COMPLETE), chromosomes, 0.1)
        layout.arc_of(None, chromosomes[0])

    messages = [record.getMessage() for record in caplog.records]
    assert any("Entering GappedArcs.arc_of" in message for message in messages)
    assert any("Laid out 1 feature(s) on a closed base" in message for message in messages)


def test_safe_repr_summarises_arrays() -> None:
    assert "shape=(100,)" in _safe_repr(np.arange(100.0))
    assert "max=99" in _safe_repr(np.arange(100.0))
    assert "values=[1, 2]" in _safe_repr(np.array([1, 2]))
