import logging

import numpy as np

from segment_intersect import Segment, get_rescale_policy
from segment_intersect.logging_utils import _safe_repr, debug_log_call


def test_safe_repr_summarizes_large_arrays():
    rendered = _safe_repr(np.arange(20, dtype=float).reshape(10, 2))
    assert rendered.startswith("ndarray(shape=(10, 2), dtype=float64)")
    assert "min=0" in rendered and "max=19" in rendered

    small = _safe_repr(np.array([1.5, 2.5]))
    assert "values=[1.5, 2.5]" in small


def test_safe_repr_truncates_long_sequences():
    rendered = _safe_repr(list(range(20)))
    assert rendered.endswith("...]")


def test_debug_log_call_logs_entry_and_exit(caplog):
    logger = logging.getLogger("segment_intersect.tests")

    @debug_log_call(logger)
    def _double(value):
        return value * 2

    with caplog.at_level(logging.DEBUG, logger="segment_intersect.tests"):
        assert _double(21) == 42

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Entering") and "args=[21]" in message for message in messages)
    assert any(message.startswith("Exiting") and "42" in message for message in messages)


def test_debug_log_call_is_silent_above_debug(caplog):
    with caplog.at_level(logging.INFO, logger="segment_intersect.rescale"):
        get_rescale_policy(Segment((0, 0), (1, 1)))
    assert not [record for record in caplog.records if record.name == "segment_intersect.rescale"]


def test_rescale_entry_point_is_traced(caplog):
    with caplog.at_level(logging.DEBUG, logger="segment_intersect.rescale"):
        get_rescale_policy(Segment((0, 0), (1, 1)))
    messages = [record.getMessage() for record in caplog.records]
    assert any("get_rescale_policy" in message for message in messages)
    assert any("multiplier" in message for message in messages)
