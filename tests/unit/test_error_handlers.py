"""Tests for the ready-made sequence error handlers."""

import logging

import orjson
import pytest

from seqstream.error_handlers import (
    combine_handlers,
    log_sequence_errors,
    publish_sequence_errors,
    raise_on_sequence_error,
)
from seqstream.exceptions import SequenceAnomalyError
from seqstream.sequence_id import SequenceIdError, SequenceIdErrorType, WrappingSequenceArithmetic
from seqstream.sequence_validator import make_sequence_validator
from seqstream.streams import from_iterable, to_list
from tests.helpers.ticks import ticks

_DROP = SequenceIdError(SequenceIdErrorType.DROPPED, 10, 14)
_DUPLICATE = SequenceIdError(SequenceIdErrorType.DUPLICATED, 10, 9)


class TestLogSequenceErrors:
    """Tests for log_sequence_errors function."""

    def test_logs_gap_with_missing_count(self, caplog) -> None:
        handler = log_sequence_errors("feed")

        with caplog.at_level(logging.WARNING, logger="seqstream.error_handlers"):
            handler(_DROP)

        assert "feed sequence gap detected: last 10, got 14 (missing: 3)" in caplog.text

    def test_logs_out_of_order(self, caplog) -> None:
        handler = log_sequence_errors("feed")

        with caplog.at_level(logging.WARNING, logger="seqstream.error_handlers"):
            handler(_DUPLICATE)

        assert "feed out-of-order message: last 10, got 9" in caplog.text

    def test_gap_across_rollover_counts_skipped_ids(self, caplog) -> None:
        """A wrapped drop reports the ids skipped modulo the counter width."""
        stream, _ = make_sequence_validator(
            249,
            lambda tick: tick.seq,
            lambda tick: True,
            log_sequence_errors("feed"),
            from_iterable(ticks([250, 2])),
            arithmetic=WrappingSequenceArithmetic(8),
        )

        with caplog.at_level(logging.WARNING, logger="seqstream.error_handlers"):
            to_list(stream)

        assert "feed sequence gap detected: last 250, got 2 (missing: 7)" in caplog.text

    def test_uses_given_logger(self, caplog) -> None:
        handler = log_sequence_errors("feed", log=logging.getLogger("custom.feed"))

        with caplog.at_level(logging.WARNING, logger="custom.feed"):
            handler(_DROP)

        assert [record.name for record in caplog.records] == ["custom.feed"]

    def test_validator_keeps_reading_after_logging(self, caplog) -> None:
        stream, _ = make_sequence_validator(
            0, lambda tick: tick.seq, lambda tick: True, log_sequence_errors("feed"), from_iterable(ticks([1, 5, 6]))
        )

        with caplog.at_level(logging.WARNING):
            values = to_list(stream)

        assert [tick.seq for tick in values] == [1, 5, 6]
        assert len(caplog.records) == 1


class TestRaiseOnSequenceError:
    """Tests for raise_on_sequence_error function."""

    def test_raises_with_error_attached(self) -> None:
        with pytest.raises(SequenceAnomalyError) as exc_info:
            raise_on_sequence_error(_DROP)

        assert exc_info.value.sequence_error is _DROP
        assert "last 10, got 14" in str(exc_info.value)


class TestPublishSequenceErrors:
    """Tests for publish_sequence_errors function."""

    def test_publishes_json_bytes(self) -> None:
        published = []

        publish_sequence_errors(published.append)(_DUPLICATE)

        assert len(published) == 1
        assert orjson.loads(published[0]) == {"error_type": "duplicated", "last_seq_id": 10, "curr_seq_id": 9}


class TestCombineHandlers:
    """Tests for combine_handlers function."""

    def test_calls_each_handler_in_order(self) -> None:
        calls = []
        handler = combine_handlers(lambda error: calls.append(("a", error)), lambda error: calls.append(("b", error)))

        handler(_DROP)

        assert calls == [("a", _DROP), ("b", _DROP)]

    def test_raising_handler_stops_the_rest(self) -> None:
        calls = []
        handler = combine_handlers(raise_on_sequence_error, calls.append)

        with pytest.raises(SequenceAnomalyError):
            handler(_DROP)

        assert calls == []
