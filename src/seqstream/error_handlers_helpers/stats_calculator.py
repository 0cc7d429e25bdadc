"""Anomaly statistics and gap tolerance"""

import logging
import threading
from typing import Any, Dict, Optional

from ..config import SequenceStreamSettings, load_settings
from ..exceptions import SequenceAnomalyError
from ..sequence_id import SequenceIdError

logger = logging.getLogger(__name__)


class SequenceErrorStats:
    """Counts anomalies reported by a sequence validator.

    Usable directly as an ``on_error`` handler. Once the cumulative number of
    missing ids exceeds ``max_gap_tolerance`` it raises SequenceAnomalyError,
    which propagates out of the read that detected the gap.
    """

    def __init__(
        self,
        service_name: str,
        max_gap_tolerance: Optional[int] = None,
        *,
        modulus: Optional[int] = None,
    ):
        """
        Initialize stats tracker

        Args:
            service_name: Name used in log lines and stats
            max_gap_tolerance: Missing-id budget before escalating (None = never escalate)
            modulus: Counter modulus when ids wrap, used to size gaps
        """
        self.service_name = service_name
        self.max_gap_tolerance = max_gap_tolerance
        self.modulus = modulus
        self._lock = threading.Lock()
        self.dropped_count = 0
        self.duplicated_count = 0
        self.missing_ids = 0
        self.last_error: Optional[SequenceIdError] = None

    @classmethod
    def from_settings(cls, service_name: str, settings: Optional[SequenceStreamSettings] = None) -> "SequenceErrorStats":
        """Build a tracker using the configured tolerance and counter width."""
        if settings is None:
            settings = load_settings()
        modulus = None
        if settings.sequence_bits is not None:
            modulus = 1 << settings.sequence_bits
        return cls(service_name, settings.max_gap_tolerance, modulus=modulus)

    def __call__(self, error: SequenceIdError) -> None:
        with self._lock:
            self.last_error = error
            if error.is_dropped:
                self.dropped_count += 1
                self.missing_ids += error.missing_count(modulus=self.modulus)
            else:
                self.duplicated_count += 1
            missing_ids = self.missing_ids

        if self.max_gap_tolerance is not None and missing_ids > self.max_gap_tolerance:
            error_msg = (
                f"{self.service_name} sequence gap tolerance exceeded: "
                f"missing ids {missing_ids} > {self.max_gap_tolerance}"
            )
            logger.error(error_msg)
            raise SequenceAnomalyError(error_msg, sequence_error=error, missing_ids=missing_ids)

    def reset(self) -> None:
        """Clear all counters."""
        with self._lock:
            self.dropped_count = 0
            self.duplicated_count = 0
            self.missing_ids = 0
            self.last_error = None
        logger.debug(f"{self.service_name} sequence stats: Reset counters")

    def get_stats(self) -> Dict[str, Any]:
        """
        Get anomaly statistics

        Returns:
            Dictionary with anomaly counts
        """
        with self._lock:
            stats: Dict[str, Any] = {
                "service_name": self.service_name,
                "dropped": self.dropped_count,
                "duplicated": self.duplicated_count,
                "missing_ids": self.missing_ids,
                "max_gap_tolerance": self.max_gap_tolerance,
            }
            if self.last_error is not None:
                stats["last_error"] = self.last_error.to_dict()
        return stats

    def log_stats(self) -> None:
        """Log current anomaly statistics"""
        stats = self.get_stats()

        if stats["dropped"] == 0 and stats["duplicated"] == 0:
            logger.debug(f"{self.service_name} sequence stats: No anomalies")
            return

        logger.info(
            f"{self.service_name} sequence stats: "
            f"dropped={stats['dropped']}, "
            f"duplicated={stats['duplicated']}, "
            f"missing_ids={stats['missing_ids']}"
        )
