"""Helper modules for sequence error handlers"""

from .stats_calculator import SequenceErrorStats

__all__ = ["SequenceErrorStats"]
