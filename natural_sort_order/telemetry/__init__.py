"""Telemetry and observability helpers.

This package emits structured events for normalization anomalies.
"""

from .logger import EventLogger

__all__ = ["EventLogger"]
