"""
Harness layer: runs backends for a config and reports to a result sink
"""

from .report import (
    DEFAULT_BACKENDS,
    CollectingResultSink,
    LoggingResultSink,
    ResultSink,
    results_agree,
    run_backends,
)

__all__ = [
    "DEFAULT_BACKENDS",
    "CollectingResultSink",
    "LoggingResultSink",
    "ResultSink",
    "results_agree",
    "run_backends",
]
