"""
Observability - Logging and Monitoring

Per-call resolution logs for debug analysis.
"""

from .resolution_logger import ResolutionLogger, create_resolution_logger
from .log_reader import ResolutionLogReader, find_resolution_logs, find_failed_resolutions

__all__ = [
    'ResolutionLogger',
    'create_resolution_logger',
    'ResolutionLogReader',
    'find_resolution_logs',
    'find_failed_resolutions'
]
