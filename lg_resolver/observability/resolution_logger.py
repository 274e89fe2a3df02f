"""
Resolution Logger using structlog

Writes one JSONL file per resolve call with its complete event history:
references found, requests sent, resolutions received and the outcome.
"""

import structlog
from pathlib import Path
from datetime import datetime
from typing import Dict, List, Optional


class ResolutionLogger:
    """Logger for a single resolve call"""

    def __init__(self, call_id: str, scenario: str, log_dir: Path):
        """
        Initialize logger for a specific resolve call

        Args:
            call_id: Unique id of the resolve call
            scenario: LG application id the call resolves against
            log_dir: Directory the log file is created in
        """
        self.call_id = call_id
        self.scenario = scenario

        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.utcnow().strftime("%Y%m%d_%H%M%S")
        self.log_file = log_dir / f"{timestamp}_{call_id}.jsonl"

        self._file = open(self.log_file, 'a')
        self.logger = self._setup_logger()

    def _setup_logger(self):
        """Bind a structlog logger that renders JSON lines into the log file"""
        logger = structlog.wrap_logger(
            structlog.WriteLogger(self._file),
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(default=str)
            ],
            context_class=dict,
        )
        return logger.bind(call_id=self.call_id, scenario=self.scenario)

    def log_started(self, locale: Optional[str], entity_names: List[str]):
        self.logger.info("resolve.started", locale=locale, entities=entity_names)

    def log_references_extracted(self, references: List[str]):
        self.logger.info(
            "references.extracted",
            references=references,
            reference_count=len(references)
        )

    def log_fetch_completed(self, resolutions: Dict[str, str]):
        """Log the resolution table assembled from the service responses"""
        self.logger.info(
            "fetch.completed",
            resolutions=resolutions,
            resolved_count=len(resolutions)
        )

    def log_completed(self, duration_ms: int):
        self.logger.info("resolve.completed", duration_ms=duration_ms)

    def log_failed(self, error: BaseException, duration_ms: Optional[int] = None):
        """Log the error that aborted the call"""
        self.logger.error(
            "resolve.failed",
            error_type=type(error).__name__,
            error_message=str(error),
            status_code=getattr(error, 'status_code', None),
            missing=getattr(error, 'missing', None),
            duration_ms=duration_ms
        )

    def get_log_file_path(self) -> Path:
        """Get the path to this call's log file"""
        return self.log_file

    def close(self):
        if not self._file.closed:
            self._file.close()


def create_resolution_logger(
    call_id: str,
    scenario: str,
    log_dir: Optional[Path]
) -> Optional[ResolutionLogger]:
    """
    Create a resolution logger, or None when per-call logging is disabled

    Args:
        call_id: Unique id of the resolve call
        scenario: LG application id
        log_dir: Target directory, None disables logging

    Returns:
        ResolutionLogger instance or None
    """
    if log_dir is None:
        return None
    return ResolutionLogger(call_id, scenario, log_dir)
