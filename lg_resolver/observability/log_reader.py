"""
Log Reader

Utilities for reading resolve call logs back for debugging.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, List, Optional

logger = logging.getLogger(__name__)


class ResolutionLogReader:
    """Reader for resolve call logs"""

    def __init__(self, log_file: Path):
        """
        Initialize log reader

        Args:
            log_file: Path to the .jsonl log file
        """
        self.log_file = Path(log_file)
        self.entries = []
        self.load()

    def load(self):
        """Load all log entries from file"""
        self.entries = []
        if not self.log_file.exists():
            raise FileNotFoundError(f"Log file not found: {self.log_file}")

        with open(self.log_file, 'r') as f:
            for line_num, line in enumerate(f, 1):
                if not line.strip():
                    continue
                try:
                    entry = json.loads(line)
                    entry['_line_number'] = line_num
                    self.entries.append(entry)
                except json.JSONDecodeError as e:
                    logger.warning(f"Failed to parse line {line_num} of {self.log_file}: {e}")

    def get_all_events(self) -> List[Dict[str, Any]]:
        """Get all log entries"""
        return self.entries

    def get_events_by_type(self, event_type: str) -> List[Dict[str, Any]]:
        """
        Get all events of a specific type

        Args:
            event_type: Event type (e.g., 'resolve.failed', 'references.extracted')

        Returns:
            List of matching events
        """
        return [e for e in self.entries if e.get('event') == event_type]

    def get_references(self) -> List[str]:
        """Get the template references found in the activity"""
        extracted = self.get_events_by_type('references.extracted')
        return extracted[0].get('references', []) if extracted else []

    def get_resolutions(self) -> Dict[str, str]:
        fetched = self.get_events_by_type('fetch.completed')
        return fetched[0].get('resolutions', {}) if fetched else {}

    def get_error(self) -> Optional[Dict[str, Any]]:
        """
        Get failure details if any

        Returns:
            Failure entry or None if the call succeeded
        """
        errors = self.get_events_by_type('resolve.failed')
        return errors[0] if errors else None

    def get_summary(self) -> Dict[str, Any]:
        """
        Get call summary

        Returns:
            Summary dict with key information
        """
        error = self.get_error()
        completed = self.get_events_by_type('resolve.completed')

        if error:
            status = 'failed'
        elif completed:
            status = 'success'
        else:
            status = 'incomplete'

        return {
            'call_id': self.entries[0].get('call_id') if self.entries else None,
            'scenario': self.entries[0].get('scenario') if self.entries else None,
            'total_events': len(self.entries),
            'status': status,
            'references': self.get_references(),
            'resolved_count': len(self.get_resolutions()),
            'error': {
                'error_type': error.get('error_type'),
                'error_message': error.get('error_message'),
                'status_code': error.get('status_code'),
                'missing': error.get('missing')
            } if error else None
        }


def find_resolution_logs(log_dir: Path) -> List[Path]:
    """
    Find all resolve call log files, newest first

    Args:
        log_dir: Directory to search

    Returns:
        List of log file paths
    """
    log_dir = Path(log_dir)
    if not log_dir.exists():
        return []

    return sorted(log_dir.glob("*.jsonl"), reverse=True)


def find_failed_resolutions(log_dir: Path) -> List[Dict[str, Any]]:
    """
    Find all failed resolve calls

    Args:
        log_dir: Directory to search

    Returns:
        List of failed call summaries
    """
    failed = []

    for log_file in find_resolution_logs(log_dir):
        reader = ResolutionLogReader(log_file)
        summary = reader.get_summary()

        if summary['status'] == 'failed':
            failed.append({
                'log_file': str(log_file),
                'summary': summary
            })

    return failed
