# ============================================================================
# SOURCEFILE: logging.py
# RELPATH: search_path_helpers/src/pathhelpers/logging.py
# PROJECT: Search Path Helpers
# VERSION: 1.0.0
# LIFECYCLE: Proposed
# DESCRIPTION: Structured JSON logging for command line sessions
# ============================================================================

"""
Structured Logging Module.

JSON-lines session logs for the command line front end. The path helpers
themselves never log; their errors go straight back to the caller, and the
caller decides what to record here.

A session log holds one ``operation_start`` entry, then the command's
warnings, rejections and errors, then ``operation_complete`` on success,
and always a closing ``session_end`` entry with per-event counts.
"""

from __future__ import annotations

import io
import json
import uuid
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Any, Sequence
from enum import Enum
import sys

# Problems with the session log itself go to the standard logging tree.
_log = logging.getLogger("pathhelpers")


def configure_utf8_console(stream_names: Sequence[str] = ("stdout", "stderr")) -> List[str]:
    """Switch the standard streams to UTF-8 where the stream allows it.

    Paths echoed back by the CLI can hold any character a file name can,
    which a cp1252 Windows console cannot encode. Streams that are already
    UTF-8, or that cannot be reconfigured, are left as they are.

    Args:
        stream_names: Attributes of ``sys`` to reconfigure

    Returns:
        Names of the streams that were switched
    """
    switched = []
    for name in stream_names:
        stream = getattr(sys, name, None)
        encoding = (getattr(stream, "encoding", None) or "").lower().replace("-", "")
        if stream is None or encoding == "utf8":
            continue

        reconfigure = getattr(stream, "reconfigure", None)
        if not callable(reconfigure):
            continue
        try:
            reconfigure(encoding="utf-8", errors="backslashreplace")
        except (ValueError, OSError, io.UnsupportedOperation) as e:
            _log.debug("Cannot reconfigure sys.%s: %s", name, e)
            continue
        switched.append(name)

    return switched


class LogEvent(Enum):
    """Enumeration of loggable events."""
    OPERATION_START = "operation_start"
    OPERATION_COMPLETE = "operation_complete"
    ERROR = "error"
    WARNING = "warning"
    PATTERN_REJECTED = "pattern_rejected"
    SESSION_END = "session_end"


class StructuredLogger:
    """
    JSON-structured logger for Search Path Helpers sessions.

    Every entry carries ``sessionId``, ``timestamp``, ``event`` and
    ``details``, one JSON object per line.
    """

    def __init__(self, log_dir: str = "logs", session_id: Optional[str] = None):
        """
        Initialize structured logger.

        Args:
            log_dir: Directory for log files
            session_id: Optional session ID (generated if not provided)
        """
        self.log_dir = Path(log_dir)
        self.session_id = session_id or str(uuid.uuid4())
        self.start_time = datetime.now(timezone.utc)

        timestamp = self.start_time.strftime("%Y%m%d_%H%M%S")
        self.log_file = self.log_dir / f"path_helpers_session_{timestamp}_{self.session_id[:8]}.json"
        self.log_buffer: List[Dict] = []

        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            self.log_file.touch(exist_ok=True)
        except OSError as e:
            _log.warning("Failed to create session log %s: %s", self.log_file, e)

    def log_operation_start(self, command: str, arguments: Dict[str, Any], flavor: str) -> None:
        """
        Log the start of a command.

        Args:
            command: Command name (e.g. "split", "normalize")
            arguments: Arguments the command was given
            flavor: Path flavor in effect
        """
        self._write(LogEvent.OPERATION_START, {
            "command": command,
            "arguments": arguments,
            "flavor": flavor
        })

    def log_operation_complete(self, command: str, result: Any, elapsed_ms: int) -> None:
        """
        Log successful completion of a command.

        Args:
            command: Command name
            result: JSON-serializable command result
            elapsed_ms: Duration in milliseconds
        """
        self._write(LogEvent.OPERATION_COMPLETE, {
            "command": command,
            "result": result,
            "elapsedMs": elapsed_ms
        })

    def log_error(self, command: str, error_message: str, error_type: str) -> None:
        self._write(LogEvent.ERROR, {
            "command": command,
            "errorMessage": error_message,
            "errorType": error_type
        })

    def log_pattern_rejected(self, pattern: str, param_name: str, reason: str) -> None:
        """Log a search pattern that failed validation."""
        self._write(LogEvent.PATTERN_REJECTED, {
            "pattern": pattern,
            "paramName": param_name,
            "reason": reason
        })

    def log_warning(self, message: str, context: Optional[Dict] = None) -> None:
        """Log a condition the command worked around (e.g. a missing config file)."""
        self._write(LogEvent.WARNING, {
            "message": message,
            "context": context or {}
        })

    def session_summary(self) -> Dict:
        """
        Count the events logged so far.

        Returns:
            Summary with session id, start/end times and per-event counts
        """
        counts: Dict[str, int] = {}
        for entry in self.log_buffer:
            counts[entry["event"]] = counts.get(entry["event"], 0) + 1

        return {
            "startTime": self.start_time.isoformat(),
            "endTime": datetime.now(timezone.utc).isoformat(),
            "totalEvents": len(self.log_buffer),
            "eventCounts": counts
        }

    def close(self) -> Dict:
        """
        Finish the session with a ``session_end`` entry.

        Returns:
            The summary that was written
        """
        summary = self.session_summary()
        self._write(LogEvent.SESSION_END, summary)
        return summary

    def _write(self, event: LogEvent, details: Dict[str, Any]) -> None:
        entry = {
            "sessionId": self.session_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event": event.value,
            "details": details
        }
        self.log_buffer.append(entry)

        try:
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(json.dumps(entry, ensure_ascii=False) + '\n')
        except OSError as e:
            # a broken session log never fails the command
            _log.warning("Failed to write log entry to %s: %s", self.log_file, e)


# ============================================================================
# LIFECYCLE STATUS: Proposed
# DEPENDENCIES: None (standalone logging)
# TESTS: tests/unit/test_logging.py, tests/integration/test_cli.py
# ============================================================================
