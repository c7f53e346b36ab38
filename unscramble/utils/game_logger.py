"""
Game Logger Module for the Unscramble Server

Writes one JSON document per line for user actions, server responses,
game events and errors, to a dated log file under LOG_DIR.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path
from ..config.app_config import Config
from .helpers import get_user_identity

# Event type written to the log -> counter reported by get_log_stats()
EVENT_COUNTERS = (
    ('USER_ACTION', 'user_actions'),
    ('SERVER_RESPONSE', 'server_responses'),
    ('GAME_EVENT', 'game_events'),
    ('ERROR', 'errors'),
)

STATE_LOG_FIELDS = ('current_word_count', 'score', 'is_guessed_word_wrong', 'is_game_over')


class GameLogger:
    """
    Structured logger for the Unscramble game server.

    Everything at the configured level goes to the file; the console only
    shows warnings and errors.
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        resolved = logging.getLevelName(str(level).upper())
        self.level = resolved if isinstance(resolved, int) else logging.INFO

        self.logger = self._setup_logger()

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now():%Y-%m-%d}.log"

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger('unscramble_game')
        logger.setLevel(self.level)

        # Rebuilding the logger (e.g. a second GameLogger) must not duplicate output
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    def _write(self, event_type: str, action: str, user_info: Dict[str, Any],
               details: Dict[str, Any], level: int = logging.INFO) -> None:
        entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details,
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """
        Record a player intent (new_game, submit_guess, skip_word, ...).

        Args:
            request: Flask request (HTTP or Socket.IO)
            action: Intent name
            game_id: Game the intent targets, if any
            **kwargs: Extra fields for the details block
        """
        self._write('USER_ACTION', action, get_user_identity(request), {
            'game_id': game_id,
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            **kwargs
        })

    def log_server_response(self, request, action: str, success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None, **kwargs):
        """Record what was sent back; failures are logged at ERROR."""
        self._write(
            'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR',
            action,
            get_user_identity(request),
            {
                'game_id': game_id,
                'success': success,
                'response_size': len(str(response_data)),
                'response_data': self._sanitize_response_data(response_data),
                **kwargs
            },
            logging.INFO if success else logging.ERROR,
        )

    def log_game_event(self, game_id: Optional[str], event: str, user_ip: str, **kwargs):
        """Record a game milestone: game_started, round_won, word_skipped, game_over, game_reset."""
        self._write('GAME_EVENT', event, {'user_ip': user_ip, 'session_id': None},
                    {'game_id': game_id, **kwargs})

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        self._write('ERROR', action, get_user_identity(request), {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }, logging.ERROR)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Drop the rendered screen and keep only the counters of the state."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = {key: value for key, value in data.items() if key != 'screen'}
        state = sanitized.get('state')
        if isinstance(state, dict):
            sanitized['state'] = {field: state.get(field) for field in STATE_LOG_FIELDS}
        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Count today's log entries by event type, for the health endpoint."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
        }
        stats.update({counter: 0 for _, counter in EVENT_COUNTERS})

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    stats['total_entries'] += 1
                    for marker, counter in EVENT_COUNTERS:
                        if marker in line:
                            stats[counter] += 1
                            break
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return stats


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
