"""Access Stats - Log line parser"""

import logging
import re
from datetime import datetime

from .agent import classify_agent
from .errors import MalformedLineError
from .models import HttpMethod, LogRecord
from .patterns import LOG_PATTERN, TIMESTAMP_FORMAT, TIMESTAMP_PATTERN

logger = logging.getLogger(__name__)

_LOG_RE = re.compile(LOG_PATTERN)
_TIMESTAMP_RE = re.compile(TIMESTAMP_PATTERN)


def parse_response_size(token: str) -> int:
    """Byte count from the size field; "-", empty and garbage all give 0."""
    if not token or token == "-":
        return 0
    try:
        size = int(token)
    except ValueError:
        logger.warning("Invalid response size %r, using 0", token)
        return 0
    return max(size, 0)


def parse_line(line: str) -> LogRecord:
    """Parse one combined-format line.

    Raises MalformedLineError when the line does not match the format or
    its timestamp cannot be read. Problems in the size field never fail
    the line.
    """
    line = line.rstrip("\r\n")
    match = _LOG_RE.match(line)
    if not match:
        raise MalformedLineError(line)

    groups = match.groupdict()
    if not _TIMESTAMP_RE.match(groups['timestamp']):
        raise MalformedLineError(line, "invalid timestamp")
    try:
        timestamp = datetime.strptime(groups['timestamp'], TIMESTAMP_FORMAT)
    except ValueError:
        raise MalformedLineError(line, "invalid timestamp") from None

    referer = groups['referer']
    agent_raw = groups['user_agent']

    return LogRecord(
        client_address=groups['ip'],
        timestamp=timestamp,
        method=HttpMethod.from_token(groups['method']),
        path=groups['path'],
        status_code=int(groups['status']),
        response_size=parse_response_size(groups['size']),
        referer=None if referer in ("", "-") else referer,
        agent_raw=agent_raw,
        agent_info=classify_agent(agent_raw),
    )
