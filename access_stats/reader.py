"""Access Stats - Log file reader"""

from pathlib import Path
from typing import List

from .errors import LineTooLongError
from .patterns import MAX_LINE_LENGTH


def read_lines(filepath, max_length: int = MAX_LINE_LENGTH) -> List[str]:
    """Read a log file, rejecting it if any line exceeds max_length."""
    path = Path(filepath)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {filepath}")

    lines = []
    with open(path, 'r', encoding='utf-8', errors='ignore') as f:
        for raw in f:
            line = raw.rstrip('\r\n')
            if len(line) > max_length:
                raise LineTooLongError(path.name, len(line), max_length)
            lines.append(line)
    return lines
