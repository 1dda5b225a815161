"""Access Stats - Exceptions"""


class AccessStatsError(Exception):
    """Base class for access-stats errors"""


class MalformedLineError(AccessStatsError):
    """A log line does not match the combined log format"""

    def __init__(self, line: str, reason: str = "line does not match log format"):
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


class LineTooLongError(AccessStatsError):
    """A file contains a line longer than the allowed maximum"""

    def __init__(self, file_name: str, length: int, max_length: int):
        super().__init__(
            f"File {file_name} contains a line of {length} characters "
            f"(maximum allowed is {max_length})"
        )
        self.file_name = file_name
        self.length = length
        self.max_length = max_length
