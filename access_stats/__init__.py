"""Access Stats package"""

from .patterns import VERSION, MAX_LINE_LENGTH
from .errors import AccessStatsError, MalformedLineError, LineTooLongError
from .models import HttpMethod, AgentInfo, LogRecord, AnalysisReport
from .agent import classify_agent, is_bot, named_bot
from .parser import parse_line
from .analyzer import StatisticsAccumulator
from .reader import read_lines
from .output import format_bytes, print_report

__all__ = [
    'VERSION', 'MAX_LINE_LENGTH',
    'AccessStatsError', 'MalformedLineError', 'LineTooLongError',
    'HttpMethod', 'AgentInfo', 'LogRecord', 'AnalysisReport',
    'classify_agent', 'is_bot', 'named_bot', 'parse_line',
    'StatisticsAccumulator', 'read_lines',
    'format_bytes', 'print_report',
]
