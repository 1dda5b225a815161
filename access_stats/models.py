"""Access Stats - Data models"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, FrozenSet, Optional


class HttpMethod(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"
    CONNECT = "CONNECT"
    TRACE = "TRACE"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_token(cls, token: Optional[str]) -> "HttpMethod":
        if not token:
            return cls.UNKNOWN
        try:
            return cls(token.upper())
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class AgentInfo:
    """Classification of a user agent string"""
    is_bot: bool
    os_family: str
    browser_family: str


@dataclass(frozen=True)
class LogRecord:
    """Parsed access log entry"""
    client_address: str
    timestamp: datetime
    method: HttpMethod
    path: str
    status_code: int
    response_size: int
    referer: Optional[str]
    agent_raw: str
    agent_info: AgentInfo


@dataclass(frozen=True)
class AnalysisReport:
    """Snapshot of accumulated traffic statistics.

    Rates are per hour over the span between the earliest and latest
    record. When that span is under one whole hour the rate fields hold
    the raw totals instead.
    """
    file_name: Optional[str] = None
    total_entries: int = 0
    processed_lines: int = 0
    error_lines: int = 0

    googlebot_count: int = 0
    yandexbot_count: int = 0
    googlebot_percentage: float = 0.0
    yandexbot_percentage: float = 0.0
    bot_count: int = 0
    human_visits: int = 0
    human_visit_percentage: float = 0.0

    total_traffic: int = 0
    min_time: Optional[datetime] = None
    max_time: Optional[datetime] = None
    hours_span: int = 0
    traffic_rate: float = 0.0
    avg_visits_per_hour: float = 0.0
    avg_error_requests_per_hour: float = 0.0

    error_requests: int = 0
    error_rate: float = 0.0
    existing_pages: FrozenSet[str] = frozenset()
    not_found_pages: FrozenSet[str] = frozenset()

    unique_human_users: int = 0
    avg_visits_per_user: float = 0.0
    peak_visits_per_second: int = 0
    max_visits_per_user: int = 0
    referer_domains: FrozenSet[str] = frozenset()

    os_counts: Dict[str, int] = field(default_factory=dict)
    browser_counts: Dict[str, int] = field(default_factory=dict)
    os_statistics: Dict[str, float] = field(default_factory=dict)
    browser_statistics: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        """JSON-friendly representation"""
        return {
            'file_name': self.file_name,
            'summary': {
                'total_entries': self.total_entries,
                'processed_lines': self.processed_lines,
                'error_lines': self.error_lines,
            },
            'bots': {
                'googlebot': {'count': self.googlebot_count, 'percentage': self.googlebot_percentage},
                'yandexbot': {'count': self.yandexbot_count, 'percentage': self.yandexbot_percentage},
                'bot_requests': self.bot_count,
                'human_visits': self.human_visits,
                'human_visit_percentage': self.human_visit_percentage,
            },
            'traffic': {
                'total_bytes': self.total_traffic,
                'first_request': self.min_time.isoformat() if self.min_time else None,
                'last_request': self.max_time.isoformat() if self.max_time else None,
                'hours_span': self.hours_span,
                'bytes_per_hour': self.traffic_rate,
                'visits_per_hour': self.avg_visits_per_hour,
                'error_requests_per_hour': self.avg_error_requests_per_hour,
            },
            'pages': {
                'existing': sorted(self.existing_pages),
                'not_found': sorted(self.not_found_pages),
                'error_requests': self.error_requests,
                'error_rate': self.error_rate,
            },
            'users': {
                'unique_humans': self.unique_human_users,
                'avg_visits_per_user': self.avg_visits_per_user,
                'peak_visits_per_second': self.peak_visits_per_second,
                'max_visits_per_user': self.max_visits_per_user,
            },
            'referer_domains': sorted(self.referer_domains),
            'os': {'counts': dict(self.os_counts), 'share': dict(self.os_statistics)},
            'browsers': {'counts': dict(self.browser_counts), 'share': dict(self.browser_statistics)},
        }
