"""Access Stats - Statistics accumulator"""

import logging
import re
from collections import Counter
from datetime import datetime
from typing import Iterable, Optional, Set
from urllib.parse import urlsplit

from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, MofNCompleteColumn

from .agent import named_bot
from .models import AnalysisReport, LogRecord
from .parser import parse_line
from .patterns import ERROR_STATUS_RANGE, URI_INVALID_CHARS

logger = logging.getLogger(__name__)

_URI_INVALID_RE = re.compile(URI_INVALID_CHARS)


def referer_host(referer: str) -> Optional[str]:
    """Host of a referer URI with its case kept, or None if it has none.

    Raises ValueError when the referer is not a valid URI.
    """
    if _URI_INVALID_RE.search(referer):
        raise ValueError(f"invalid character in URI: {referer!r}")

    hostport = urlsplit(referer).netloc.rpartition("@")[2]
    if hostport.startswith("["):
        host, _, port = hostport.partition("]")
        host += "]"
        port = port[1:]
    else:
        host, _, port = hostport.partition(":")
    if port and not (port.isascii() and port.isdigit()):
        raise ValueError(f"invalid port in URI: {referer!r}")
    return host or None


class StatisticsAccumulator:
    """Single-pass reducer over parsed log records.

    State lives until reset() is called; snapshot() derives a report
    from it without changing anything.
    """

    def __init__(self, console=None):
        self.console = console
        self.reset()

    def reset(self):
        self.total_entries = 0
        self.total_traffic = 0
        self.min_time: Optional[datetime] = None
        self.max_time: Optional[datetime] = None
        self.processed_lines = 0
        self.error_lines = 0

        self.googlebot_count = 0
        self.yandexbot_count = 0

        self.existing_pages: Set[str] = set()
        self.not_found_pages: Set[str] = set()
        self.error_requests = 0

        self.os_counts: Counter = Counter()
        self.browser_counts: Counter = Counter()

        self.human_visits = 0
        self.unique_human_ips: Set[str] = set()
        self.visits_per_second: Counter = Counter()
        self.visits_per_user: Counter = Counter()
        self.referer_domains: Set[str] = set()

    def add(self, record: LogRecord):
        if record.response_size < 0:
            logger.warning("Skipping record with negative response size: %d", record.response_size)
            return

        self.total_entries += 1
        self.total_traffic += record.response_size
        self._update_time_range(record.timestamp)

        bot = named_bot(record.agent_raw)
        if bot == "Googlebot":
            self.googlebot_count += 1
        elif bot == "YandexBot":
            self.yandexbot_count += 1

        self.os_counts[record.agent_info.os_family] += 1
        self.browser_counts[record.agent_info.browser_family] += 1

        if record.status_code == 200:
            self.existing_pages.add(record.path)
        if record.status_code == 404:
            self.not_found_pages.add(record.path)
        if record.status_code in ERROR_STATUS_RANGE:
            self.error_requests += 1

        if not record.agent_info.is_bot:
            self.human_visits += 1
            self.unique_human_ips.add(record.client_address)
            self.visits_per_user[record.client_address] += 1
            self.visits_per_second[int(record.timestamp.timestamp())] += 1

        if record.referer:
            self._add_referer(record.referer)

    def add_line(self, line: str):
        self.add(parse_line(line))

    def _update_time_range(self, when: datetime):
        if self.min_time is None:
            self.min_time = self.max_time = when
            return
        if when < self.min_time:
            self.min_time = when
        if when > self.max_time:
            self.max_time = when

    def _add_referer(self, referer: str):
        try:
            host = referer_host(referer)
        except ValueError:
            logger.warning("Invalid referer: %s", referer)
            return
        if host:
            self.referer_domains.add(host)

    def merge(self, other: "StatisticsAccumulator") -> "StatisticsAccumulator":
        """Fold another accumulator's state into this one."""
        self.total_entries += other.total_entries
        self.total_traffic += other.total_traffic
        self.processed_lines += other.processed_lines
        self.error_lines += other.error_lines
        if other.min_time is not None:
            self._update_time_range(other.min_time)
            self._update_time_range(other.max_time)

        self.googlebot_count += other.googlebot_count
        self.yandexbot_count += other.yandexbot_count
        self.existing_pages |= other.existing_pages
        self.not_found_pages |= other.not_found_pages
        self.error_requests += other.error_requests

        self.os_counts.update(other.os_counts)
        self.browser_counts.update(other.browser_counts)

        self.human_visits += other.human_visits
        self.unique_human_ips |= other.unique_human_ips
        self.visits_per_second.update(other.visits_per_second)
        self.visits_per_user.update(other.visits_per_user)
        self.referer_domains |= other.referer_domains
        return self

    def analyze_file(self, name: str, lines: Iterable[str]) -> AnalysisReport:
        """Feed every line through the parser, skipping the ones that fail.

        Does not reset first; callers reset between independent files.
        """
        if self.console is not None:
            lines = list(lines)
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                MofNCompleteColumn(),
                console=self.console,
                transient=True,
            ) as progress:
                task = progress.add_task(f"Analyzing {name}...", total=len(lines))
                for line in lines:
                    self._process_line(line)
                    progress.update(task, advance=1)
        else:
            for line in lines:
                self._process_line(line)

        logger.info("%s: processed %d lines, %d errors", name, self.processed_lines, self.error_lines)
        return self.snapshot(name)

    def _process_line(self, line: str):
        try:
            self.add_line(line)
        except Exception as e:
            logger.warning("Skipping line: %s", e)
            self.error_lines += 1
        else:
            self.processed_lines += 1

    def hours_span(self) -> int:
        """Whole hours between the earliest and latest record."""
        if self.min_time is None or self.max_time is None:
            return 0
        start, end = sorted((self.min_time, self.max_time))
        return int((end - start).total_seconds() // 3600)

    def _per_hour(self, value: int) -> float:
        if self.min_time is None or value == 0:
            return 0.0
        hours = self.hours_span()
        return float(value) if hours <= 0 else value / hours

    def _percentage(self, count: int) -> float:
        return count / self.total_entries * 100 if self.total_entries else 0.0

    def _shares(self, counts: Counter) -> dict:
        if self.total_entries == 0:
            return {}
        return {name: count / self.total_entries for name, count in counts.items()}

    def snapshot(self, file_name: Optional[str] = None) -> AnalysisReport:
        unique_humans = len(self.unique_human_ips)
        if self.human_visits and unique_humans:
            avg_visits_per_user = self.human_visits / unique_humans
        else:
            avg_visits_per_user = 0.0

        return AnalysisReport(
            file_name=file_name,
            total_entries=self.total_entries,
            processed_lines=self.processed_lines,
            error_lines=self.error_lines,
            googlebot_count=self.googlebot_count,
            yandexbot_count=self.yandexbot_count,
            googlebot_percentage=self._percentage(self.googlebot_count),
            yandexbot_percentage=self._percentage(self.yandexbot_count),
            bot_count=self.total_entries - self.human_visits,
            human_visits=self.human_visits,
            human_visit_percentage=self._percentage(self.human_visits),
            total_traffic=self.total_traffic,
            min_time=self.min_time,
            max_time=self.max_time,
            hours_span=self.hours_span(),
            traffic_rate=self._per_hour(self.total_traffic),
            avg_visits_per_hour=self._per_hour(self.human_visits),
            avg_error_requests_per_hour=self._per_hour(self.error_requests),
            error_requests=self.error_requests,
            error_rate=self._percentage(self.error_requests),
            existing_pages=frozenset(self.existing_pages),
            not_found_pages=frozenset(self.not_found_pages),
            unique_human_users=unique_humans,
            avg_visits_per_user=avg_visits_per_user,
            peak_visits_per_second=max(self.visits_per_second.values(), default=0),
            max_visits_per_user=max(self.visits_per_user.values(), default=0),
            referer_domains=frozenset(self.referer_domains),
            os_counts=dict(self.os_counts),
            browser_counts=dict(self.browser_counts),
            os_statistics=self._shares(self.os_counts),
            browser_statistics=self._shares(self.browser_counts),
        )
