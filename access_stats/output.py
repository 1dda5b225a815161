"""Access Stats - Report output"""

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box
from rich.markup import escape

from .models import AnalysisReport


def format_bytes(size) -> str:
    if size < 1024:
        return f"{int(size)} B"
    for unit in ("KB", "MB"):
        size /= 1024
        if size < 1024:
            return f"{size:.2f} {unit}"
    return f"{size / 1024:.2f} GB"


def _section(console: Console, title: str):
    console.print("\n" + "─" * 70, style="cyan")
    console.print(title, style="bold")


def _share_table(label: str, counts: dict, shares: dict) -> Table:
    table = Table(box=box.ROUNDED)
    table.add_column(label, style="cyan")
    table.add_column("Requests", style="white", justify="right")
    table.add_column("Share", style="green", justify="right")
    for name, count in sorted(counts.items(), key=lambda item: item[1], reverse=True):
        table.add_row(name, f"{count:,}", f"{shares.get(name, 0.0):.2%}")
    return table


def _page_list(pages, limit: int = 10) -> str:
    shown = sorted(pages)[:limit]
    text = "\n".join(f"  {page}" for page in shown)
    if len(pages) > limit:
        text += f"\n  ... and {len(pages) - limit} more"
    return text


def print_report(report: AnalysisReport, console: Console = None):
    console = console or Console()

    title = f"TRAFFIC REPORT: {report.file_name}" if report.file_name else "TRAFFIC REPORT"
    console.print("\n" + "═" * 70, style="cyan")
    console.print(f"  {escape(title)}", style="bold cyan")
    console.print("═" * 70, style="cyan")

    console.print(Panel.fit(
        f"Total Entries: [cyan]{report.total_entries:,}[/]\n"
        f"Skipped Lines: [{'red' if report.error_lines else 'green'}]{report.error_lines:,}[/]\n"
        f"Unique Human IPs: [cyan]{report.unique_human_users:,}[/]\n"
        f"Referer Domains: [cyan]{len(report.referer_domains):,}[/]",
        title="Summary",
        border_style="cyan"
    ))

    # Bots
    _section(console, "BOTS")
    console.print(f"  Googlebot: [yellow]{report.googlebot_count:,}[/] ({report.googlebot_percentage:.2f}%)")
    console.print(f"  YandexBot: [yellow]{report.yandexbot_count:,}[/] ({report.yandexbot_percentage:.2f}%)")
    console.print(f"  All bots: [yellow]{report.bot_count:,}[/]")
    console.print(f"  Humans: [green]{report.human_visits:,}[/] ({report.human_visit_percentage:.2f}%)")

    # Traffic
    _section(console, "TRAFFIC")
    console.print(f"  Total: [cyan]{format_bytes(report.total_traffic)}[/]")
    if report.min_time is not None:
        console.print(f"  Period: {report.min_time:%Y-%m-%d %H:%M:%S %z} - "
                      f"{report.max_time:%Y-%m-%d %H:%M:%S %z} ({report.hours_span} h)")
    console.print(f"  Per hour: [cyan]{format_bytes(report.traffic_rate)}[/]")
    console.print(f"  Human visits per hour: [cyan]{report.avg_visits_per_hour:.2f}[/]")
    console.print(f"  Error requests per hour: [red]{report.avg_error_requests_per_hour:.2f}[/]")

    # Pages
    _section(console, "PAGES")
    color = 'red' if report.error_requests else 'green'
    console.print(f"  Error requests (4xx/5xx): [{color}]{report.error_requests:,}[/] ({report.error_rate:.2f}%)")
    console.print(f"  Existing pages (200): [green]{len(report.existing_pages):,}[/]")
    if report.existing_pages:
        console.print(_page_list(report.existing_pages), markup=False, highlight=False)
    console.print(f"  Not found pages (404): [yellow]{len(report.not_found_pages):,}[/]")
    if report.not_found_pages:
        console.print(_page_list(report.not_found_pages), markup=False, highlight=False)

    # Users
    _section(console, "USERS")
    console.print(f"  Average visits per user: [cyan]{report.avg_visits_per_user:.2f}[/]")
    console.print(f"  Peak visits per second: [cyan]{report.peak_visits_per_second:,}[/]")
    console.print(f"  Max visits by one user: [cyan]{report.max_visits_per_user:,}[/]")

    if report.referer_domains:
        _section(console, "REFERER DOMAINS")
        console.print(_page_list(report.referer_domains, limit=20), markup=False, highlight=False)

    if report.os_counts:
        _section(console, "OPERATING SYSTEMS")
        console.print(_share_table("OS", report.os_counts, report.os_statistics))

    if report.browser_counts:
        _section(console, "BROWSERS")
        console.print(_share_table("Browser", report.browser_counts, report.browser_statistics))

    console.print("\n" + "═" * 70, style="cyan")
