"""Real-time CLI dashboard for proxy monitoring."""

from datetime import datetime
from threading import Lock

from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import Config
from ui.log_utils import format_error_fields, write_cli_log

console = Console()


class ForwardInfo:
    """Info about a single forwarded request."""

    def __init__(self, path: str, status: int, timestamp: datetime):
        self.path = path[:80] + "..." if len(path) > 80 else path
        self.status = status
        self.timestamp = timestamp


class Dashboard:
    """Real-time dashboard showing forwarded requests and upstream errors."""

    def __init__(self, config: Config):
        self.config = config
        self._lock = Lock()
        self._recent: list[ForwardInfo] = []
        self._max_recent = 10
        self._request_count = {"ok": 0, "failed": 0}
        self._last_url: str | None = None
        self._errors: list[str] = []
        self._live: Live | None = None

    def start(self) -> "Dashboard":
        """Start the live dashboard."""
        self._live = Live(
            self._build_layout(),
            console=console,
            refresh_per_second=4,
            screen=False,
        )
        self._live.start()
        return self

    def stop(self) -> None:
        """Stop the live dashboard."""
        if self._live:
            self._live.stop()

    def log_upstream(self, url: str) -> None:
        """Record the TMDB URL about to be called."""
        with self._lock:
            self._last_url = url
            self._refresh()
            write_cli_log("DEBUG", "Making request to TMDB API", url=url)

    def log_response(self, path: str, status: int) -> None:
        """Record a successfully relayed response."""
        with self._lock:
            self._request_count["ok"] += 1
            self._recent.insert(0, ForwardInfo(path, status, datetime.now()))
            self._recent = self._recent[: self._max_recent]
            self._refresh()
            write_cli_log("FORWARD", path, status=status)

    def log_error(self, status: int | None, status_text: str | None, message: str) -> None:
        """Log an error."""
        with self._lock:
            self._request_count["failed"] += 1
            status_str, text_str = format_error_fields(status, status_text)
            truncated = message[:50] + "..." if len(message) > 50 else message
            self._errors.insert(0, f"{status_str} {text_str}: {truncated}")
            self._errors = self._errors[:3]
            self._refresh()
            write_cli_log("ERROR", message[:200], status=status_str, status_text=text_str)

    def _refresh(self) -> None:
        """Refresh the display."""
        if self._live:
            self._live.update(self._build_layout())

    def _build_layout(self) -> Layout:
        """Build the dashboard layout."""
        layout = Layout()

        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=5),
        )

        layout["header"].update(self._build_header())
        layout["body"].update(self._build_requests_panel())
        layout["footer"].update(self._build_footer())

        return layout

    def _build_header(self) -> Panel:
        """Build header with stats."""
        stats = Text()
        stats.append("TMDB Proxy", style="bold cyan")
        stats.append("  |  ")
        stats.append(f"OK: {self._request_count['ok']}", style="green")
        stats.append("  |  ")
        stats.append(f"Failed: {self._request_count['failed']}", style="red")
        stats.append("  |  ")
        stats.append(f"Port: {self.config.server.port}", style="dim")
        stats.append("  |  ")
        stats.append(self.config.server.environment, style="dim")

        return Panel(stats, style="cyan")

    def _build_requests_panel(self) -> Panel:
        """Build the recent requests panel."""
        if self._recent:
            table = Table(show_header=True, header_style="bold", expand=True, box=None)
            table.add_column("Time", style="dim", width=8)
            table.add_column("Status", width=6)
            table.add_column("Path", ratio=1)

            for info in self._recent:
                style = "green" if info.status < 300 else "yellow"
                table.add_row(
                    info.timestamp.strftime("%H:%M:%S"),
                    Text(str(info.status), style=style),
                    info.path,
                )

            content = table
        else:
            content = Text("Waiting for requests...", style="dim")

        subtitle = f"[dim]{self._last_url}[/dim]" if self._last_url else None
        return Panel(
            content,
            title="[blue]Forwarded Requests[/blue]",
            subtitle=subtitle,
            border_style="blue",
        )

    def _build_footer(self) -> Panel:
        """Build footer with errors and help."""
        if self._errors:
            error_text = Text()
            for err in self._errors:
                error_text.append("! ", style="red bold")
                error_text.append(err + "\n", style="red")
            content = error_text
        else:
            content = Text(
                f"Send requests to http://localhost:{self.config.server.port}"
                f"{self.config.forward.prefix}/<tmdb path>",
                style="dim",
            )

        return Panel(content, title="[dim]Status[/dim]", border_style="dim")
