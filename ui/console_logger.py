"""Plain console request logger for headless and production runs."""

from rich.console import Console

from ui.log_utils import format_error_fields, write_cli_log

console = Console()
error_console = Console(stderr=True)


class ConsoleLogger:
    """Print one line per event and mirror it to the CLI log file."""

    def __init__(self, verbose: bool = True):
        self.verbose = verbose

    def log_upstream(self, url: str) -> None:
        console.print(f"[dim]Making request to TMDB API:[/dim] {url}", highlight=False)
        write_cli_log("DEBUG", "Making request to TMDB API", url=url)

    def log_response(self, path: str, status: int) -> None:
        if self.verbose:
            console.print(f"[green]{status}[/green] {path}", highlight=False)
        write_cli_log("FORWARD", path, status=status)

    def log_error(self, status: int | None, status_text: str | None, message: str) -> None:
        status_str, text_str = format_error_fields(status, status_text)
        error_console.print(
            f"[red]Error fetching data from TMDB:[/red] "
            f"status={status_str} statusText={text_str} message={message}",
            highlight=False,
        )
        write_cli_log("ERROR", message[:200], status=status_str, status_text=text_str)
