"""SummaryLoadingObserver — prints a one-line Rich summary of each load to stderr."""

from rich.console import Console


class SummaryLoadingObserver:
    """Reports how many records a load produced once it is finished.

    Only batch_filtered, end_of_data and filter_failed produce output; all
    other events are no-ops. Output goes to stderr so stdout carries only
    records.

    Does NOT inherit from LoadingObserver (structural typing via Protocol).
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console(stderr=True)

    def source_set(self, variant: str, location: str) -> None:
        pass

    def session_reset(self, variant: str, location: str | None) -> None:
        pass

    def structure_discovered(
        self, variant: str, input_fields: int, output_fields: int
    ) -> None:
        pass

    def batch_filtered(self, variant: str, records_in: int, records_out: int) -> None:
        self._console.print(
            f"[cyan]{variant}[/cyan] filtered {records_in} records"
            f" into [green]{records_out}[/green]"
        )

    def record_filtered(self, variant: str, index: int) -> None:
        pass

    def end_of_data(self, variant: str, total_records: int) -> None:
        self._console.print(
            f"[cyan]{variant}[/cyan] streamed [green]{total_records}[/green] records"
        )

    def mode_conflict(self, variant: str, requested: str, active: str) -> None:
        pass

    def filter_failed(self, variant: str, stage: str, reason: str) -> None:
        self._console.print(f"[cyan]{variant}[/cyan] [red]failed[/red] at {stage}")
