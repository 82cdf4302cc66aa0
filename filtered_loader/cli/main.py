"""CLI entrypoint for filtered-loader — typer app with `load` and `structure` commands."""

import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console

from filtered_loader.cli.output.records import record_to_json_line
from filtered_loader.cli.output.schema_table import build_schema_table
from filtered_loader.config.domain.config import LoaderConfig
from filtered_loader.config.domain.source import SourceConfig
from filtered_loader.config.infrastructure.observer import StructlogConfigObserver
from filtered_loader.config.infrastructure.yaml_loader import YamlConfigLoader
from filtered_loader.core.errors import FilteredLoaderError
from filtered_loader.loading.domain.filtered_source import FilteredSource
from filtered_loader.loading.domain.observer import LoadingObserver
from filtered_loader.loading.infrastructure.composite_observer import (
    CompositeLoadingObserver,
)
from filtered_loader.loading.infrastructure.factory import create_filtered_source
from filtered_loader.loading.infrastructure.observer import StructlogLoadingObserver
from filtered_loader.loading.infrastructure.summary_observer import (
    SummaryLoadingObserver,
)
from filtered_loader.source.infrastructure.observer import StructlogSourceObserver
from filtered_loader.source.infrastructure.registry import source_kind_for_path

app = typer.Typer(add_completion=False)

_MODES = ("batch", "incremental")


def _configure_structlog(log_format: str) -> None:
    """Configure structlog to write to stderr in the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _resolve_config(path: Path, config_path: Path | None, mode: str | None) -> LoaderConfig:
    """Load the YAML config if given, else pick a source by file extension.

    An explicit --mode always wins over the mode in the config file.
    """
    if mode is not None and mode not in _MODES:
        typer.echo(
            f"Invalid mode: {mode!r}. Must be 'batch' or 'incremental'.", err=True
        )
        raise typer.Exit(code=1)

    if config_path is not None:
        cfg = YamlConfigLoader(observer=StructlogConfigObserver()).load(path=config_path)
    else:
        cfg = LoaderConfig(source=SourceConfig(kind=source_kind_for_path(path)))

    if mode is not None:
        cfg = cfg.model_copy(update={"mode": mode})
    return cfg


def _build_loader(cfg: LoaderConfig, log_format: str) -> FilteredSource:
    observers: list[LoadingObserver] = [StructlogLoadingObserver()]
    if log_format != "json":
        observers.append(SummaryLoadingObserver())
    return create_filtered_source(
        config=cfg,
        observer=CompositeLoadingObserver(observers=observers),
        source_observer=StructlogSourceObserver(),
    )


@app.command()
def load(
    path: Path = typer.Argument(..., help="Data file to load"),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Loader config YAML (source, transform, mode)"
    ),
    mode: str | None = typer.Option(
        None, "--mode", "-m", help="Retrieval mode: 'batch' or 'incremental'"
    ),
    log_format: str = typer.Option(
        "console", "--log-format", help="Log format: 'console' or 'json'"
    ),
) -> None:
    """Load PATH, filter every record, and print the records as JSON lines."""
    _configure_structlog(log_format=log_format)
    try:
        cfg = _resolve_config(path=path, config_path=config_path, mode=mode)
        with _build_loader(cfg, log_format=log_format) as loader:
            loader.set_source(path)
            if cfg.mode == "incremental":
                while (record := loader.get_next_record()) is not None:
                    typer.echo(record_to_json_line(record))
            else:
                for record in loader.get_data().records:
                    typer.echo(record_to_json_line(record))
    except FilteredLoaderError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def structure(
    path: Path = typer.Argument(..., help="Data file to inspect"),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Loader config YAML (source, transform, mode)"
    ),
    log_format: str = typer.Option(
        "console", "--log-format", help="Log format: 'console' or 'json'"
    ),
) -> None:
    """Print the filtered structure of PATH as a table."""
    _configure_structlog(log_format=log_format)
    try:
        cfg = _resolve_config(path=path, config_path=config_path, mode=None)
        with _build_loader(cfg, log_format=log_format) as loader:
            loader.set_source(path)
            if cfg.mode == "batch":
                # Batch loaders only know their structure after a full read.
                loader.get_data()
            schema = loader.get_structure()
    except FilteredLoaderError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    Console().print(build_schema_table(schema=schema, title=str(path)))


if __name__ == "__main__":
    app()
