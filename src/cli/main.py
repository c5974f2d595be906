"""find-specs CLI.

`find-specs` (no subcommand) runs the pipeline: the checklist goes to stdout
and to the CI variable, diagnostics go to stderr. Any failure exits with
status 1 and no checklist.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console

from adapters.checklist_exporter import render_checklist
from adapters.github_actions import export_variable
from adapters.http_client import build_async_client
from adapters.prober import HttpProber
from adapters.remote_documents import RemoteDocuments
from cli import doctor
from cli.ui_components import build_summary_table
from core.config import AppSettings
from core.matcher import SpecMatcher
from core.resources_loader import (
    load_group_policy,
    load_ignore_list,
    load_monitor_list,
    load_spec_index,
    resolve_index_path,
)
from core.services.candidate_pipeline import PipelineResult, find_candidates

app = typer.Typer(
    add_completion=False,
    help="List W3C/WHATWG specifications missing from the browser-specs index.",
)
app.command(name="doctor")(doctor.run)

_stderr = Console(stderr=True)


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


async def collect_candidates(settings: AppSettings) -> PipelineResult:
    """Load local resources, fetch remote documents and run the pipeline."""

    matcher = SpecMatcher(
        load_spec_index(resolve_index_path(settings)),
        load_ignore_list(settings.ignore_path),
        load_monitor_list(settings.monitor_path),
    )
    policy = load_group_policy(settings.groups_path)

    async with build_async_client(settings) as client:
        return await find_candidates(
            source=RemoteDocuments(client, settings),
            prober=HttpProber(client),
            matcher=matcher,
            policy=policy,
        )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    index: Optional[Path] = typer.Option(
        None,
        "--index",
        help="Known-specifications index (defaults to FIND_SPECS_INDEX_PATH or ./index.json).",
    ),
    no_export: bool = typer.Option(False, "--no-export", help="Do not export the CI variable."),
    summary: bool = typer.Option(False, "--summary", help="Print candidates per stage to stderr."),
) -> None:
    if ctx.invoked_subcommand is not None:
        return

    try:
        settings = AppSettings()
        if index is not None:
            settings = settings.model_copy(update={"index_path": index})
        configure_logging(settings.log_level)

        result = asyncio.run(collect_candidates(settings))
        checklist = render_checklist(result.candidates)
        if not no_export:
            export_variable(settings.output_variable, checklist)
    except Exception:
        logger.exception("find-specs failed")
        raise typer.Exit(code=1)

    typer.echo(checklist)
    if summary:
        _stderr.print(build_summary_table(result))


def run() -> None:
    app()
