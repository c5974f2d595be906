"""CLI UI components (Rich).

Kept apart from the commands so tables can be reused by `run` and `doctor`.
Everything here is printed to stderr: stdout carries the checklist only.
"""

from __future__ import annotations

from rich.table import Table

from core.services.candidate_pipeline import PipelineResult


def build_summary_table(result: PipelineResult) -> Table:
    """Candidates found per discovery stage."""

    table = Table(title="Candidates per source")
    table.add_column("Stage", style="cyan", no_wrap=True)
    table.add_column("Candidates", style="white", justify="right")
    for stage, count in result.stage_counts.items():
        table.add_row(stage, str(count))
    table.add_row("total", str(len(result.candidates)), style="bold")
    return table


def build_doctor_table() -> Table:
    table = Table(title="find-specs doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
