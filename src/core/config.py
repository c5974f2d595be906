"""Core configuration.

Centralizes environment variables (pydantic-settings) so the CLI and the
adapters read endpoints, paths and HTTP defaults the same way.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def project_root() -> Path:
    # core/config.py -> core -> src -> <project_root>
    return Path(__file__).resolve().parents[2]


def default_data_dir() -> Path:
    return project_root() / "data"


class AppSettings(BaseSettings):
    """Application settings.

    Every field can be overridden with a `FIND_SPECS_*` environment variable
    or a `.env` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="FIND_SPECS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    validation_report_url: str = Field(
        default="https://w3c.github.io/validate-repos/report.json",
        min_length=8,
        description="Validation report with W3C groups and their repositories.",
    )
    repo_map_url: str = Field(
        default="https://w3c.github.io/spec-dashboard/repo-map.json",
        min_length=8,
        description="Map of repositories to the specifications they produce.",
    )
    whatwg_db_url: str = Field(
        default="https://raw.githubusercontent.com/whatwg/sg/master/db.json",
        min_length=8,
        description="WHATWG standards database.",
    )

    index_path: Path = Field(
        default=Path("index.json"),
        description="Known-specifications index (browser-specs index.json).",
    )
    data_dir: Path = Field(
        default_factory=default_data_dir,
        description="Directory holding ignore.json, monitor-repos.json and groups.json.",
    )

    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout per request (seconds). None disables timeouts.",
    )
    user_agent: str = Field(
        default="find-specs/0.1 (+https://github.com/w3c/browser-specs)",
        min_length=1,
        description="User-Agent sent with every request.",
    )

    output_variable: str = Field(
        default="candidate_list",
        min_length=1,
        description="Name of the CI variable receiving the checklist.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Minimum level for log records written to stderr.",
    )

    @property
    def ignore_path(self) -> Path:
        return self.data_dir / "ignore.json"

    @property
    def monitor_path(self) -> Path:
        return self.data_dir / "monitor-repos.json"

    @property
    def groups_path(self) -> Path:
        return self.data_dir / "groups.json"
