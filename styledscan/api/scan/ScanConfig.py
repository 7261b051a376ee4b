"""Scan configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ROOT = Path("./src")
SOURCE_EXTENSIONS = (".js", ".ts", ".tsx")


class ScanConfig(BaseModel):
    """Settings for one scan run, built from CLI arguments."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: Path = Field(DEFAULT_ROOT, description="Directory to scan")
    extensions: tuple[str, ...] = Field(SOURCE_EXTENSIONS, description="Eligible file suffixes")
    max_workers: int | None = Field(None, gt=0, description="Reader threads (executor default when unset)")
