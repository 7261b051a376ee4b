"""Merged result over all scanned files."""

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator


class AggregateReport(BaseModel):
    """Totals and ranked per-identifier counts for a whole scan."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    files_scanned: int = Field(0, ge=0)
    native_total: int = Field(0, ge=0)
    custom_total: int = Field(0, ge=0)
    per_identifier: dict[str, PositiveInt] = Field(default_factory=dict)
    ranked: list[tuple[str, PositiveInt]] = Field(
        default_factory=list, description="per_identifier ordered by count descending, then name"
    )

    @model_validator(mode="after")
    def _check_counts(self) -> "AggregateReport":
        total = sum(self.per_identifier.values())
        if self.native_total + self.custom_total != total:
            raise ValueError(
                f"native_total + custom_total ({self.native_total} + {self.custom_total}) "
                f"does not match per_identifier total ({total})"
            )
        if dict(self.ranked) != self.per_identifier or len(self.ranked) != len(self.per_identifier):
            raise ValueError("ranked must list every per_identifier entry exactly once")
        return self
