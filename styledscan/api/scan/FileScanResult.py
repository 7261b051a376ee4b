"""Per-file scan result."""

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator


class FileScanResult(BaseModel):
    """Counts of ``styled`` uses found in one file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    filename: str = Field(..., description="Path of the scanned file")
    native_count: int = Field(0, ge=0, description="Number of styled.<element> uses")
    custom_count: int = Field(0, ge=0, description="Number of styled(<Component>) uses")
    per_identifier: dict[str, PositiveInt] = Field(
        default_factory=dict, description="Occurrences per identifier, shared across kinds"
    )

    @model_validator(mode="after")
    def _check_counts(self) -> "FileScanResult":
        total = sum(self.per_identifier.values())
        if self.native_count + self.custom_count != total:
            raise ValueError(
                f"native_count + custom_count ({self.native_count} + {self.custom_count}) "
                f"does not match per_identifier total ({total}) for {self.filename}"
            )
        return self
