"""Source scanning configuration schema."""
from typing import List

from pydantic import BaseModel, Field

from onionarch.config.defaults import DEFAULT_EXCLUDES


class ScanConfig(BaseModel):
    """Controls which files are analysed."""

    exclude: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDES),
        description="Glob patterns relative to the source root",
    )
    fail_on_parse_error: bool = Field(False, description="Abort instead of skipping unparsable modules")
