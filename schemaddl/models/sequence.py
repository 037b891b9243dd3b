# ============================================================================
# SEQUENCE MODEL
# ============================================================================
# STATUS: Core model - Spanner sequences
# PURPOSE: Sequences referenced by sequence-backed auto-generated columns
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: SequenceDef
# DEPENDENCIES: pydantic
# ============================================================================
"""
Sequence Model

Spanner only supports bit-reversed positive sequences. Columns refer to a
sequence by name through AutoGen(generation_type=SEQUENCE).
"""

from typing import Optional

from pydantic import BaseModel, Field


class SequenceDef(BaseModel):
    """A named sequence."""
    id: str
    name: str
    sequence_kind: str = Field(default="BIT_REVERSED_POSITIVE")
    skip_range_min: Optional[int] = None
    skip_range_max: Optional[int] = None
    start_with_counter: Optional[int] = None

    model_config = {"frozen": True}

    @property
    def has_skip_range(self) -> bool:
        return self.skip_range_min is not None and self.skip_range_max is not None


__all__ = ["SequenceDef"]
