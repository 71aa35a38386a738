"""Storage row mapping and record resume."""

from contract_gen.records.resume import (
    DueDateSubstitution,
    ResumeSnapshot,
    load_record,
    merge_record,
)

__all__ = ["DueDateSubstitution", "ResumeSnapshot", "load_record", "merge_record"]
