"""
Compliance service layer.

Pure status derivation and aggregation over fact snapshots,
plus the ORM loaders that build those snapshots.
"""

# =====================================================
# SNAPSHOTS
# =====================================================
from .snapshots import (
    AssignmentFact,
    RequirementSnapshot,
    UploadFact,
    load_due_assignments,
    load_requirement_snapshots,
)

# =====================================================
# STATUS ENGINE
# =====================================================
from .status import (
    CalendarStatus,
    SummaryStatus,
    calendar_status,
    requirement_status_detail,
    summary_status,
)

# =====================================================
# AGGREGATES
# =====================================================
from .aggregation import (
    calendar_index,
    calendar_payload,
    global_counts,
    per_agency_breakdown,
)

__all__ = [
    # Snapshots
    "AssignmentFact",
    "RequirementSnapshot",
    "UploadFact",
    "load_due_assignments",
    "load_requirement_snapshots",

    # Status engine
    "CalendarStatus",
    "SummaryStatus",
    "calendar_status",
    "requirement_status_detail",
    "summary_status",

    # Aggregates
    "calendar_index",
    "calendar_payload",
    "global_counts",
    "per_agency_breakdown",
]
