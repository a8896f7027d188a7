"""
compliance/services/aggregation.py

Dashboard aggregates folded from requirement snapshots:

- global_counts        -> summary counters + compliance rate
- per_agency_breakdown -> one row per agency with deadline-bearing work
- calendar_index       -> deadline date -> requirements due that day

All three are pure: the same snapshots always give the same result.
Requirements without a deadline never enter a count.
"""

from collections import OrderedDict
from dataclasses import asdict, dataclass
from typing import Dict, List, Tuple

from compliance.services.status import (
    CalendarStatus,
    SummaryStatus,
    calendar_status,
    pic_names,
    summary_status,
)
from compliance.models import Upload


def compliance_rate(compliant: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(compliant / total * 100, 1)


# ============================================================
# GLOBAL COUNTS
# ============================================================

@dataclass(frozen=True)
class GlobalCounts:
    total_agencies: int
    total_requirements: int
    compliant: int
    pending: int
    overdue: int
    for_approval: int
    compliance_rate: float

    def as_dict(self):
        return asdict(self)


def global_counts(requirements, total_agencies=None) -> GlobalCounts:
    """
    `for_approval` counts every upload awaiting review, whatever
    the state of its requirement. `total_agencies` defaults to the
    agencies present in the snapshots.
    """
    counts = {
        SummaryStatus.COMPLIANT: 0,
        SummaryStatus.PENDING: 0,
        SummaryStatus.OVERDUE: 0,
    }
    total = 0
    for_approval = 0
    agencies = set()

    for requirement in requirements:
        agencies.add(requirement.agency_id)
        for_approval += sum(
            1 for u in requirement.uploads
            if u.approval_status == Upload.ApprovalStatus.PENDING
        )

        status = summary_status(requirement)
        if status == SummaryStatus.NA:
            continue

        total += 1
        counts[status] += 1

    compliant = counts[SummaryStatus.COMPLIANT]

    return GlobalCounts(
        total_agencies=len(agencies) if total_agencies is None else total_agencies,
        total_requirements=total,
        compliant=compliant,
        pending=counts[SummaryStatus.PENDING],
        overdue=counts[SummaryStatus.OVERDUE],
        for_approval=for_approval,
        compliance_rate=compliance_rate(compliant, total),
    )


# ============================================================
# PER-AGENCY BREAKDOWN
# ============================================================

@dataclass(frozen=True)
class AgencyBreakdown:
    agency: str
    name: str
    total: int
    na: int
    pending: int
    overdue: int
    complied: int
    rate: float

    def as_dict(self):
        return asdict(self)


# Summary status -> breakdown bucket
AGENCY_BUCKETS = {
    SummaryStatus.NA: "na",
    SummaryStatus.PENDING: "pending",
    SummaryStatus.OVERDUE: "overdue",
    SummaryStatus.COMPLIANT: "complied",
}


def per_agency_breakdown(requirements) -> List[AgencyBreakdown]:
    """
    `total` covers deadline-bearing requirements only; `na` is
    reported alongside but never added to it. Agencies whose total
    is zero are left out.
    """
    rows: Dict[int, dict] = {}

    for requirement in requirements:
        row = rows.setdefault(requirement.agency_id, {
            "agency": requirement.agency_code,
            "name": requirement.agency_name,
            "na": 0,
            "pending": 0,
            "overdue": 0,
            "complied": 0,
        })
        row[AGENCY_BUCKETS[summary_status(requirement)]] += 1

    breakdown = []
    for row in rows.values():
        total = row["pending"] + row["overdue"] + row["complied"]
        if total == 0:
            continue

        breakdown.append(AgencyBreakdown(
            total=total,
            rate=compliance_rate(row["complied"], total),
            **row,
        ))

    breakdown.sort(key=lambda r: (r.agency, r.name))
    return breakdown


# ============================================================
# CALENDAR INDEX
# ============================================================

@dataclass(frozen=True)
class CalendarEntry:
    id: int
    name: str
    status: CalendarStatus
    pic_names: Tuple[str, ...]

    @property
    def pic(self):
        return ", ".join(self.pic_names)

    def as_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status.value,
            "pic": self.pic,
        }


def calendar_index(requirements) -> "OrderedDict[str, List[CalendarEntry]]":
    """
    Keyed by ISO date of the requirement deadline. Dates ascend;
    requirements sharing a date keep their input order.
    """
    dated = [r for r in requirements if r.deadline is not None]
    dated.sort(key=lambda r: r.deadline)

    index: "OrderedDict[str, List[CalendarEntry]]" = OrderedDict()

    for requirement in dated:
        index.setdefault(requirement.deadline.isoformat(), []).append(
            CalendarEntry(
                id=requirement.id,
                name=requirement.name,
                status=calendar_status(requirement),
                pic_names=tuple(pic_names(requirement)),
            )
        )

    return index


def calendar_payload(requirements):
    return {
        day: [entry.as_dict() for entry in entries]
        for day, entries in calendar_index(requirements).items()
    }
