from functools import wraps

from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_GET

from compliance.models import Agency, Requirement
from compliance.services import (
    calendar_payload,
    global_counts,
    load_requirement_snapshots,
    per_agency_breakdown,
    requirement_status_detail,
)
from compliance.services.snapshots import requirement_snapshot


# ============================================================
# ACCESS
# ============================================================

def reviewer_required(view_func):
    """
    Aggregates are readable by super admins and
    compliance specialists only.
    """

    @login_required
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not request.user.is_reviewer:
            return JsonResponse(
                {"detail": "You do not have permission to view compliance data."},
                status=403,
            )
        return view_func(request, *args, **kwargs)

    return _wrapped


# ============================================================
# DASHBOARD STATS
# ============================================================

@require_GET
@reviewer_required
def dashboard_stats(request):
    snapshots = load_requirement_snapshots()
    counts = global_counts(
        snapshots,
        total_agencies=Agency.objects.filter(is_active=True).count(),
    )
    return JsonResponse(counts.as_dict())


@require_GET
@reviewer_required
def compliance_by_agency(request):
    rows = per_agency_breakdown(load_requirement_snapshots())
    return JsonResponse([row.as_dict() for row in rows], safe=False)


@require_GET
@reviewer_required
def compliance_calendar(request):
    return JsonResponse(calendar_payload(load_requirement_snapshots()))


# ============================================================
# REQUIREMENT DETAIL
# ============================================================

@require_GET
@reviewer_required
def requirement_status(request, requirement_id):
    requirement = get_object_or_404(
        Requirement.objects
        .select_related("agency")
        .prefetch_related("assignments__user", "uploads"),
        id=requirement_id,
    )
    return JsonResponse(requirement_status_detail(requirement_snapshot(requirement)))
