from django.urls import path

from compliance import views

app_name = "compliance"

urlpatterns = [
    path("stats/", views.dashboard_stats, name="dashboard-stats"),
    path("compliance-by-agency/", views.compliance_by_agency, name="compliance-by-agency"),
    path("calendar/", views.compliance_calendar, name="calendar"),
    path(
        "requirements/<int:requirement_id>/status/",
        views.requirement_status,
        name="requirement-status",
    ),
]
