from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.shortcuts import redirect
from django.urls import include, path


def root_redirect(request):
    if getattr(request.user, "is_reviewer", False):
        return redirect("compliance:dashboard-stats")
    return redirect("admin:index")


urlpatterns = [
    path("", root_redirect, name="root"),

    # Specialists manage agencies, requirements and reviews here
    path("admin/", admin.site.urls),

    # Read-only aggregates for reviewers
    path("api/dashboard/", include("compliance.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
