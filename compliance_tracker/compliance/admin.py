from django.contrib import admin

from .models import Agency, Requirement, RequirementAssignment, Upload


# ============================================================
# AGENCIES
# ============================================================

@admin.register(Agency)
class AgencyAdmin(admin.ModelAdmin):
    list_display = (
        "code",
        "name",
        "is_active",
        "created_at",
    )

    list_filter = (
        "is_active",
    )

    search_fields = (
        "code",
        "name",
    )

    ordering = ("code",)


# ============================================================
# REQUIREMENTS (WHAT & WHEN)
# ============================================================

class RequirementAssignmentInline(admin.TabularInline):
    model = RequirementAssignment
    extra = 0
    readonly_fields = ("created_at",)
    autocomplete_fields = ("user",)


class UploadInline(admin.TabularInline):
    model = Upload
    fk_name = "requirement"
    extra = 0
    readonly_fields = ("uploaded_at", "reviewed_at")
    autocomplete_fields = ("uploader", "reviewed_by")


@admin.register(Requirement)
class RequirementAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "agency",
        "category",
        "deadline",
        "is_active",
    )

    list_filter = (
        "agency",
        "category",
        "is_active",
    )

    search_fields = (
        "name",
        "agency__code",
        "agency__name",
    )

    autocomplete_fields = (
        "agency",
    )

    date_hierarchy = "deadline"

    inlines = (
        RequirementAssignmentInline,
        UploadInline,
    )


# ============================================================
# EXECUTION (ASSIGNMENTS & UPLOADS)
# ============================================================

@admin.register(RequirementAssignment)
class RequirementAssignmentAdmin(admin.ModelAdmin):
    list_display = (
        "requirement",
        "user",
        "deadline",
        "compliance_status",
        "created_at",
    )

    list_filter = (
        "compliance_status",
    )

    search_fields = (
        "requirement__name",
        "user__username",
        "user__employee_name",
    )

    autocomplete_fields = (
        "requirement",
        "user",
    )


@admin.register(Upload)
class UploadAdmin(admin.ModelAdmin):
    list_display = (
        "requirement",
        "uploader",
        "approval_status",
        "uploaded_at",
        "reviewed_by",
    )

    list_filter = (
        "approval_status",
    )

    autocomplete_fields = (
        "requirement",
        "assignment",
        "uploader",
        "reviewed_by",
    )

    actions = (
        "approve_selected",
        "reject_selected",
    )

    # Saved one by one so review signals fire
    @admin.action(description="Approve selected submissions")
    def approve_selected(self, request, queryset):
        for upload in queryset:
            upload.mark_approved(reviewer=request.user)

    @admin.action(description="Reject selected submissions")
    def reject_selected(self, request, queryset):
        for upload in queryset:
            upload.mark_rejected(reviewer=request.user)
