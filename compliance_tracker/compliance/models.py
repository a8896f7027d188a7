from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone


class Agency(models.Model):
    """
    Regulatory body that imposes requirements.
    """

    code = models.CharField(
        max_length=30,
        unique=True,
        help_text="Short agency identifier (stored upper-case)"
    )
    name = models.CharField(max_length=255)
    is_active = models.BooleanField(default=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["code"]
        verbose_name_plural = "agencies"

    def save(self, *args, **kwargs):
        self.code = (self.code or "").strip().upper()
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.code} - {self.name}"


class Requirement(models.Model):
    """
    A regulatory obligation owned by one agency.

    A requirement without a deadline is permanently
    "not applicable" and never counted in compliance stats.
    """

    agency = models.ForeignKey(
        Agency,
        on_delete=models.CASCADE,
        related_name="requirements"
    )

    name = models.CharField(max_length=255)
    category = models.CharField(max_length=100, blank=True)
    description = models.TextField(blank=True)

    deadline = models.DateField(null=True, blank=True, db_index=True)

    is_active = models.BooleanField(default=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["deadline", "id"]

    def __str__(self):
        return self.name


class RequirementAssignment(models.Model):
    """
    Links a requirement to its responsible PIC.
    """

    class ComplianceStatus(models.TextChoices):
        PENDING = "PENDING", "Pending"
        SUBMITTED = "SUBMITTED", "Submitted"
        APPROVED = "APPROVED", "Approved"
        REJECTED = "REJECTED", "Rejected"
        OVERDUE = "OVERDUE", "Overdue"

    requirement = models.ForeignKey(
        Requirement,
        on_delete=models.CASCADE,
        related_name="assignments"
    )

    # Nullable: an assignment can outlive its PIC account
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="requirement_assignments"
    )

    deadline = models.DateField(
        null=True,
        blank=True,
        db_index=True,
        help_text="Defaults to the requirement deadline"
    )

    compliance_status = models.CharField(
        max_length=20,
        choices=ComplianceStatus.choices,
        default=ComplianceStatus.PENDING,
        db_index=True
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(
                fields=["deadline", "compliance_status"],
                name="assignment_due_status_idx",
            ),
        ]

    def save(self, *args, **kwargs):
        if self.deadline is None and self.requirement_id:
            self.deadline = self.requirement.deadline
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.requirement} -> {self.user or 'unassigned'}"


class Upload(models.Model):
    """
    One piece of evidence submitted against a requirement.
    """

    class ApprovalStatus(models.TextChoices):
        PENDING = "PENDING", "Pending"
        APPROVED = "APPROVED", "Approved"
        REJECTED = "REJECTED", "Rejected"

    requirement = models.ForeignKey(
        Requirement,
        on_delete=models.CASCADE,
        related_name="uploads"
    )

    assignment = models.ForeignKey(
        RequirementAssignment,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="uploads"
    )

    uploader = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="compliance_uploads"
    )

    file = models.FileField(upload_to="compliance/uploads/%Y/%m/", blank=True)

    approval_status = models.CharField(
        max_length=20,
        choices=ApprovalStatus.choices,
        default=ApprovalStatus.PENDING,
        db_index=True
    )

    admin_remarks = models.TextField(blank=True)

    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reviewed_uploads"
    )
    reviewed_at = models.DateTimeField(null=True, blank=True)

    uploaded_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["-uploaded_at"]

    def __str__(self):
        return f"{self.requirement} | {self.approval_status}"

    def clean(self):
        if self.assignment_id and self.assignment.requirement_id != self.requirement_id:
            raise ValidationError(
                {"assignment": "Assignment belongs to a different requirement."}
            )

    # =====================================================
    # REVIEW ACTIONS
    # =====================================================
    def mark_approved(self, reviewer=None, remarks=""):
        self._record_review(self.ApprovalStatus.APPROVED, reviewer, remarks)

    def mark_rejected(self, reviewer=None, remarks=""):
        self._record_review(self.ApprovalStatus.REJECTED, reviewer, remarks)

    def _record_review(self, decision, reviewer, remarks):
        self.approval_status = decision
        if reviewer:
            self.reviewed_by = reviewer
        if remarks:
            self.admin_remarks = remarks
        self.reviewed_at = timezone.now()
        self.save()
