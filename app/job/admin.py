from django.contrib import admin
from job.models import JobPosting


@admin.register(JobPosting)
class JobPostingAdmin(admin.ModelAdmin):
    list_display = ["public_id", "title", "company_name", "location", "created_at"]
    search_fields = ["title", "company_name", "location"]
    list_filter = ["job_type", "created_at"]
    readonly_fields = ["public_id", "created_at", "updated_at"]
    ordering = ["-posting_id"]
    list_per_page = 100
