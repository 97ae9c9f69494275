import uuid

from django.db import models


class JobPosting(models.Model):
    """
    채용 공고

    - posting_id: 내부 저장 키 (삽입 순서 보장용, 외부에 노출하지 않음)
    - public_id: 외부 식별자 (JSON 의 `id`)
    """

    posting_id = models.BigAutoField(primary_key=True)
    public_id = models.UUIDField(default=uuid.uuid4, unique=True, editable=False)
    title = models.TextField()
    job_type = models.TextField()
    location = models.TextField()
    description = models.TextField()
    salary = models.TextField()
    company_name = models.TextField()
    company_description = models.TextField()
    company_contact_email = models.TextField()
    company_contact_phone = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "job_posting"
        ordering = ["posting_id"]

    def __str__(self):
        return f"{self.company_name} - {self.title} - {self.location}"
