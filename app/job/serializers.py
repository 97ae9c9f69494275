from job.models import JobPosting
from rest_framework import serializers


class CompanySerializer(serializers.Serializer):
    name = serializers.CharField(source="company_name")
    description = serializers.CharField(source="company_description")
    contactEmail = serializers.CharField(source="company_contact_email")
    contactPhone = serializers.CharField(source="company_contact_phone")


class JobPostingSerializer(serializers.ModelSerializer):
    """
    JobPosting 직렬화

    내부 저장 키(posting_id)와 메타데이터(created_at, updated_at)는 제외하고
    public_id 를 `id` 로 노출합니다.
    """

    id = serializers.UUIDField(source="public_id", read_only=True)
    type = serializers.CharField(source="job_type")
    company = CompanySerializer(source="*")

    class Meta:
        model = JobPosting
        fields = [
            "id",
            "title",
            "type",
            "location",
            "description",
            "salary",
            "company",
        ]


class JobPostingCreateResponseSerializer(serializers.Serializer):
    job = JobPostingSerializer()


class DeleteJobPostingResultSerializer(serializers.Serializer):
    acknowledged = serializers.BooleanField()
    deletedCount = serializers.IntegerField()


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
