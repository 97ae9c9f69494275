from __future__ import annotations

import uuid

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="JobPosting",
            fields=[
                ("posting_id", models.BigAutoField(primary_key=True, serialize=False)),
                (
                    "public_id",
                    models.UUIDField(default=uuid.uuid4, editable=False, unique=True),
                ),
                ("title", models.TextField()),
                ("job_type", models.TextField()),
                ("location", models.TextField()),
                ("description", models.TextField()),
                ("salary", models.TextField()),
                ("company_name", models.TextField()),
                ("company_description", models.TextField()),
                ("company_contact_email", models.TextField()),
                ("company_contact_phone", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "job_posting",
                "ordering": ["posting_id"],
            },
        ),
    ]
