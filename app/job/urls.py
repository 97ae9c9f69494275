from django.urls import include, path
from job.views import JobPostingViewSet
from rest_framework.routers import SimpleRouter


class OptionalSlashRouter(SimpleRouter):
    """/api/jobs 와 /api/jobs/ 모두 허용하는 라우터"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.trailing_slash = "/?"


router = OptionalSlashRouter()
router.register(r"jobs", JobPostingViewSet, basename="job")

urlpatterns = [
    path("", include(router.urls)),
]
