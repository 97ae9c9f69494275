from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    # 로그인 식별자로 사용 (username 에도 동일 값 저장)
    email = models.EmailField(unique=True)
