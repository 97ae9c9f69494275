from django.contrib.auth import authenticate
from rest_framework import serializers
from user.models import User


class UserSignupSerializer(serializers.ModelSerializer):
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        style={"input_type": "password"},
        help_text="최소 8자 이상의 비밀번호를 입력하세요.",
    )

    class Meta:
        model = User
        fields = ["email", "password"]

    def validate_email(self, value):
        email = value.strip().lower()
        if User.objects.filter(email__iexact=email).exists():
            raise serializers.ValidationError("Email already in use")
        return email

    def validate_password(self, value):
        """
        비밀번호 복잡도 검증
        """
        if len(value) < 8:
            raise serializers.ValidationError(
                "Password must be at least 8 characters long"
            )
        if value.isdigit():
            raise serializers.ValidationError("Password cannot be entirely numeric")
        if value.isalpha():
            raise serializers.ValidationError(
                "Password must contain at least one non-letter character"
            )
        return value

    def create(self, validated_data):
        email = validated_data["email"]
        return User.objects.create_user(
            username=email[:150],
            email=email,
            password=validated_data["password"],
        )


class UserLoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate(self, data):
        email = data.get("email", "").strip().lower()
        password = data.get("password")

        if not email or not password:
            raise serializers.ValidationError("Must include 'email' and 'password'")

        user = authenticate(
            request=self.context.get("request"),
            username=email[:150],
            password=password,
        )
        if not user:
            raise serializers.ValidationError("Invalid credentials")

        data["user"] = user
        return data


class AuthTokenSerializer(serializers.Serializer):
    email = serializers.EmailField()
    token = serializers.CharField(help_text="Bearer 토큰 (access)")
    refresh = serializers.CharField()
