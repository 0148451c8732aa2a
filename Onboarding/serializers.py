from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

from .models import Profile


class SkillListField(serializers.Field):
    """Accepts a list of strings or a comma-separated string; keeps order, drops blanks."""

    default_error_messages = {"invalid": "Skills must be a list or a comma-separated string."}

    def to_internal_value(self, data):
        if isinstance(data, str):
            items = data.split(",")
        elif isinstance(data, (list, tuple)):
            items = data
        else:
            self.fail("invalid")
        return [str(s).strip() for s in items if s is not None and str(s).strip()]

    def to_representation(self, value):
        return list(value or [])


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
    confirm_password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        if attrs["password"] != attrs["confirm_password"]:
            raise serializers.ValidationError({"confirm_password": "Passwords do not match. Please try again."})
        validate_password(attrs["password"])
        return attrs

    def create(self, validated_data):
        email = validated_data["email"].strip().lower()
        user = get_user_model().objects.create_user(
            username=email, email=email, password=validated_data["password"]
        )
        Profile.objects.create(user=user)
        return user


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class ProfileSerializer(serializers.ModelSerializer):
    skills = SkillListField(required=False)
    is_onboarded = serializers.BooleanField(read_only=True)
    email = serializers.EmailField(source="user.email", read_only=True)

    class Meta:
        model = Profile
        fields = (
            "id", "user", "email", "name", "gender", "skills", "problem_statement",
            "is_onboarded", "created_at", "updated_at",
        )
        read_only_fields = ("id", "user", "created_at", "updated_at")


class OnboardingSerializer(serializers.ModelSerializer):
    name = serializers.CharField(max_length=120)
    skills = SkillListField()
    problem_statement = serializers.CharField()

    class Meta:
        model = Profile
        fields = ("name", "gender", "skills", "problem_statement")

    def validate_skills(self, value):
        if not value:
            raise serializers.ValidationError("List at least one skill.")
        return value
