from rest_framework import serializers

from .models import DayProblem, Submission
from .validators import validate_code_archive, validate_video


class DayProblemSerializer(serializers.ModelSerializer):
    is_todays_challenge = serializers.BooleanField(source="is_active", read_only=True)
    is_submitted = serializers.SerializerMethodField()
    code_score = serializers.SerializerMethodField()
    video_score = serializers.SerializerMethodField()

    class Meta:
        model = DayProblem
        fields = (
            "id", "day_number", "problem_title", "problem_description", "challenge_date",
            "is_active", "is_todays_challenge", "is_submitted", "code_score", "video_score", "created_at",
        )

    def get_is_submitted(self, obj):
        return obj.id in self.context.get("submitted_ids", set())

    def _score(self, obj):
        return self.context.get("scores", {}).get(obj.id)

    def get_code_score(self, obj):
        score = self._score(obj)
        return score.code_score if score else None

    def get_video_score(self, obj):
        score = self._score(obj)
        return score.video_score if score else None


class SubmissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Submission
        fields = "__all__"


class SubmissionUploadSerializer(serializers.Serializer):
    code_file = serializers.FileField(
        required=True,
        validators=[validate_code_archive],
        error_messages={"required": "Please upload both code archive and video"},
    )
    video_file = serializers.FileField(
        required=True,
        validators=[validate_video],
        error_messages={"required": "Please upload both code archive and video"},
    )
