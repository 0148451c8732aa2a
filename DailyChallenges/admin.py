from django.contrib import admin

from .models import DayProblem, Score, Submission


@admin.register(DayProblem)
class DayProblemAdmin(admin.ModelAdmin):
    list_display = ("user", "day_number", "problem_title", "challenge_date", "is_active")
    list_filter = ("is_active",)
    search_fields = ("problem_title", "user__email")


@admin.register(Submission)
class SubmissionAdmin(admin.ModelAdmin):
    list_display = ("user", "day_problem", "submitted_at")


# Graders record results here
@admin.register(Score)
class ScoreAdmin(admin.ModelAdmin):
    list_display = ("user", "day_problem", "code_score", "video_score", "total_score", "evaluated_at")
