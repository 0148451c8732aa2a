from django.conf import settings
from django.db import models


class DayProblem(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, related_name="day_problems", on_delete=models.CASCADE)
    day_number = models.PositiveIntegerField()
    problem_title = models.CharField(max_length=255)
    problem_description = models.TextField()
    challenge_date = models.DateField()
    # recomputed by the progression tracker, never authored directly
    is_active = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["day_number"]
        constraints = [
            models.UniqueConstraint(fields=["user", "day_number"], name="unique_day_per_user"),
        ]

    def __str__(self):
        return f"Day {self.day_number}: {self.problem_title}"


class Submission(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, related_name="submissions", on_delete=models.CASCADE)
    day_problem = models.ForeignKey(DayProblem, related_name="submissions", on_delete=models.CASCADE)
    file_url = models.CharField(max_length=500, null=True, blank=True)
    video_url = models.CharField(max_length=500, null=True, blank=True)
    submitted_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["user", "day_problem"], name="unique_submission_per_problem"),
        ]

    def __str__(self):
        return f"{self.user} - day {self.day_problem.day_number}"


class Score(models.Model):
    """Grading result written by the external evaluators; read-only for the API."""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, related_name="scores", on_delete=models.CASCADE)
    day_problem = models.ForeignKey(DayProblem, related_name="scores", on_delete=models.CASCADE)
    code_score = models.FloatField(null=True, blank=True)
    video_score = models.FloatField(null=True, blank=True)
    total_score = models.FloatField(null=True, blank=True)
    evaluated_at = models.DateTimeField(null=True, blank=True)

    def __str__(self):
        return f"{self.user} - day {self.day_problem.day_number}: {self.total_score}"
