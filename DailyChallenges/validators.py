import re

from rest_framework import serializers

from DailyChallenges.constants import ARCHIVE_EXTENSIONS, MAX_ARCHIVE_SIZE, MAX_VIDEO_SIZE

_ARCHIVE_RE = re.compile(r"\.(%s)$" % "|".join(ARCHIVE_EXTENSIONS), re.IGNORECASE)


def validate_code_archive(upload):
    if not _ARCHIVE_RE.search(upload.name or ""):
        raise serializers.ValidationError(
            "Invalid file type: please upload a compressed archive (.zip, .rar, .tar, .gz, .7z)"
        )
    if upload.size > MAX_ARCHIVE_SIZE:
        raise serializers.ValidationError("File too large: please upload an archive smaller than 50MB")
    return upload


def validate_video(upload):
    content_type = getattr(upload, "content_type", None) or ""
    if not content_type.startswith("video/"):
        raise serializers.ValidationError("Invalid file: please upload a video file")
    if upload.size > MAX_VIDEO_SIZE:
        raise serializers.ValidationError("File too large: please upload a video under 100MB")
    return upload
