from types import SimpleNamespace

import pytest
from rest_framework import serializers

from DailyChallenges.constants import MAX_ARCHIVE_SIZE, MAX_VIDEO_SIZE
from DailyChallenges.validators import validate_code_archive, validate_video


def upload(name="solution.zip", size=1024, content_type="application/zip"):
    return SimpleNamespace(name=name, size=size, content_type=content_type)


@pytest.mark.parametrize("name", ["a.zip", "a.RAR", "a.tar", "a.tar.gz", "a.7z"])
def test_archive_accepts_allowed_extensions(name):
    f = upload(name=name)
    assert validate_code_archive(f) is f


@pytest.mark.parametrize("name", ["a.py", "a.zip.exe", "zip", "a.tgz", ""])
def test_archive_rejects_other_extensions(name):
    with pytest.raises(serializers.ValidationError, match="Invalid file type"):
        validate_code_archive(upload(name=name))


def test_archive_size_limit():
    assert validate_code_archive(upload(size=MAX_ARCHIVE_SIZE))
    with pytest.raises(serializers.ValidationError, match="File too large"):
        validate_code_archive(upload(size=MAX_ARCHIVE_SIZE + 1))


def test_video_requires_video_mime():
    assert validate_video(upload(name="demo.mp4", content_type="video/mp4"))
    with pytest.raises(serializers.ValidationError, match="video file"):
        validate_video(upload(name="demo.mp4", content_type="application/octet-stream"))
    with pytest.raises(serializers.ValidationError):
        validate_video(upload(name="demo.mp4", content_type=None))


def test_video_size_limit():
    assert validate_video(upload(name="demo.webm", size=MAX_VIDEO_SIZE, content_type="video/webm"))
    with pytest.raises(serializers.ValidationError, match="File too large"):
        validate_video(upload(name="demo.webm", size=MAX_VIDEO_SIZE + 1, content_type="video/webm"))
