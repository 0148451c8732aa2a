BATCH_SIZE = 5

CODE_BUCKET = "code-submissions"
VIDEO_BUCKET = "video-submissions"

ARCHIVE_EXTENSIONS = ("zip", "rar", "tar", "gz", "7z")
MAX_ARCHIVE_SIZE = 50 * 1024 * 1024  # 50MB
MAX_VIDEO_SIZE = 100 * 1024 * 1024  # 100MB

LEADERBOARD_LIMIT = 10
ACTIVE_USER_WINDOW_MINUTES = 60

DEFAULT_SKILL = "Programming"
