APP_NAME = "smalldb"

DEFAULT_DATABASE_FILENAME = "db.json"

DIRECTORY_MODE = 0o755
FILE_MODE = 0o644
