import os

# Keep test runs off the rotating log file and the default database
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from tests.fixtures import *  # noqa: E402,F401,F403
