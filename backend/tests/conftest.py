"""Root conftest: shared test configuration."""

import os

# Keep tests independent of a developer's .env / shell settings
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_FORMAT", "text")
