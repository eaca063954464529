"""Root conftest — shared test configuration."""

import os

# Deterministic settings regardless of the developer's shell or .env files
os.environ.setdefault("NODE_ENV", "test")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")
