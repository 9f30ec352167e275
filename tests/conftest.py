"""Pytest configuration and shared fixtures."""

import os

from hypothesis import settings

# Pin the Base64 padding policy so a developer's environment cannot change test outcomes.
os.environ["BYTE_CODEC_B64_PADDING"] = "strict"

# Create a profile named "no_deadline" with deadline disabled.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")
