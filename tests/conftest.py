"""Global pytest configuration for PRIMKIT."""

from hypothesis import settings

settings.register_profile("primkit", max_examples=200, deadline=None)
settings.load_profile("primkit")
