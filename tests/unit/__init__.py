"""Unit tests, one module per primkit module."""
