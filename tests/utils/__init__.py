"""Tests for gitinfo."""
