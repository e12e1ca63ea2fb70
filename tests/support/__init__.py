"""Tests for errors, error classification, logging and serialization."""
