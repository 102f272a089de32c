"""Test suite for klaw-optional."""
