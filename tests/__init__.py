"""Tests for the forest growth simulation."""
