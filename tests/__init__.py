"""Tests for jsonfold."""
