"""Test helpers for code consuming opresult."""
