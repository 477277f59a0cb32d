"""Tests for log sanitizers"""
from storefront.logging import sanitize_id_for_logging, sanitize_string_for_logging


def test_id_truncated_and_escaped():
    assert sanitize_id_for_logging("device-abc-123") == "device-a"
    assert sanitize_id_for_logging("a\nb") == "a\\nb"
    assert sanitize_id_for_logging(None) == "N/A"


def test_string_cannot_forge_log_lines():
    value = sanitize_string_for_logging("Ana\r\nINFO - fake entry\x00")

    assert "\n" not in value
    assert "\r" not in value
    assert value == "Ana\\r\\nINFO - fake entry"


def test_long_string_marked_as_truncated():
    assert sanitize_string_for_logging("x" * 60, max_length=10) == "x" * 10 + "..."
