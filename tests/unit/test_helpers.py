"""
Unit tests for response envelopes, quantity parsing and password hashing.
"""

import pytest

from petadopt.utils.helpers import error_response, parse_count, parse_quantity, success_response
from petadopt.utils.security import check_password, hash_password


class TestEnvelopes:

    def test_success_with_payload(self):
        assert success_response(payload=[1, 2]) == {"status": "success", "payload": [1, 2]}

    def test_success_with_message_and_extra(self):
        body = success_response(message="done", count=3)
        assert body == {"status": "success", "message": "done", "count": 3}

    def test_empty_payload_is_kept(self):
        assert success_response(payload=[])["payload"] == []

    def test_error_drops_empty_fields(self):
        body = error_response("Route not found", path="/nope", details=None)
        assert body == {"status": "error", "error": "Route not found", "path": "/nope"}


class TestParseQuantity:

    @pytest.mark.parametrize("raw,expected", [
        (None, 100),
        ("", 100),
        ("abc", 100),
        ("0", 100),
        ("5", 5),
        ("25abc", 25),
        (" 7 ", 7),
        ("-3", 0),
    ])
    def test_parse_quantity(self, raw, expected):
        assert parse_quantity(raw, 100) == expected


class TestParseCount:

    @pytest.mark.parametrize("value,expected", [
        (3, 3),
        ("4", 4),
        (None, 0),
        ("many", 0),
        (-2, 0),
        (True, 0),
    ])
    def test_parse_count(self, value, expected):
        assert parse_count(value) == expected


class TestSecurity:

    def test_hash_and_check(self):
        hashed = hash_password("coder123", rounds=4)

        assert hashed.startswith("$2b$04$")
        assert hashed != "coder123"
        assert check_password("coder123", hashed)
        assert not check_password("wrong", hashed)

    def test_check_against_malformed_hash(self):
        assert check_password("coder123", "not-a-hash") is False
