"""
Unit tests for scalar format checks and identifier predicates.
"""
import pytest

from comment_guard.validation.formats import is_valid_email, is_valid_ip, is_valid_url
from comment_guard.validation.identifiers import is_valid_object_id, pattern_id_predicate


class TestObjectId:
    def test_accepts_24_hex(self, valid_id):
        assert is_valid_object_id(valid_id) is True
        assert is_valid_object_id(valid_id.upper()) is True

    @pytest.mark.parametrize(
        "value",
        ["", "507f1f77bcf86cd79943901", "507f1f77bcf86cd7994390111", "zzzf1f77bcf86cd799439011", None, 42],
    )
    def test_rejects_other_values(self, value):
        assert is_valid_object_id(value) is False

    def test_pluggable_predicate(self):
        uuid_like = pattern_id_predicate(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}")
        assert uuid_like("123e4567-e89b-12d3-a456-426614174000") is True
        assert uuid_like("507f1f77bcf86cd799439011") is False
        assert uuid_like(None) is False


class TestEmail:
    @pytest.mark.parametrize("email", ["bob@x.com", "first.last+tag@sub.example.org", "a@b.co"])
    def test_well_formed(self, email):
        assert is_valid_email(email) is True

    @pytest.mark.parametrize(
        "email",
        ["bob", "bob@", "@x.com", "bob@x", "bob@@x.com", "bo b@x.com", " bob@x.com", "", None, 7],
    )
    def test_malformed(self, email):
        assert is_valid_email(email) is False


class TestIP:
    @pytest.mark.parametrize(
        "ip",
        ["127.0.0.1", "0.0.0.0", "255.255.255.255", "2001:0db8:85a3:0000:0000:8a2e:0370:7334", "::1", "::"],
    )
    def test_accepted(self, ip):
        assert is_valid_ip(ip) is True

    @pytest.mark.parametrize("ip", ["256.1.1.1", "1.2.3", "1.2.3.4.5", "abc", "", None])
    def test_rejected(self, ip):
        assert is_valid_ip(ip) is False

    def test_compressed_ipv6_is_rejected(self):
        # Only the ::1 and :: shorthands are recognised.
        assert is_valid_ip("2001:db8::1") is False
        assert is_valid_ip("fe80::") is False


class TestUrl:
    @pytest.mark.parametrize(
        "url",
        ["https://example.com", "http://localhost:8080/path?q=1", "mailto:bob@x.com", "ftp://files.example.org/a.txt"],
    )
    def test_valid(self, url):
        assert is_valid_url(url) is True

    @pytest.mark.parametrize(
        "url",
        ["example.com", "http://", "https://exa mple.com", "http://example.com:99999", "http://[::1", "1http://x.io", "", None],
    )
    def test_invalid(self, url):
        assert is_valid_url(url) is False

    @pytest.mark.parametrize("url", ["http:/example.com", "http:example.com", "https://exa\tmple.com/"])
    def test_lenient_forms_accepted_like_a_browser(self, url):
        # Missing slashes are repaired and tabs dropped, as in new URL().
        assert is_valid_url(url) is True

    def test_non_string_rejected(self):
        assert is_valid_url(b"https://example.com") is False
