"""
Test suite for request header validation

Covers the checks run before any signing work: configured headers must be
present, and a Date header is required when none are configured.
"""

import pytest

from httpsig.exceptions import MissingHeadersError, MissingDateError, ErrorCodes
from httpsig.signing import (
    validate_headers,
    find_missing_headers,
    is_pseudo_header,
    normalize_header_name,
)


class TestValidateHeaders:
    """Test validate_headers"""

    @pytest.mark.parametrize("request_headers, configured_headers, error_message", [
        ([], ["Host"], "[Host]"),
        (["Accept-Encoding", "X-Gravitee-Header"], ["Host", "Accept"], "[Host, Accept]"),
        (["Host"], ["Host"], None),
        (["Host"], [], "'Date' header is missing"),
        (["Date"], [], None),
    ])
    def test_configured_headers(self, request_headers, configured_headers, error_message):
        """Test the request headers against the configured header list"""
        if error_message is None:
            assert validate_headers(request_headers, configured_headers) is None
        else:
            with pytest.raises((MissingHeadersError, MissingDateError)) as exc_info:
                validate_headers(request_headers, configured_headers)
            assert error_message in str(exc_info.value)

    def test_all_missing_headers_reported_in_configured_order(self):
        """Test that every missing header is listed, in configured order"""
        with pytest.raises(MissingHeadersError) as exc_info:
            validate_headers(["Date"], ["X-B", "Host", "Date", "X-A"])

        assert exc_info.value.missing == ["X-B", "Host", "X-A"]
        assert "[X-B, Host, X-A]" in exc_info.value.message
        assert exc_info.value.error_code == ErrorCodes.MISSING_REQUIRED_HEADERS

    def test_message_has_fixed_prefix(self):
        """Test that validation messages start with the generation failure marker"""
        with pytest.raises(MissingHeadersError) as exc_info:
            validate_headers([], ["Host"])
        assert exc_info.value.message == "Unable to generate HTTP Signature: those headers are missing [Host]"

        with pytest.raises(MissingDateError) as exc_info:
            validate_headers([], [])
        assert exc_info.value.message == "Unable to generate HTTP Signature: 'Date' header is missing"
        assert exc_info.value.error_code == ErrorCodes.MISSING_DATE_HEADER

    def test_case_insensitive(self):
        """Test that header names are compared case-insensitively"""
        validate_headers(["host", "CONTENT-TYPE"], ["Host", "Content-Type"])
        validate_headers(["DATE"], [])
        validate_headers(["date"], [])

    def test_pseudo_headers_always_available(self):
        """Test that pseudo-headers never count as missing"""
        validate_headers(["Host"], ["(request-target)", "Host", "(created)"])

    def test_present_headers_accept_any_iterable(self):
        """Test that present headers may be a set, list or generator"""
        validate_headers({"Host", "Date"}, ["Host"])
        validate_headers((name for name in ["Host"]), ["Host"])


class TestFindMissingHeaders:
    """Test find_missing_headers"""

    def test_nothing_missing(self):
        assert find_missing_headers(["Host", "Date"], ["date", "HOST"]) == []

    def test_preserves_configured_spelling(self):
        assert find_missing_headers(["host"], ["Host", "X-Request-Id"]) == ["X-Request-Id"]

    def test_empty_configuration(self):
        assert find_missing_headers([], []) == []


class TestHeaderNames:
    """Test header name helpers"""

    def test_normalize_header_name(self):
        assert normalize_header_name("Content-Type") == "content-type"
        assert normalize_header_name("  Host ") == "host"

    def test_is_pseudo_header(self):
        assert is_pseudo_header("(created)")
        assert is_pseudo_header("(expires)")
        assert is_pseudo_header("(Request-Target)")
        assert not is_pseudo_header("host")
        assert not is_pseudo_header("created")
