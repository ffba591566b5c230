"""Tests for rfcuri.split.split_uri."""

import pytest

from rfcuri import InvalidURIError, split_uri


class TestAbsolute:
    """Test splitting of absolute URIs."""

    def test_all_components(self):
        assert split_uri("http://u:p@a:8080/b/c/d;p?q#r") == {
            "scheme": "http",
            "userinfo": "u:p",
            "host": "a",
            "port": "8080",
            "path": "/b/c/d;p",
            "query": "q",
            "fragment": "r",
        }

    def test_scheme_only(self):
        """The path is present even when empty."""
        assert split_uri("http:") == {"scheme": "http", "path": ""}

    def test_rootless_path(self):
        assert split_uri("urn:isbn:0451450523") == {"scheme": "urn", "path": "isbn:0451450523"}

    def test_query_before_fragment(self):
        """A "?" inside the fragment belongs to the fragment."""
        assert split_uri("x:/p#f?g") == {"scheme": "x", "path": "/p", "fragment": "f?g"}

    def test_empty_authority(self):
        assert split_uri("file:///etc/hosts") == {"scheme": "file", "host": "", "path": "/etc/hosts"}

    @pytest.mark.parametrize("text", ["foo", ":foo", "//example.com/", ""])
    def test_no_scheme(self, text):
        with pytest.raises(InvalidURIError, match="No scheme found"):
            split_uri(text)


class TestAuthority:
    """Test the port and userinfo scans of the authority."""

    def test_ipv6_without_port(self):
        assert split_uri("http://[::1]/") == {"scheme": "http", "host": "[::1]", "path": "/"}

    def test_ipv6_with_port(self):
        assert split_uri("http://[::1]:42") == {"scheme": "http", "host": "[::1]", "port": "42", "path": ""}

    def test_empty_port_stays_in_host(self):
        """A trailing ":" does not make an empty port."""
        assert split_uri("http://a:/")["host"] == "a:"
        assert "port" not in split_uri("http://a:/")

    def test_port_is_not_validated(self):
        result = split_uri("http://host:abc/")
        assert result["host"] == "host"
        assert result["port"] == "abc"

    def test_last_at_delimits_userinfo(self):
        result = split_uri("http://a:b@c@d/")
        assert result["userinfo"] == "a:b@c"
        assert result["host"] == "d"

    def test_empty_userinfo_and_host(self):
        assert split_uri("http://@") == {"scheme": "http", "userinfo": "", "host": "", "path": ""}

    def test_port_without_host(self):
        assert split_uri("http://user@:80") == {
            "scheme": "http",
            "userinfo": "user",
            "host": "",
            "port": "80",
            "path": "",
        }


class TestRelative:
    """Test splitting of relative references."""

    def test_path_query_fragment(self):
        assert split_uri("g?y#s", relative=True) == {"path": "g", "query": "y", "fragment": "s"}

    def test_network_path(self):
        assert split_uri("//g", relative=True) == {"host": "g", "path": ""}

    def test_empty(self):
        assert split_uri("", relative=True) == {"path": ""}

    def test_colon_is_not_a_scheme(self):
        assert split_uri("g:h", relative=True) == {"path": "g:h"}
