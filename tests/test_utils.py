# File: tests/test_utils.py
import pytest

from remote_sme.utils import InvalidArgument, is_absolute_url, parse_absolute_url, resolve_reference


@pytest.mark.parametrize(
    "raw",
    ["https://example.com/app.js", "http://localhost:8080/static/main.js", "  https://example.com/a.js\n"],
)
def test_parse_absolute_url_accepts_http(raw):
    assert parse_absolute_url(raw) == raw.strip()


@pytest.mark.parametrize(
    "raw",
    ["example.com/app.js", "/static/app.js", "ftp://example.com/app.js", "file:///tmp/app.js", "http://"],
)
def test_parse_absolute_url_rejects(raw):
    with pytest.raises(InvalidArgument, match="Invalid URL"):
        parse_absolute_url(raw)


def test_is_absolute_url():
    assert is_absolute_url("https://cdn.example.com/app.js.map")
    assert not is_absolute_url("app.js.map")
    assert not is_absolute_url("//cdn.example.com/app.js.map")


def test_resolve_keeps_absolute_reference_verbatim():
    ref = "https://cdn.example.com/a/../app.js.map"
    assert resolve_reference(ref, "https://example.com/dir/app.js") == ref
