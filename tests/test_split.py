import pytest

from utilkit.split import split, split_last


@pytest.mark.parametrize("text", [None, ""])
def test_split_empty(text):
    assert split(text, "/") == []


def test_split_simple():
    assert split("hello/world", "/") == ["hello", "world"]


@pytest.mark.parametrize(
    "text",
    ["/hello/world", "hello/world/", "/hello/world/", "hello//world", "//hello///world//"],
)
def test_split_ignores_empty_tokens(text):
    assert split(text, "/") == split("hello/world", "/")


@pytest.mark.parametrize("text", ["a/b/c", "foo", "/x//y/", "one.two", "/"])
def test_split_tokens_are_nonempty_and_rejoin(text):
    tokens = split(text, "/")
    assert all(tokens)
    assert all("/" not in token for token in tokens)
    assert "".join(tokens) == text.replace("/", "")


def test_split_only_delimiter():
    assert split("/", "/") == []


def test_split_no_delimiter():
    assert split("plain", "/") == ["plain"]


def test_split_bad_delimiter():
    with pytest.raises(ValueError):
        split("a,b", ",,")


@pytest.mark.parametrize("text", [None, ""])
def test_split_last_empty(text):
    assert split_last(text, "/") == []


def test_split_last_two_parts():
    assert split_last("foo/bar/baz", "/") == ["foo/bar", "baz"]


def test_split_last_leading_delimiter_no_split():
    assert split_last("/foo", "/") == ["foo"]


def test_split_last_no_delimiter():
    assert split_last("foo", "/") == ["foo"]


def test_split_last_trailing_delimiter_kept_without_split_point():
    assert split_last("foo/", "/") == ["foo/"]


def test_split_last_trailing_delimiter_dropped_with_split_point():
    assert split_last("foo/bar/", "/") == ["foo", "bar"]


def test_split_last_double_delimiter():
    assert split_last("a//b", "/") == ["a", "b"]


@pytest.mark.parametrize("text", ["x/y", "path/to/file", "/root/dir/name"])
def test_split_last_rejoins(text):
    head, tail = split_last(text, "/")
    assert "/" not in tail
    assert head + "/" + tail == text.lstrip("/")


def test_split_last_bad_delimiter():
    with pytest.raises(ValueError):
        split_last("a/b", "")