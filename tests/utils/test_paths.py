import os

import pytest

from assetrev.utils.paths import (
    document_directory,
    is_revvable_reference,
    join_path,
    relative_path,
    split_suffix,
    to_posix,
)


def test_to_posix():
    assert to_posix("scripts\\vendor\\a.js") == "scripts/vendor/a.js"


@pytest.mark.parametrize(
    "directory, path, expected",
    [
        ("", "foo.css", "foo.css"),
        ("build", "bar/foo.css", "build/bar/foo.css"),
        ("build", "./bar.css", "build/bar.css"),
        ("build/css", "../../images/a.png", "images/a.png"),
        ("build", "/foo.js", "build/foo.js"),
        ("", "/foo.js", "/foo.js"),
        ("build", "", "build"),
        ("", "", "."),
        ("build", "scripts\\app.js", "build/scripts/app.js"),
    ],
)
def test_join_path(directory, path, expected):
    assert join_path(directory, path) == expected


def test_relative_path():
    assert relative_path("", "foo.css") == "foo.css"
    assert relative_path("build", "build/foo.js") == "foo.js"
    assert relative_path("app/views", "scripts/app.js") == "../../scripts/app.js"


def test_document_directory(tmp_path):
    root = str(tmp_path)
    assert document_directory(os.path.join(root, "index.html"), root) == ""
    assert document_directory(os.path.join(root, "build", "css", "a.css"), root) == "build/css"


def test_document_directory_defaults_to_cwd():
    assert document_directory("myfile.html") == ""
    assert document_directory("build/myfile.html") == "build"


def test_split_suffix():
    assert split_suffix("a.png") == ("a.png", "")
    assert split_suffix("a.png?v=1#x") == ("a.png", "?v=1#x")
    assert split_suffix("a.svg#icon") == ("a.svg", "#icon")


@pytest.mark.parametrize(
    "ref",
    ["foo.js", "/foo.js", "../images/a.png", "images/a.png?v=1", "fr"],
)
def test_revvable_references(ref):
    assert is_revvable_reference(ref)


@pytest.mark.parametrize(
    "ref",
    [
        "",
        "   ",
        "/",
        "//images/test.png",
        "#local",
        "http://bar/foo.js",
        "https://bar/foo.js",
        "ftp://bar",
        "mailto:someone@example.com",
        "data:image/png;base64,AAAA",
        "<% my_func() %>",
        "{{ static('a.js') }}",
        "{% static 'a.js' %}",
    ],
)
def test_non_revvable_references(ref):
    assert not is_revvable_reference(ref)
