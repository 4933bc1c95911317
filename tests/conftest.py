# conftest.py - pytest configuration
import os

import pytest

from assetrev.finder import MappingRevvedFinder

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")

FILE_MAPPING = {
    "foo.js": "1234.foo.js",
    "/foo.js": "/1234.foo.js",
    "bar.css": "5678.bar.css",
    "image.png": "1234.image.png",
}


@pytest.fixture
def filemapping():
    return dict(FILE_MAPPING)


@pytest.fixture
def revvedfinder():
    return MappingRevvedFinder(FILE_MAPPING)


@pytest.fixture
def fixture_path():
    def _path(name: str) -> str:
        return os.path.join(FIXTURES_DIR, name)

    return _path


@pytest.fixture
def read_fixture(fixture_path):
    def _read(name: str) -> str:
        with open(fixture_path(name), "r", encoding="utf-8") as f:
            return f.read()

    return _read
