import os
import sys
from glob import glob
from typing import List

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tests.test_util import data_path, open_file  # isort:skip


@pytest.fixture(scope="session")
def basic_program() -> str:
    return open_file(data_path("valid", "basic.al"))


@pytest.fixture(scope="session")
def precedence_program() -> str:
    return open_file(data_path("valid", "precedence.al"))


def files() -> List[str]:
    return sorted(glob(data_path("**", "*.al"), recursive=True))


def valid_files() -> List[str]:
    return sorted(glob(data_path("valid", "*.al")))


def lex_error_files() -> List[str]:
    return sorted(glob(data_path("lexError", "*.al")))


def parse_error_files() -> List[str]:
    return sorted(glob(data_path("parseError", "*.al")))


@pytest.fixture(scope="session", params=files(), ids=os.path.basename)
def file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=valid_files(), ids=os.path.basename)
def valid_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=lex_error_files(), ids=os.path.basename)
def lex_error_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=parse_error_files(), ids=os.path.basename)
def parse_error_file(request) -> str:
    return request.param
