import io

import pytest

from fig.compression import StringCompressor
from fig.dictionary import load_dictionary
from fig.interpreter import Interpreter


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # keep a developer's FIG_* settings out of the test run
    monkeypatch.delenv("FIG_DEBUG", raising=False)
    monkeypatch.delenv("FIG_DICTIONARY_PATH", raising=False)


@pytest.fixture
def dictionary():
    return load_dictionary()


@pytest.fixture
def compressor(dictionary):
    return StringCompressor(dictionary)


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def interpreter(dictionary, output):
    return Interpreter(dictionary, output=output, debug=())


@pytest.fixture
def run(interpreter):
    """Run a program and return the final stack."""
    def _run(source, *args):
        return interpreter.run(source, args)
    return _run
