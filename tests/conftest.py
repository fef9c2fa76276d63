import pytest


@pytest.fixture(autouse=True)
def no_user_ini(tmp_path_factory, monkeypatch):
    """Keep a real ~/.sortlines.ini or ./sortlines.ini out of the tests."""
    monkeypatch.setenv("HOME", str(tmp_path_factory.mktemp("home")))
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
