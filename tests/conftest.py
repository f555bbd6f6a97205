import pytest

from woxml.constants import EnvVars


@pytest.fixture(autouse=True)
def _isolated_writer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ambient WOXML_* variables from leaking into configuration tests.

    ConfigLoader layers the environment under woxml.toml, so a developer's
    shell settings would otherwise change expected defaults.
    """
    monkeypatch.delenv(EnvVars.MODE, raising=False)
    monkeypatch.delenv(EnvVars.VERBOSITY, raising=False)
