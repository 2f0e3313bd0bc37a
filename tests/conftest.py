import pytest

from vectra_e2e.config import Settings


def pytest_addoption(parser):
    parser.addoption(
        "--e2e", action="store_true", default=False,
        help="run the live browser scenario against the Vectra website",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="live scenario, pass --e2e to run")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("VECTRA_CUSTOMER_SERVICE_PHONE", "600500400")


@pytest.fixture
def settings(mock_env, tmp_path):
    return Settings(
        _env_file=None,
        snapshots_dir=tmp_path / "snapshots",
        artifacts_dir=tmp_path / "test-results",
    )
