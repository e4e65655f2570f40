from pathlib import Path

import platformdirs
import pytest

_ASYNC_NETWORK_BLOCK_MSG = (
    "Async network access is blocked during tests. Mock AsyncAssetClient.get_bytes."
)


async def _async_block_network(*_args, **_kwargs):
    """
    Prevent async network calls during tests by raising a RuntimeError.

    Replaces aiohttp.ClientSession request methods so tests never perform real HTTP requests.
    """
    raise RuntimeError(_ASYNC_NETWORK_BLOCK_MSG)


# Configure pytest-asyncio mode - only register if available
try:
    import importlib

    importlib.import_module("pytest_asyncio")
    pytest_plugins = ("pytest_asyncio",)
except ImportError:
    pytest_plugins = ()


def pytest_configure(config):
    """
    Register the markers used by the test suite.

    Parameters:
        config: pytest.Config
    """
    config.addinivalue_line(
        "markers", "asyncio: mark test as an asyncio test (auto-detected)"
    )
    config.addinivalue_line("markers", "unit: fast tests of a single component")
    config.addinivalue_line(
        "markers", "integration: tests driving a full sync cycle on disk"
    )


@pytest.fixture(autouse=True)
def _isolate_test_environment(tmp_path_factory, monkeypatch):
    """
    Point platformdirs and the stickersync configuration at a temporary directory.

    Sets STICKERSYNC_LOG_LEVEL to INFO and patches stickersync.config.CONFIG_DIR and
    CONFIG_FILE so no test reads or writes the real user configuration.
    """
    base = tmp_path_factory.mktemp("stickersync")
    config_dir = base / "config"
    log_dir = base / "log"
    for path in (config_dir, log_dir):
        path.mkdir(parents=True, exist_ok=True)

    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_dir))
    monkeypatch.setenv("STICKERSYNC_LOG_LEVEL", "INFO")
    monkeypatch.setattr(
        platformdirs, "user_config_dir", lambda *_args, **_kwargs: str(config_dir)
    )
    monkeypatch.setattr(
        platformdirs, "user_log_dir", lambda *_args, **_kwargs: str(log_dir)
    )

    import stickersync.config as config_module

    monkeypatch.setattr(config_module, "CONFIG_DIR", str(config_dir))
    monkeypatch.setattr(
        config_module,
        "CONFIG_FILE",
        str(Path(config_dir) / "stickersync.yaml"),
    )


def pytest_runtest_setup():
    """
    Prevent real network requests during tests by replacing aiohttp entry points with blocking callables.
    """
    try:
        import aiohttp  # type: ignore[import-not-found]

        aiohttp.request = _async_block_network
        aiohttp.ClientSession.request = _async_block_network  # type: ignore[assignment]
        aiohttp.ClientSession.get = _async_block_network  # type: ignore[assignment]
    except ImportError:
        pass


@pytest.fixture
def config_root(tmp_path):
    """Empty directory standing in for the configuration root."""
    root = tmp_path / "config-root"
    root.mkdir()
    return root


@pytest.fixture
def identity():
    from stickersync.sync.interfaces import AssetIdentity

    return AssetIdentity(path="/happy/aqua.png", name="aqua")
