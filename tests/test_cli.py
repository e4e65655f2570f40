from unittest.mock import AsyncMock, patch

import pytest
import yaml

from stickersync import cli
from stickersync import config as config_module
from stickersync.sync.interfaces import AssetIdentity, AssetState, SyncResult

pytestmark = pytest.mark.unit


def _write_config(data):
    with open(config_module.CONFIG_FILE, "w") as f:
        yaml.safe_dump(data, f)


def _result(state=AssetState.INSTALLED):
    return SyncResult(
        sticker_url="file:///root/stickers/happy/aqua.png?time=1",
        wallpaper_url="file:///root/wallpapers/aqua?time=1",
        sticker_state=state,
        wallpaper_state=state,
    )


class TestMain:
    def test_no_command_prints_help(self, capsys):
        assert cli.main([]) == 0
        assert "usage" in capsys.readouterr().out

    def test_version(self, capsys):
        assert cli.main(["version"]) == 0
        assert capsys.readouterr().out.startswith("stickersync ")

    def test_sync_uses_configured_sticker(self, tmp_path, capsys):
        _write_config(
            {
                "STICKER": {"path": "/happy/aqua.png", "name": "aqua"},
                "ASSETS_DIR": str(tmp_path),
                "STICKER_ASSETS_URL": "https://mirror/stickers",
                "REQUEST_TIMEOUT": 5,
            }
        )

        with patch(
            "stickersync.cli.sync_assets", new_callable=AsyncMock
        ) as mock_sync:
            mock_sync.return_value = _result()
            assert cli.main(["sync"]) == 0

        args, kwargs = mock_sync.call_args
        assert args == (AssetIdentity("/happy/aqua.png", "aqua"), str(tmp_path))
        assert kwargs["sticker_base_url"] == "https://mirror/stickers"
        assert kwargs["timeout"] == 5.0
        out = capsys.readouterr().out
        assert "sticker: file:///root/stickers/happy/aqua.png?time=1" in out
        assert "wallpaper: file:///root/wallpapers/aqua?time=1" in out

    def test_sync_command_line_identity_overrides_config(self):
        with patch(
            "stickersync.cli.sync_assets", new_callable=AsyncMock
        ) as mock_sync:
            mock_sync.return_value = _result(AssetState.FRESH)
            assert cli.main(["sync", "--path", "/sad/rem.png", "--name", "rem"]) == 0

        assert mock_sync.call_args.args[0] == AssetIdentity("/sad/rem.png", "rem")

    def test_sync_without_sticker_fails(self):
        with patch("stickersync.cli.sync_assets", new_callable=AsyncMock) as mock_sync:
            assert cli.main(["sync"]) == 1
        mock_sync.assert_not_called()

    def test_path_without_name_fails(self):
        assert cli.main(["show", "--path", "/happy/aqua.png"]) == 1

    def test_broken_config_fails(self):
        with open(config_module.CONFIG_FILE, "w") as f:
            f.write("STICKER: [unclosed")
        assert cli.main(["show"]) == 1

    def test_show_prints_references(self, tmp_path, capsys):
        _write_config({"ASSETS_DIR": str(tmp_path)})

        assert cli.main(["show", "--path", "/happy/aqua.png", "--name", "aqua"]) == 0

        out = capsys.readouterr().out
        assert f"sticker: file://{tmp_path}/stickers/happy/aqua.png?time=" in out
        assert f"wallpaper: file://{tmp_path}/wallpapers/aqua?time=" in out

    def test_show_does_not_open_a_client(self, tmp_path):
        _write_config({"ASSETS_DIR": str(tmp_path)})

        with patch("stickersync.sync.client.AsyncAssetClient") as mock_client:
            assert cli.main(["show", "--path", "/happy/aqua.png", "--name", "aqua"]) == 0

        mock_client.assert_not_called()

    def test_set_writes_sticker(self, capsys):
        assert cli.main(["set", "--path", "/happy/aqua.png", "--name", "aqua"]) == 0

        assert config_module.load_config()["STICKER"] == {
            "path": "/happy/aqua.png",
            "name": "aqua",
        }
        assert "Configuration saved to" in capsys.readouterr().out

    def test_set_keeps_other_keys(self):
        _write_config({"ASSETS_DIR": "/srv/doki"})

        cli.main(["set", "--path", "/happy/aqua.png", "--name", "aqua"])

        assert config_module.load_config()["ASSETS_DIR"] == "/srv/doki"

    def test_explicit_config_file(self, tmp_path):
        path = tmp_path / "custom.yaml"

        assert (
            cli.main(
                ["--config", str(path), "set", "--path", "/a.png", "--name", "a"]
            )
            == 0
        )

        assert config_module.load_config(str(path))["STICKER"]["name"] == "a"

    def test_log_level_option(self):
        with patch("stickersync.cli.log_utils.set_log_level") as mock_level:
            cli.main(["--log-level", "DEBUG", "show", "--path", "/a.png", "--name", "a"])
        mock_level.assert_called_once_with("DEBUG")

    def test_log_dir_enables_file_logging(self, tmp_path):
        _write_config({"LOG_DIR": str(tmp_path / "logs")})
        with patch("stickersync.cli.log_utils.add_file_logging") as mock_file_logging:
            cli.main(["show", "--path", "/a.png", "--name", "a"])
        mock_file_logging.assert_called_once_with(str(tmp_path / "logs"), "INFO")
