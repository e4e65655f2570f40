# src/stickersync/cli.py

import argparse
import asyncio
import sys
from typing import Any, Dict, List, Optional

from stickersync import config as config_module
from stickersync import log_utils
from stickersync.exceptions import ConfigurationError
from stickersync.sync import AssetIdentity, SyncResult, reference_urls, sync_assets
from stickersync.utils import get_version


def _resolve_identity(args: argparse.Namespace, config: Dict[str, Any]) -> AssetIdentity:
    """
    Pick the sticker identity from the command line, falling back to the configuration.

    Raises:
        ConfigurationError: If only one of --path/--name is given or nothing is configured.
    """
    path = getattr(args, "path", None)
    name = getattr(args, "name", None)
    if path or name:
        if not (path and name):
            raise ConfigurationError("--path and --name must be given together")
        return AssetIdentity(path=path, name=name)
    return config_module.current_asset_identity(config)


def _apply_logging_config(args: argparse.Namespace, config: Dict[str, Any]) -> None:
    level = args.log_level or config.get("LOG_LEVEL")
    if level:
        log_utils.set_log_level(str(level))
    log_dir = config.get("LOG_DIR")
    if log_dir:
        log_utils.add_file_logging(log_dir, str(level or "INFO"))


def _print_result(result: SyncResult) -> None:
    print(f"sticker: {result.sticker_url}")
    print(f"wallpaper: {result.wallpaper_url}")


def run_sync(args: argparse.Namespace, config: Dict[str, Any]) -> SyncResult:
    """
    Synchronize the sticker and wallpaper and report the outcome of each asset.

    Returns:
        SyncResult: The references produced by the sync cycle.
    """
    identity = _resolve_identity(args, config)
    sticker_url, wallpaper_url = config_module.get_asset_endpoints(config)
    log_utils.logger.info(f"Synchronizing sticker {identity.path}")
    result = asyncio.run(
        sync_assets(
            identity,
            config_module.get_config_root(config),
            sticker_base_url=sticker_url,
            wallpaper_base_url=wallpaper_url,
            timeout=config_module.get_request_timeout(config),
        )
    )
    log_utils.logger.info(
        f"Sticker {result.sticker_state.value}, wallpaper {result.wallpaper_state.value}"
    )
    return result


def run_show(args: argparse.Namespace, config: Dict[str, Any]) -> SyncResult:
    """Return references to the assets currently on disk without contacting the server."""
    identity = _resolve_identity(args, config)
    sticker_url, wallpaper_url = config_module.get_asset_endpoints(config)
    return reference_urls(
        identity,
        config_module.get_config_root(config),
        sticker_base_url=sticker_url,
        wallpaper_base_url=wallpaper_url,
    )


def run_set(args: argparse.Namespace, config: Dict[str, Any]) -> str:
    """Store the given sticker as the active one and return the config path written."""
    config["STICKER"] = {"path": args.path, "name": args.name}
    path = config_module.save_config(config, args.config)
    log_utils.logger.info(f"Active sticker set to {args.path} ({args.name})")
    return path


def _add_identity_arguments(parser: argparse.ArgumentParser, required: bool) -> None:
    parser.add_argument(
        "--path",
        required=required,
        help="Sticker path on the asset server (e.g. /happy/aqua.png)",
    )
    parser.add_argument(
        "--name",
        required=required,
        help="Sticker name used to locate the wallpaper (e.g. aqua.png)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stickersync",
        description="stickersync - keep terminal stickers and wallpapers up to date",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Configuration file to use instead of the default location",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    subparsers = parser.add_subparsers(dest="command")

    sync_parser = subparsers.add_parser(
        "sync", help="Download the sticker and wallpaper if they changed"
    )
    _add_identity_arguments(sync_parser, required=False)

    show_parser = subparsers.add_parser(
        "show", help="Print file:// references for the cached assets"
    )
    _add_identity_arguments(show_parser, required=False)

    set_parser = subparsers.add_parser("set", help="Set the active sticker")
    _add_identity_arguments(set_parser, required=True)

    subparsers.add_parser("version", help="Display stickersync version")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the stickersync command-line interface.

    Parses arguments, loads the YAML configuration and dispatches the `sync`,
    `show`, `set` and `version` subcommands.

    Returns:
        int: Process exit status (0 on success, 1 on configuration errors).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0
    if args.command == "version":
        print(f"stickersync {get_version()}")
        return 0

    try:
        config = config_module.load_config(args.config)
        _apply_logging_config(args, config)
        if args.command == "sync":
            _print_result(run_sync(args, config))
        elif args.command == "show":
            _print_result(run_show(args, config))
        elif args.command == "set":
            print(f"Configuration saved to {run_set(args, config)}")
    except ConfigurationError as error:
        log_utils.logger.error(str(error))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
