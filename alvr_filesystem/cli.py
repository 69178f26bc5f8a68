import json
import os
import sys
from pathlib import Path
from typing import Dict, Optional

import typer

from alvr_filesystem.errors import ConfigError, LayoutError
from alvr_filesystem.layout import ACCESSORS, DIRECTORY_FIELDS, Layout
from alvr_filesystem.logger import setup_logger
from alvr_filesystem.platforms import current_profile, profile_for
from alvr_filesystem.resolver import LayoutResolver
from alvr_filesystem.workspace import WorkspaceLayout, installer_path


app = typer.Typer(
    name="alvr-filesystem",
    help="Inspect the filesystem layout of an ALVR installation",
    add_completion=False,
)

DASHBOARD_EXE_OPTION = typer.Option(
    None,
    "--dashboard-exe",
    help="Path of the dashboard executable of the installation",
)
DRIVER_ROOT_OPTION = typer.Option(
    None,
    "--driver-root",
    help="Path of the openVR driver root directory of the installation",
)
TARGET_OS_OPTION = typer.Option(
    None,
    "--target-os",
    help="Resolve for another OS (linux, windows, macos, ...). Paths are parsed with the separators of the host",
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
):

    setup_logger(verbose=verbose)


def _resolve_layout(
    dashboard_exe: Optional[Path],
    driver_root: Optional[Path],
    target_os: Optional[str],
) -> Layout:
    if dashboard_exe is not None and driver_root is not None:
        raise ConfigError(
            "--dashboard-exe and --driver-root are mutually exclusive"
        )

    profile = profile_for(target_os) if target_os else None

    for path in (dashboard_exe, driver_root):
        # backslashes are not separators in a posix Path
        if path is not None and os.sep != "\\" and "\\" in str(path):
            raise ConfigError(
                f"Use '/' separators in paths on this host: {path}"
            )

    resolver = LayoutResolver.from_env(profile=profile)

    if dashboard_exe is not None:
        return resolver.from_dashboard_exe(dashboard_exe)
    if driver_root is not None:
        return resolver.from_driver_root(driver_root)

    return resolver.invalid()


def _echo_paths(paths: Dict[str, Path], as_json: bool) -> None:
    if as_json:
        typer.echo(
            json.dumps({name: str(path) for name, path in paths.items()}, indent=2)
        )
        return

    width = max(len(name) for name in paths)
    for name, path in paths.items():
        typer.echo(f"{name.ljust(width)}  {path}")


@app.command()
def show(
    dashboard_exe: Optional[Path] = DASHBOARD_EXE_OPTION,
    driver_root: Optional[Path] = DRIVER_ROOT_OPTION,
    target_os: Optional[str] = TARGET_OS_OPTION,
    as_json: bool = typer.Option(False, "--json", help="Print a JSON object"),
):

    try:
        layout = _resolve_layout(dashboard_exe, driver_root, target_os)
        _echo_paths(layout.paths(), as_json)

    except LayoutError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        sys.exit(exc.exit_code)


@app.command()
def get(
    name: str = typer.Argument(..., help="Name of the path, e.g. session_log"),
    dashboard_exe: Optional[Path] = DASHBOARD_EXE_OPTION,
    driver_root: Optional[Path] = DRIVER_ROOT_OPTION,
    target_os: Optional[str] = TARGET_OS_OPTION,
):

    try:
        layout = _resolve_layout(dashboard_exe, driver_root, target_os)
        if name not in DIRECTORY_FIELDS + ACCESSORS:
            raise ConfigError(f"Unknown path name: {name}")
        typer.echo(str(getattr(layout, name)))

    except LayoutError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        sys.exit(exc.exit_code)


@app.command()
def workspace(
    root: Path = typer.Option(Path.cwd(), "--root", "-r", help="ALVR source checkout"),
    target_os: Optional[str] = TARGET_OS_OPTION,
    as_json: bool = typer.Option(False, "--json", help="Print a JSON object"),
):

    profile = profile_for(target_os) if target_os else current_profile()
    ws = WorkspaceLayout(root=root, profile=profile)

    _echo_paths(
        {
            "deps_dir": ws.deps_dir,
            "build_dir": ws.build_dir,
            "streamer_build_dir": ws.streamer_build_dir,
            "launcher_build_dir": ws.launcher_build_dir,
            "launcher_build_exe": ws.launcher_build_exe,
            "installer": installer_path(profile),
        },
        as_json,
    )


def run_cli() -> None:
    app()


if __name__ == "__main__":
    run_cli()
