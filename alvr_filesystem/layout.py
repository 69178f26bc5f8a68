from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from alvr_filesystem.config import LayoutOverrides
from alvr_filesystem.errors import UnsupportedPlatformError
from alvr_filesystem.platforms import PlatformProfile
from alvr_filesystem.user_dirs import config_home, home_dir

# FHS locations relative to the installation root
FHS_DEFAULTS = {
    "executables_dir": "bin",
    "libraries_dir": "lib64",
    "static_resources_dir": "share/alvr",
    "openvr_driver_root_dir": "lib64/alvr",
    "vrcompositor_wrapper_dir": "libexec/alvr",
    "firewall_script_dir": "libexec/alvr",
    "firewalld_config_dir": "libexec/alvr",
    "ufw_config_dir": "libexec/alvr",
    "vulkan_layer_manifest_dir": "share/vulkan/explicit_layer.d",
}

CONFIG_SUBDIR = "alvr"


@dataclass(frozen=True)
class Layout:
    """Layout of an ALVR installation.

    All directories are absolute, unless the layout was built from an empty
    root (see ``LayoutResolver.invalid``).
    """

    profile: PlatformProfile
    # directory containing the dashboard executable
    executables_dir: Path
    # (linux only) directory of the vulkan layer library
    libraries_dir: Path
    # parent of resources like the dashboard and presets folders
    static_resources_dir: Path
    # configuration files (session.json)
    config_dir: Path
    log_dir: Path
    # directory to register in the openVR driver path
    openvr_driver_root_dir: Path
    # (linux only) parent of the executable wrapping vrcompositor
    vrcompositor_wrapper_dir: Path
    firewall_script_dir: Path
    firewalld_config_dir: Path
    ufw_config_dir: Path
    vulkan_layer_manifest_dir: Path

    @property
    def dashboard_exe(self) -> Path:
        return self.executables_dir / self.profile.dashboard_fname

    @property
    def resources_dir(self) -> Path:
        return self.openvr_driver_root_dir / "resources"

    @property
    def dashboard_dir(self) -> Path:
        return self.static_resources_dir / "dashboard"

    @property
    def presets_dir(self) -> Path:
        return self.static_resources_dir / "presets"

    @property
    def session(self) -> Path:
        return self.config_dir / "session.json"

    @property
    def session_log(self) -> Path:
        return self.log_dir / self.profile.session_log_fname

    @property
    def crash_log(self) -> Path:
        return self.log_dir / "crash_log.txt"

    @property
    def openvr_driver_lib_dir(self) -> Path:
        platform = self.profile.require_driver_platform()
        return self.openvr_driver_root_dir / "bin" / platform

    @property
    def openvr_driver_lib(self) -> Path:
        """Shared library loaded by openVR."""
        return (
            self.openvr_driver_lib_dir
            / f"driver_alvr_server.{self.profile.dynlib_extension}"
        )

    @property
    def openvr_driver_manifest(self) -> Path:
        return self.openvr_driver_root_dir / "driver.vrdrivermanifest"

    @property
    def vrcompositor_wrapper(self) -> Path:
        return self.vrcompositor_wrapper_dir / "vrcompositor-wrapper"

    @property
    def drm_lease_shim(self) -> Path:
        return self.vrcompositor_wrapper_dir / "alvr_drm_lease_shim.so"

    @property
    def vulkan_layer(self) -> Path:
        return self.libraries_dir / self.profile.dynlib_fname("alvr_vulkan_layer")

    @property
    def firewall_script(self) -> Path:
        return self.firewall_script_dir / "alvr_fw_config.sh"

    @property
    def firewalld_config(self) -> Path:
        return self.firewalld_config_dir / "alvr-firewalld.xml"

    @property
    def ufw_config(self) -> Path:
        return self.ufw_config_dir / "ufw-alvr"

    @property
    def vulkan_layer_manifest(self) -> Path:
        return self.vulkan_layer_manifest_dir / "alvr_x86_64.json"

    def directories(self) -> List[Path]:
        unique: List[Path] = []
        seen: set[Path] = set()
        for name in DIRECTORY_FIELDS:
            directory = getattr(self, name)
            if directory in seen:
                continue
            seen.add(directory)
            unique.append(directory)
        return unique

    def paths(self) -> Dict[str, Path]:
        """Every named directory and file of the layout.

        Entries that do not exist on this platform (the driver library on an
        OS without a driver build) are left out.
        """
        result: Dict[str, Path] = {}
        for name in DIRECTORY_FIELDS + ACCESSORS:
            try:
                result[name] = getattr(self, name)
            except UnsupportedPlatformError:
                continue
        return result


DIRECTORY_FIELDS = [f.name for f in fields(Layout) if f.name != "profile"]

ACCESSORS = [
    "dashboard_exe",
    "resources_dir",
    "dashboard_dir",
    "presets_dir",
    "session",
    "session_log",
    "crash_log",
    "openvr_driver_lib_dir",
    "openvr_driver_lib",
    "openvr_driver_manifest",
    "vrcompositor_wrapper",
    "drm_lease_shim",
    "vulkan_layer",
    "firewall_script",
    "firewalld_config",
    "ufw_config",
    "vulkan_layer_manifest",
]


def build_layout(
    root: Union[str, Path],
    profile: PlatformProfile,
    overrides: Optional[LayoutOverrides] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Layout:
    root = Path(root)

    if overrides is None:
        overrides = LayoutOverrides()

    if not profile.is_fhs:
        return Layout(
            profile=profile,
            **{name: root for name in DIRECTORY_FIELDS},
        )

    dirs = {
        name: root / (getattr(overrides, name) or default)
        for name, default in FHS_DEFAULTS.items()
    }

    if overrides.config_dir is not None:
        dirs["config_dir"] = Path(overrides.config_dir)
    else:
        dirs["config_dir"] = config_home(environ) / CONFIG_SUBDIR

    if overrides.log_dir is not None:
        dirs["log_dir"] = Path(overrides.log_dir)
    else:
        dirs["log_dir"] = home_dir(environ)

    return Layout(profile=profile, **dirs)
