import re
import sys
from dataclasses import dataclass
from typing import Literal, Optional

from alvr_filesystem.errors import UnsupportedPlatformError

Family = Literal["fhs", "flat"]


def current_os() -> str:
    platform = sys.platform

    if platform in ("win32", "cygwin"):
        return "windows"
    if platform.startswith("linux"):
        return "linux"
    if platform == "darwin":
        return "macos"

    # freebsd13 -> freebsd
    return re.sub(r"\d+$", "", platform)


@dataclass(frozen=True)
class PlatformProfile:
    os: str
    family: Family
    exe_suffix: str = ""
    dll_prefix: str = "lib"
    dll_suffix: str = ".so"
    dashboard_fname: str = "alvr_dashboard"
    session_log_fname: str = "session_log.txt"
    # subdirectory of the openVR driver holding the driver library
    driver_platform: Optional[str] = None

    @property
    def is_fhs(self) -> bool:
        return self.family == "fhs"

    @property
    def dynlib_extension(self) -> str:
        return self.dll_suffix.lstrip(".")

    def exec_fname(self, name: str) -> str:
        return f"{name}{self.exe_suffix}"

    def dynlib_fname(self, name: str) -> str:
        return f"{self.dll_prefix}{name}{self.dll_suffix}"

    def require_driver_platform(self) -> str:
        if self.driver_platform is None:
            raise UnsupportedPlatformError(
                f"No openVR driver platform for OS: {self.os}"
            )
        return self.driver_platform


_PROFILES = {
    "linux": PlatformProfile(
        os="linux",
        family="fhs",
        session_log_fname="alvr_session_log.txt",
        driver_platform="linux64",
    ),
    "windows": PlatformProfile(
        os="windows",
        family="flat",
        exe_suffix=".exe",
        dll_prefix="",
        dll_suffix=".dll",
        dashboard_fname="ALVR Dashboard.exe",
        driver_platform="win64",
    ),
    "macos": PlatformProfile(
        os="macos",
        family="flat",
        dll_suffix=".dylib",
        driver_platform="macos",
    ),
}


def profile_for(os: str) -> PlatformProfile:
    profile = _PROFILES.get(os)
    if profile is not None:
        return profile

    return PlatformProfile(os=os, family="flat")


def current_profile() -> PlatformProfile:
    return profile_for(current_os())
