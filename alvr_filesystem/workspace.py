import tempfile
from dataclasses import dataclass
from pathlib import Path

from alvr_filesystem.platforms import PlatformProfile


@dataclass(frozen=True)
class WorkspaceLayout:
    """Locations inside an ALVR source checkout used by the build tooling."""

    root: Path
    profile: PlatformProfile

    @property
    def deps_dir(self) -> Path:
        return self.root / "deps"

    @property
    def build_dir(self) -> Path:
        return self.root / "build"

    def crate_dir(self, name: str) -> Path:
        return self.root / "alvr" / name

    @property
    def streamer_build_dir(self) -> Path:
        return self.build_dir / f"alvr_streamer_{self.profile.os}"

    @property
    def launcher_build_dir(self) -> Path:
        return self.build_dir / f"alvr_launcher_{self.profile.os}"

    @property
    def launcher_build_exe(self) -> Path:
        return self.launcher_build_dir / self.profile.exec_fname("ALVR Launcher")


def installer_path(profile: PlatformProfile) -> Path:
    return Path(tempfile.gettempdir()) / profile.exec_fname("alvr_installer")
