import logging
from pathlib import Path
from typing import Union

from alvr_filesystem.platforms import PlatformProfile
from alvr_filesystem.utils.lazy import Lazy

logger = logging.getLogger(__name__)

CONTAINER_MANAGER = Path("/run/host/container-manager")
PRESSURE_VESSEL_ID = "pressure-vessel"
HOST_MOUNT = Path("/run/host")


class ContainerDetector:
    """Detects the Steam pressure-vessel runtime from its marker file.

    The marker is read at most once; the answer is kept for the lifetime of
    the detector.
    """

    def __init__(self, marker: Path = CONTAINER_MANAGER):
        self.marker = marker
        self._flag = Lazy(self._detect)

    @property
    def is_pressure_vessel(self) -> bool:
        return self._flag.get()

    def _detect(self) -> bool:
        try:
            content = self.marker.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.debug("No readable container marker at %s", self.marker)
            return False

        detected = content.startswith(PRESSURE_VESSEL_ID)
        logger.debug(
            "Container marker %s: %r, pressure-vessel=%s",
            self.marker,
            content.splitlines()[0] if content else "",
            detected,
        )
        return detected


class ContainerPathTranslator:
    def __init__(
        self,
        profile: PlatformProfile,
        detector: ContainerDetector,
    ):
        self.profile = profile
        self.detector = detector

    def translate(self, path: Union[str, Path]) -> Path:
        path = Path(path)

        if not self.profile.is_fhs:
            return path

        if not path.is_absolute():
            return path

        if not self.detector.is_pressure_vessel:
            return path

        return HOST_MOUNT / path.relative_to(path.anchor)
