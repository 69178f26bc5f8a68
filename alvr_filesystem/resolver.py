from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from alvr_filesystem.config import LayoutOverrides
from alvr_filesystem.container import ContainerDetector, ContainerPathTranslator
from alvr_filesystem.errors import InvalidPathError
from alvr_filesystem.layout import Layout, build_layout
from alvr_filesystem.platforms import PlatformProfile, current_profile
from alvr_filesystem.utils.lazy import Lazy

logger = logging.getLogger(__name__)


class LayoutResolver:
    """Resolves the installation root and builds the Layout from it.

    One resolver is created at process start and shared. When the overrides
    carry a portable root, the layout built from it is memoized and returned
    by every entry point, whatever path the caller passes.
    """

    def __init__(
        self,
        *,
        overrides: LayoutOverrides,
        profile: PlatformProfile,
        translator: ContainerPathTranslator,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.overrides = overrides
        self.profile = profile
        self.translator = translator
        self.environ = environ
        self._override_layout: Lazy[Optional[Layout]] = Lazy(
            self._build_override_layout
        )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        profile: Optional[PlatformProfile] = None,
        detector: Optional[ContainerDetector] = None,
    ) -> "LayoutResolver":
        if environ is None:
            environ = dict(os.environ)
        if profile is None:
            profile = current_profile()
        if detector is None:
            detector = ContainerDetector()

        return cls(
            overrides=LayoutOverrides.from_env(environ),
            profile=profile,
            translator=ContainerPathTranslator(profile, detector),
            environ=environ,
        )

    # The path should include the executable file name
    def from_dashboard_exe(self, path: Union[str, Path]) -> Layout:
        cached = self._override_layout.get()
        if cached is not None:
            return cached

        path = Path(path)
        if self.profile.is_fhs:
            # <root>/bin/<exe>
            root = _ancestor(path, 2)
        else:
            root = _ancestor(path, 1)

        return self._build(root)

    def from_driver_root(self, path: Union[str, Path]) -> Layout:
        cached = self._override_layout.get()
        if cached is not None:
            return cached

        path = Path(path)
        if self.profile.is_fhs:
            # <root>/lib64/alvr
            root = _ancestor(path, 2)
        else:
            root = path

        return self._build(root)

    def invalid(self) -> Layout:
        """Layout for code that has no way of knowing its own location.

        Unless a portable root is configured, only the paths that do not
        depend on the root (the config dir, overridden absolute dirs) are
        meaningful.
        """
        cached = self._override_layout.get()
        if cached is not None:
            return cached

        return self._build(Path(""))

    def _build(self, root: Path) -> Layout:
        root = self.translator.translate(root)
        logger.debug("Building %s layout from root %r", self.profile.family, str(root))
        return build_layout(
            root,
            self.profile,
            self.overrides,
            environ=self.environ,
        )

    def _build_override_layout(self) -> Optional[Layout]:
        if not self.overrides.is_portable:
            return None

        root = self.translator.translate(self.overrides.root)
        logger.debug("Using portable root %s for every layout", root)
        return build_layout(
            root,
            self.profile,
            self.overrides,
            environ=self.environ,
        )


def _ancestor(path: Path, levels: int) -> Path:
    current = path
    for _ in range(levels):
        parent = current.parent
        if parent == current:
            raise InvalidPathError(
                f"Path has fewer than {levels} parent directories: {path}"
            )
        current = parent
    return current


_default_resolver: Lazy[LayoutResolver] = Lazy(LayoutResolver.from_env)


def default_resolver() -> LayoutResolver:
    return _default_resolver.get()


def layout_from_dashboard_exe(path: Union[str, Path]) -> Layout:
    return default_resolver().from_dashboard_exe(path)


def layout_from_driver_root(path: Union[str, Path]) -> Layout:
    return default_resolver().from_driver_root(path)


def layout_invalid() -> Layout:
    return default_resolver().invalid()
