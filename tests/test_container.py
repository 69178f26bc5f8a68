from pathlib import Path

import pytest

from alvr_filesystem.container import ContainerDetector, ContainerPathTranslator
from alvr_filesystem.platforms import profile_for


class TestDetector:

    def test_pressure_vessel_marker(self, write_marker):
        detector = ContainerDetector(marker=write_marker("pressure-vessel-extra-text"))
        assert detector.is_pressure_vessel

    def test_other_runtime(self, write_marker):
        detector = ContainerDetector(marker=write_marker("other-runtime"))
        assert not detector.is_pressure_vessel

    def test_missing_marker(self, missing_marker):
        assert not ContainerDetector(marker=missing_marker).is_pressure_vessel

    def test_marker_is_a_directory(self, tmp_path):
        assert not ContainerDetector(marker=tmp_path).is_pressure_vessel

    def test_non_utf8_marker(self, write_marker):
        detector = ContainerDetector(marker=write_marker(b"pressure-vessel\xff\xfe"))
        assert not detector.is_pressure_vessel

    def test_result_is_cached(self, write_marker):
        marker = write_marker("pressure-vessel\n")
        detector = ContainerDetector(marker=marker)
        assert detector.is_pressure_vessel

        marker.write_text("other-runtime", encoding="utf-8")
        assert detector.is_pressure_vessel

        marker.unlink()
        assert detector.is_pressure_vessel


class TestTranslator:

    def test_rewrites_absolute_paths_under_pressure_vessel(self, linux, write_marker):
        detector = ContainerDetector(marker=write_marker("pressure-vessel-extra-text"))
        translator = ContainerPathTranslator(linux, detector)
        assert translator.translate("/opt/app") == Path("/run/host/opt/app")
        assert translator.translate(Path("/")) == Path("/run/host")

    def test_keeps_relative_paths(self, linux, write_marker):
        detector = ContainerDetector(marker=write_marker("pressure-vessel"))
        translator = ContainerPathTranslator(linux, detector)
        assert translator.translate("opt/app") == Path("opt/app")
        assert translator.translate("") == Path("")

    def test_other_runtime_passes_through(self, linux, write_marker):
        detector = ContainerDetector(marker=write_marker("other-runtime"))
        translator = ContainerPathTranslator(linux, detector)
        assert translator.translate("/opt/app") == Path("/opt/app")

    @pytest.mark.parametrize("os_name", ["windows", "macos"])
    def test_identity_on_flat_platforms(self, os_name, write_marker):
        detector = ContainerDetector(marker=write_marker("pressure-vessel"))
        translator = ContainerPathTranslator(profile_for(os_name), detector)
        assert translator.translate("/opt/app") == Path("/opt/app")

    def test_flat_platforms_never_read_the_marker(self, windows, write_marker, monkeypatch):
        marker = write_marker("pressure-vessel")
        reads = []
        real_read_text = Path.read_text

        def counting_read_text(self, *args, **kwargs):
            reads.append(self)
            return real_read_text(self, *args, **kwargs)

        monkeypatch.setattr(Path, "read_text", counting_read_text)
        translator = ContainerPathTranslator(windows, ContainerDetector(marker=marker))

        assert translator.translate("/opt/app") == Path("/opt/app")
        assert reads == []

    def test_marker_is_read_once(self, linux, write_marker, monkeypatch):
        marker = write_marker("pressure-vessel")
        reads = []
        real_read_text = Path.read_text

        def counting_read_text(self, *args, **kwargs):
            reads.append(self)
            return real_read_text(self, *args, **kwargs)

        monkeypatch.setattr(Path, "read_text", counting_read_text)
        translator = ContainerPathTranslator(linux, ContainerDetector(marker=marker))

        translator.translate("/opt/a")
        translator.translate("/opt/b")
        assert reads == [marker]
