import pytest

import atium.services.factory as factory_mod
from atium.domain.enums import AnalysisEngine, ConversionEngine
from atium.domain.errors import UnavailableTool


class _FakeService:
    instances = []

    def __init__(self, settings=None):
        type(self).instances.append(settings)


@pytest.fixture(autouse=True)
def _reset():
    _FakeService.instances.clear()
    yield
    _FakeService.instances.clear()


@pytest.mark.parametrize(
    "builder, attr, engine",
    [
        ("build_analysis_service", "MediaInfoAnalysisService", AnalysisEngine.MEDIAINFO),
        ("build_thumbnail_service", "FFmpegThumbnailService", ConversionEngine.FFMPEG),
        ("build_conversion_service", "FFmpegConversionService", ConversionEngine.FFMPEG),
    ],
)
def test_builders_pick_the_engine_implementation(monkeypatch, settings, builder, attr, engine):
    monkeypatch.setattr(factory_mod, attr, _FakeService, raising=True)

    svc = getattr(factory_mod, builder)(engine, settings)

    assert isinstance(svc, _FakeService)
    assert _FakeService.instances == [settings]


def test_builder_surfaces_probe_failure(settings, monkeypatch):
    settings.tools.mediainfo_bin = "atium-no-such-binary-7f3a"
    with pytest.raises(UnavailableTool):
        factory_mod.build_analysis_service(AnalysisEngine.MEDIAINFO, settings)


def test_unknown_engine_is_rejected():
    with pytest.raises(ValueError):
        factory_mod.build_conversion_service("gstreamer")  # type: ignore[arg-type]
