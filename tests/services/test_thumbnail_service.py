import re
from pathlib import Path

import pytest

from atium.common.process.gateway import ExecutionResult
from atium.domain.entities.analysis import parse_analysis
from atium.domain.errors import ConversionError, InvalidRequest, InvalidTimestamp
from atium.services.analysis.mediainfo_service import MediaInfoAnalysisService
from atium.services.schemas.thumbs import ThumbnailRequest, ThumbnailResponse
from atium.services.thumbs.ffmpeg_thumbnail import FFmpegThumbnailService


def _service(settings, gw):
    analysis = MediaInfoAnalysisService(settings, gateway=gw)
    return FFmpegThumbnailService(settings, gateway=gw, analysis_service=analysis)


def test_request_create_needs_input_or_output():
    assert ThumbnailRequest.create("00:00:02", None, None) is None
    req = ThumbnailRequest.create(None, "in.mp4", None)
    assert req == ThumbnailRequest(input_file="in.mp4")


def test_build_args():
    assert FFmpegThumbnailService.build_args("in.mp4", "out.jpg", "00:00:03") == [
        "-i", "in.mp4", "-ss", "00:00:03", "-vframes", "1", "out.jpg",
    ]


def test_extracts_at_requested_timestamp(settings, make_gateway, info_json_bytes, tmp_path):
    gw = make_gateway({"mediainfo": [ExecutionResult(0, stdout=info_json_bytes)]})
    svc = _service(settings, gw)
    out = tmp_path / "thumb.jpg"

    resp = svc.extract_thumbnail(ThumbnailRequest(timestamp="00:00:10", input_file="in.mp4", output_file=str(out)))

    assert resp == ThumbnailResponse(output_path=str(out))
    assert gw.calls_for("ffmpeg") == [["-i", "in.mp4", "-ss", "00:00:10", "-vframes", "1", str(out)]]
    assert gw.calls_for("mediainfo") == [["--output=JSON", "--full", "in.mp4"]]


def test_timestamp_past_end_is_corrected(settings, make_gateway, info_json_bytes, tmp_path):
    gw = make_gateway({"mediainfo": [ExecutionResult(0, stdout=info_json_bytes)]})
    svc = _service(settings, gw)

    svc.extract_thumbnail(ThumbnailRequest(timestamp="00:02:00", input_file="in.mp4", output_file=str(tmp_path / "t.jpg")))

    assert gw.calls_for("ffmpeg")[0][3] == "00:00:00.000"


def test_default_timestamp_and_output(settings, make_gateway, info_json_bytes, tmp_path):
    gw = make_gateway({"mediainfo": [ExecutionResult(0, stdout=info_json_bytes)]})
    svc = _service(settings, gw)
    src = str(tmp_path / "in.mp4")

    resp = svc.extract_thumbnail(ThumbnailRequest(input_file=src))

    assert resp.output_path == f"{src}.jpeg"
    assert gw.calls_for("ffmpeg")[0][3] == "00:00:01"


def test_default_timestamp_on_one_second_media_falls_back(settings, make_gateway, make_analysis_json, tmp_path):
    # no duration reported -> duration defaults to 00:00:01, so the default 00:00:01 request is at the end
    gw = make_gateway({"mediainfo": [ExecutionResult(0, stdout=make_analysis_json([{"@type": "General"}]))]})
    svc = _service(settings, gw)

    svc.extract_thumbnail(ThumbnailRequest(input_file="in.mp4", output_file=str(tmp_path / "t.jpg")))

    assert gw.calls_for("ffmpeg")[0][3] == "00:00:00.000"


def test_existing_output_is_not_overwritten(settings, make_gateway, info_json_bytes, tmp_path):
    existing = tmp_path / "thumb.jpg"
    existing.write_bytes(b"keep me")
    gw = make_gateway({"mediainfo": [ExecutionResult(0, stdout=info_json_bytes)]})
    svc = _service(settings, gw)

    resp = svc.extract_thumbnail(ThumbnailRequest(input_file="in.mp4", output_file=str(existing)))

    assert re.fullmatch(r"thumb-\d+\.jpg", Path(resp.output_path).name)
    assert existing.read_bytes() == b"keep me"


def test_precomputed_analysis_skips_mediainfo(settings, make_gateway, info_json_bytes, tmp_path):
    gw = make_gateway()
    svc = FFmpegThumbnailService(settings, gateway=gw)

    svc.extract_thumbnail(
        ThumbnailRequest(timestamp="00:00:20", input_file="in.mp4", output_file=str(tmp_path / "t.jpg")),
        parse_analysis(info_json_bytes),
    )

    assert gw.calls_for("mediainfo") == []
    assert ("mediainfo", ["--Version"]) not in gw.probes
    assert gw.calls_for("ffmpeg")[0][3] == "00:00:20"


def test_bad_timestamp_is_fatal(settings, make_gateway, info_json_bytes, tmp_path):
    gw = make_gateway({"mediainfo": [ExecutionResult(0, stdout=info_json_bytes)]})
    svc = _service(settings, gw)
    with pytest.raises(InvalidTimestamp):
        svc.extract_thumbnail(ThumbnailRequest(timestamp="ten", input_file="in.mp4", output_file=str(tmp_path / "t.jpg")))
    assert gw.calls_for("ffmpeg") == []


def test_missing_input_is_rejected(settings, make_gateway):
    svc = _service(settings, make_gateway())
    with pytest.raises(InvalidRequest):
        svc.extract_thumbnail(ThumbnailRequest(output_file="t.jpg"))


def test_ffmpeg_failure_drains_stderr(settings, make_gateway, info_json_bytes, tmp_path):
    gw = make_gateway({
        "mediainfo": [ExecutionResult(0, stdout=info_json_bytes)],
        "ffmpeg": [ExecutionResult(1, stderr=b"Invalid data found\n")],
    })
    svc = _service(settings, gw)

    with pytest.raises(ConversionError) as ei:
        svc.extract_thumbnail(ThumbnailRequest(input_file="in.mp4", output_file=str(tmp_path / "t.jpg")))

    assert ei.value.rc == 1
    assert gw.lines == ["Invalid data found"]
