"""Tests for edgedraw.core.report — text and JSON run reports."""

import json

from edgedraw.core.report import format_json, format_text
from edgedraw.core.types import Report, TrackResult


def _report() -> Report:
    report = Report(
        image_path='photo.png',
        image_width=10,
        image_height=5,
        method='grayscale',
        kernel='sobel',
        track=TrackResult(mean=7.75, stddev=39.9053, low=47, high=87, edge_pixels=5),
    )
    report.add_file('edges', 'out/edges.png')
    return report


class TestFormatText:
    def test_header_and_settings(self):
        text = format_text(_report())
        assert text.splitlines()[0] == 'edgedraw: photo.png (10×5)'
        assert 'method: grayscale  kernel: sobel' in text

    def test_thresholds_and_coverage(self):
        text = format_text(_report())
        assert 'thresholds: low=47 high=87' in text
        assert 'edges: 5 px (10.00%)' in text
        assert 'mean=7.75 stddev=39.91' in text

    def test_files_listed(self):
        assert 'edges: out/edges.png' in format_text(_report())

    def test_without_track(self):
        text = format_text(Report(image_path='a.png', image_width=1, image_height=1))
        assert 'thresholds' not in text


class TestFormatJson:
    def test_round_trips_fields(self):
        obj = json.loads(format_json(_report()))
        assert obj['dimensions'] == {'width': 10, 'height': 5}
        assert obj['hysteresis']['low'] == 47
        assert obj['hysteresis']['high'] == 87
        assert obj['hysteresis']['stddev'] == 39.905
        assert obj['hysteresis']['coverage_pct'] == 10.0
        assert obj['files'] == {'edges': 'out/edges.png'}

    def test_coverage_zero_without_track(self):
        assert Report().coverage == 0.0
        assert 'hysteresis' not in json.loads(format_json(Report()))
