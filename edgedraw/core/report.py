"""Report builder — text and JSON output for edgedraw runs."""

import json
from typing import Any

from edgedraw.core.types import Report


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    dim = f'{report.image_width}×{report.image_height}'
    lines.append(f'edgedraw: {report.image_path} ({dim})')
    lines.append(f'  method: {report.method}  kernel: {report.kernel}')

    track = report.track
    if track is not None:
        lines.append(f'  stats: mean={track.mean:.2f} stddev={track.stddev:.2f}')
        lines.append(f'  thresholds: low={track.low} high={track.high}')
        lines.append(f'  edges: {track.edge_pixels} px ({report.coverage:.2f}%)')

    if report.files:
        lines.append('')
        for label, path in report.files.items():
            lines.append(f'  {label}: {path}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'image': report.image_path,
        'dimensions': {'width': report.image_width, 'height': report.image_height},
        'method': report.method,
        'kernel': report.kernel,
    }
    if report.track is not None:
        obj['hysteresis'] = {
            'mean': round(report.track.mean, 3),
            'stddev': round(report.track.stddev, 3),
            'low': report.track.low,
            'high': report.track.high,
            'edge_pixels': report.track.edge_pixels,
            'coverage_pct': report.coverage,
        }
    obj['files'] = dict(report.files)
    return json.dumps(obj, indent=2)
