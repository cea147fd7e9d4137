"""edgedraw — Canny-style edge extraction with self-calibrating thresholds.

Usage: edgedraw <command> ... [options]

Commands:
  detect <image> <output>    write the binary edge map as a PNG
  stages <tmp_dir> <image>   write every intermediate grid as a PNG
  help [policy]              print the docs of a gradient policy

Gradient policies are auto-discovered from edgedraw/policies/.
Each policy module's docstring is its documentation.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, edgedraw looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import os
import sys

import numpy as np
from PIL import Image, UnidentifiedImageError

from edgedraw import registry
from edgedraw.core.env import load_env, load_settings
from edgedraw.core.errors import EdgeDrawError
from edgedraw.core.gradient import KERNELS
from edgedraw.core.report import format_json, format_text
from edgedraw.core.types import EdgeResult, Report
from edgedraw.pipeline import EdgePipeline


def _load_policy_module(name: str) -> object:
    """Load the raw module for a policy (for docstring access)."""
    return importlib.import_module(f'edgedraw.policies.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_policy_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _add_run_options(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        '-m',
        '--method',
        default=None,
        help='Gradient policy id or name: 0/grayscale, 1/colour (default: $EDGEDRAW_METHOD or 0)',
    )
    p.add_argument(
        '-k',
        '--kernel',
        choices=sorted(KERNELS),
        default=None,
        help='Derivative kernel (default: $EDGEDRAW_KERNEL or sobel)',
    )
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  edgedraw detect photo.png edges.png\n'
        '  edgedraw detect photo.png edges.png --kernel scharr --json\n'
        '  edgedraw stages ./tmp photo.png\n'
        '  edgedraw help grayscale\n'
        '\n'
        'Config env vars (set in .env or environment):\n'
        '  EDGEDRAW_METHOD=0        gradient policy id or name\n'
        '  EDGEDRAW_KERNEL=sobel    sobel or scharr\n'
    )
    parser = argparse.ArgumentParser(
        prog='edgedraw',
        description='Canny-style edge extraction with self-calibrating thresholds.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    detect = sub.add_parser('detect', help='Write the binary edge map of an image')
    detect.add_argument('image', help='Path to input image (PNG/JPG, gray or colour)')
    detect.add_argument('output', help='Path to write the edge PNG')
    _add_run_options(detect)

    stages = sub.add_parser('stages', help='Write every intermediate grid as a PNG')
    stages.add_argument('tmp_dir', help='Working directory for artefacts')
    stages.add_argument('image', help='Path to input image (PNG/JPG, gray or colour)')
    _add_run_options(stages)

    help_parser = sub.add_parser('help', help='Print full docs for a gradient policy')
    help_parser.add_argument('policy', nargs='?', help='Policy name')

    return parser


def _print_help(name: str | None) -> None:
    """Print full module docstring for a policy."""
    policies = registry.all_policies()

    if name is None:
        print('Available gradient policies:\n')
        for pname, policy in sorted(policies.items(), key=lambda kv: kv[1].method):
            print(f'  {policy.method}  {pname:<10} {_short_doc(pname, policy.help)}')
        print('\nRun: edgedraw help <policy> for full docs.')
        return

    if name not in policies:
        print(f'Unknown policy: {name}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(policies))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_policy_module(name).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {name!r})')
        return
    print(doc)


def _load_image(path: str) -> np.ndarray:
    """Gray images load as (H, W); everything else as RGB (H, W, 3)."""
    with Image.open(path) as img:
        if img.mode == 'L':
            return np.array(img)
        return np.array(img.convert('RGB'))


def _direction_image(direction: np.ndarray) -> np.ndarray:
    """Map degrees (-180, 180] linearly onto 0-255."""
    scaled = np.floor((direction + 180.0) / 360.0 * 255.0)
    return np.clip(scaled, 0, 255).astype(np.uint8)


def _save_stages(result: EdgeResult, tmp_dir: str, report: Report) -> None:
    os.makedirs(tmp_dir, exist_ok=True)
    grids = {
        'gray': result.intensity,
        'gradient': result.gradient.magnitude,
        'direction': _direction_image(result.gradient.direction),
        'suppressed': result.suppressed,
        'edges': result.edges,
    }
    for label, grid in grids.items():
        path = os.path.join(tmp_dir, f'{label}.png')
        Image.fromarray(grid).save(path)
        report.add_file(label, path)


def _run(args: argparse.Namespace) -> Report:
    settings = load_settings()
    method = args.method if args.method is not None else settings.method
    kernel = args.kernel if args.kernel is not None else settings.kernel

    pipeline = EdgePipeline(method=method, kernel=kernel)
    image = _load_image(args.image)
    result = pipeline.run(image)

    h, w = result.edges.shape
    report = Report(
        image_path=args.image,
        image_width=w,
        image_height=h,
        method=pipeline.policy.name,
        kernel=pipeline.kernel,
        track=result.track,
    )

    if args.command == 'stages':
        _save_stages(result, args.tmp_dir, report)
    else:
        out_dir = os.path.dirname(args.output)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        Image.fromarray(result.edges).save(args.output)
        report.add_file('edges', args.output)
    return report


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'edgedraw: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'policy', None))
        return

    if not os.path.isfile(args.image):
        print(f'edgedraw: error: image not found: {args.image}', file=sys.stderr)
        sys.exit(1)

    try:
        report = _run(args)
    except (EdgeDrawError, UnidentifiedImageError) as e:
        print(f'edgedraw: error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
