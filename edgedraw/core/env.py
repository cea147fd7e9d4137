"""Environment variable loading and default settings for edgedraw.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Walking stops at .git so we never load a .env from outside the repo.
Only sets variables that are NOT already in os.environ.

Recognised variables:
  EDGEDRAW_METHOD   default gradient policy, id or name (0 / grayscale)
  EDGEDRAW_KERNEL   default derivative kernel (sobel / scharr)
"""

import os
from dataclasses import dataclass
from pathlib import Path

METHOD_VAR = 'EDGEDRAW_METHOD'
KERNEL_VAR = 'EDGEDRAW_KERNEL'


@dataclass
class Settings:
    """Defaults for the CLI; command-line flags override them."""

    method: str = '0'
    kernel: str = 'sobel'


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key.startswith('export '):
            key = key[len('export ') :].strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        if key not in os.environ:
            os.environ[key] = value

    return path


def load_settings() -> Settings:
    """Read EDGEDRAW_* variables from the (already loaded) environment."""
    defaults = Settings()
    method = os.environ.get(METHOD_VAR, '').strip() or defaults.method
    kernel = os.environ.get(KERNEL_VAR, '').strip().lower() or defaults.kernel
    return Settings(method=method, kernel=kernel)
