# ── src/seqglue/utility/utils.py ───────────────────────────────────────
from __future__ import annotations

import errno
import logging
import logging.handlers
import os
import secrets
import sys
import yaml
from pathlib import Path
import datetime as dt

L = logging.getLogger(__name__)

# ── locate repo root, log dir and config ───────────────────────────────
def _find_repo_root(start: Path | None = None) -> Path:
    """Walk parents until we see pyproject.toml or .git."""
    here = start or Path(__file__).resolve()
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path(__file__).resolve().parents[1]       # site-packages wheel

ROOT      = _find_repo_root()
LOG_ROOT  = ROOT / "logs"
CONF_PATH = ROOT / "config" / "config.yaml"

LOG_FORMAT = "%(asctime)s  %(levelname)-7s  %(name)s:  %(message)s"

# ── config ─────────────────────────────────────────────────────────────
def load_config(path: str | Path = CONF_PATH) -> dict:
    """Read the YAML config; a missing file gives an empty mapping."""
    p = Path(path)
    if not p.exists():
        L.warning("Config file %s not found - using built-in defaults", p)
        return {}
    with p.open() as fh:
        return yaml.safe_load(fh) or {}

def config_section(cfg: dict, name: str) -> dict:
    """Return cfg[name] as a dict, tolerating absent or empty sections."""
    return cfg.get(name) or {}

# ── logging helpers ────────────────────────────────────────────────────
def _session_id(session_env: str, warn_if_generated: bool) -> str:
    """$<session_env> if set, else 'YYYYMMDD-HHMMSS-<4-hex>'."""
    sess_id = os.getenv(session_env)
    if sess_id:
        return sess_id
    ts = dt.datetime.now().strftime("%Y%m%d-%H%M%S")
    sess_id = f"{ts}-{secrets.token_hex(2)}"
    if warn_if_generated:
        sys.stderr.write(
            f"⚠️  {session_env} not set – using auto session ID {sess_id}\n"
            f"   (export {session_env}=YOUR_ID to group several runs in one log)\n"
        )
    return sess_id

def _resolve_logfile(log_dir: str | Path | None, session_env: str,
                     warn_if_generated: bool, prefix: str) -> Path:
    # SEQGLUE_LOG_FILE beats log_dir beats SEQGLUE_LOG_DIR beats LOG_ROOT
    if os.getenv("SEQGLUE_LOG_FILE"):
        logfile = Path(os.environ["SEQGLUE_LOG_FILE"]).expanduser()
        logfile.parent.mkdir(parents=True, exist_ok=True)
        return logfile

    if log_dir is not None:
        root_dir = Path(log_dir).expanduser()
    else:
        root_dir = Path(os.getenv("SEQGLUE_LOG_DIR", LOG_ROOT)).expanduser()
    root_dir.mkdir(parents=True, exist_ok=True)
    return root_dir / f"{prefix}_{_session_id(session_env, warn_if_generated)}.log"

def _refresh_latest(logfile: Path, prefix: str) -> None:
    """Point <prefix>_latest.log at logfile (relative symlink)."""
    latest = logfile.parent / f"{prefix}_latest.log"
    try:
        if latest.is_symlink() or latest.exists():
            latest.unlink()
        latest.symlink_to(logfile.name)
    except OSError as e:
        if e.errno not in (errno.EPERM, errno.EACCES, errno.EEXIST):
            raise

# ── main helper ────────────────────────────────────────────────────────
def setup_logging(
    log_dir: str | Path | None = LOG_ROOT,
    *,
    level: int | None = None,
    console: bool = True,
    force: bool = False,
    rotate_mb: int | None = None,
    max_bytes: int | None = None,
    backup_count: int = 0,
    session_env: str = "SEQGLUE_SESSION_ID",
    warn_if_generated: bool = True,
    log_file_prefix: str = "seqglue",
) -> Path:
    """
    Send root logging to one file per session, 'seqglue_<SESSION_ID>.log'.

    The file rotates by size when ``max_bytes`` or ``rotate_mb`` is given,
    keeping ``backup_count`` old copies. If the root logger already has
    handlers nothing is touched unless ``force`` is set.
    """
    logfile = _resolve_logfile(log_dir, session_env, warn_if_generated, log_file_prefix)

    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        return logfile

    root_logger.handlers.clear()
    root_logger.setLevel(level or logging.INFO)
    fmt = logging.Formatter(LOG_FORMAT)

    rotate_bytes = max_bytes or (int(rotate_mb * 1024 * 1024) if rotate_mb else None)
    if rotate_bytes:
        fh = logging.handlers.RotatingFileHandler(
            logfile, maxBytes=rotate_bytes, backupCount=backup_count,
            encoding="utf-8", delay=True,
        )
    else:
        fh = logging.FileHandler(logfile, mode="a", encoding="utf-8", delay=True)
    fh.setFormatter(fmt)
    root_logger.addHandler(fh)

    if console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(fmt)
        root_logger.addHandler(ch)

    _refresh_latest(logfile, log_file_prefix)
    root_logger.info("Logging to %s", logfile)
    return logfile
