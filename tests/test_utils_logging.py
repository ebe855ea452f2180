# tests/test_utils_logging.py

import logging
import importlib.util
from pathlib import Path
import pytest

# import utility module directly to avoid importing the full package
ROOT = Path(__file__).resolve().parents[1]
UTIL_PATH = ROOT / "src" / "seqglue" / "utility" / "utils.py"
spec = importlib.util.spec_from_file_location("sgutils", UTIL_PATH)
sgutils = importlib.util.module_from_spec(spec)
spec.loader.exec_module(sgutils)
setup_logging = sgutils.setup_logging


@pytest.fixture(autouse=True)
def _restore_root_handlers(monkeypatch):
    monkeypatch.delenv("SEQGLUE_LOG_FILE", raising=False)
    monkeypatch.setenv("SEQGLUE_SESSION_ID", "unit")
    root = logging.getLogger()
    saved, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        if h not in saved:
            h.close()
    root.handlers[:] = saved
    root.setLevel(level)


def test_setup_logging_handlers(tmp_path):
    log_file = setup_logging(
            log_dir=tmp_path,
            force=True,
            console=False,
            max_bytes=1_000,
            backup_count=1,
            )
    root = logging.getLogger()
    # one file handler only
    assert len(root.handlers) == 1
    assert log_file.exists()
    # rollover works
    root.info("x" * 2_000) # exceed 1 kb
    root.handlers[0].flush()
    rotated = log_file.with_suffix(".log.1")
    assert rotated.exists()


def test_session_id_names_file(tmp_path):
    log_file = setup_logging(log_dir=tmp_path, force=True, console=False)
    assert log_file.name == "seqglue_unit.log"
    assert (tmp_path / "seqglue_latest.log").is_symlink()


def test_log_file_env_wins(tmp_path, monkeypatch):
    target = tmp_path / "deep" / "run.log"
    monkeypatch.setenv("SEQGLUE_LOG_FILE", str(target))
    log_file = setup_logging(log_dir=tmp_path / "ignored", force=True, console=False)
    logging.getLogger("seqglue.test").info("hello")
    assert log_file == target
    assert target.exists()


def test_existing_handlers_left_alone(tmp_path):
    setup_logging(log_dir=tmp_path, force=True, console=False)
    root = logging.getLogger()
    before = root.handlers[:]
    setup_logging(log_dir=tmp_path, console=True)
    assert root.handlers == before
