from pathlib import Path

import pytest

from ccwebcontent.core.config import load_paths
from ccwebcontent.core.errors import ConfigurationError


def test_load_paths_prefers_explicit_export_dir(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("CCWEB_EXPORT_DIR", str(tmp_path / "from-env"))
    paths = load_paths(tmp_path, export_dir=tmp_path / "out")

    assert paths.package_root == tmp_path.resolve()
    assert paths.archive_path == (tmp_path / "out").resolve() / "all_files.zip"


def test_load_paths_reads_environment(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("CCWEB_EXPORT_DIR", str(tmp_path / "from-env"))
    paths = load_paths(tmp_path)
    assert paths.export_dir == (tmp_path / "from-env").resolve()


def test_load_paths_defaults_to_cwd(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("CCWEB_EXPORT_DIR", raising=False)
    monkeypatch.chdir(tmp_path)
    paths = load_paths(tmp_path)
    assert paths.export_dir == tmp_path.resolve() / "ccweb_export"


def test_load_paths_rejects_missing_root(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_paths(tmp_path / "nope")
