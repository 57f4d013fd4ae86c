import json
import zipfile
from pathlib import Path

import pytest

from ccwebcontent.cli.main import main

MANIFEST = """<?xml version="1.0" encoding="UTF-8"?>
<manifest identifier="m1" xmlns="http://www.imsglobal.org/xsd/imsccv1p1/imscp_v1p1">
  <resources>
    <resource identifier="r1" type="webcontent" href="page.html" intendeduse="assignment">
      <file href="page.html"/>
    </resource>
    <resource identifier="r2" type="webcontent" href="missing.png">
      <file href="missing.png"/>
    </resource>
  </resources>
</manifest>
"""


def _cartridge(tmp_path: Path) -> Path:
    root = tmp_path / "cartridge"
    root.mkdir()
    (root / "imsmanifest.xml").write_text(MANIFEST, encoding="utf-8")
    (root / "page.html").write_text("<p>Essay</p>", encoding="utf-8")
    return root


def test_inspect_lists_resources(tmp_path: Path, capsys) -> None:
    root = _cartridge(tmp_path)

    code = main(["--package-root", str(root), "inspect"])

    assert code == 0
    assert "r1" in capsys.readouterr().out


def test_classify_does_not_write_archive(tmp_path: Path) -> None:
    root = _cartridge(tmp_path)
    export_dir = tmp_path / "export"

    code = main(["--package-root", str(root), "--export-dir", str(export_dir), "classify"])

    assert code == 0
    assert not export_dir.exists()


def test_export_writes_archive_and_report(tmp_path: Path) -> None:
    root = _cartridge(tmp_path)
    export_dir = tmp_path / "export"
    report = tmp_path / "reports" / "export.json"

    code = main(
        [
            "--package-root",
            str(root),
            "--export-dir",
            str(export_dir),
            "export",
            "--report",
            str(report),
        ]
    )

    assert code == 1
    with zipfile.ZipFile(export_dir / "all_files.zip") as archive:
        assert archive.namelist() == ["page.html"]
    payload = json.loads(report.read_text(encoding="utf-8"))
    assert payload["assignments"] == ["r1"]
    assert payload["errored_paths"] == ["missing.png"]
    assert payload["files"]["r2"]["errored"] is True


def test_missing_package_root_returns_error(tmp_path: Path) -> None:
    assert main(["--package-root", str(tmp_path / "absent"), "inspect"]) == 1


def test_missing_manifest_returns_error(tmp_path: Path) -> None:
    root = tmp_path / "empty"
    root.mkdir()
    assert main(["--package-root", str(root), "inspect"]) == 1


def test_export_help_documents_exit_status(capsys) -> None:
    with pytest.raises(SystemExit):
        main(["export", "--help"])

    help_text = " ".join(capsys.readouterr().out.split())
    assert "exits with status 1 when any file is missing" in help_text
    assert "the archive is still written" in help_text
