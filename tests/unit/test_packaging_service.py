import zipfile
from pathlib import Path

from ccwebcontent.application.services.packaging_service import ArchivePackager
from ccwebcontent.domain.models.file_entry import FileEntry, FileMap
from ccwebcontent.infrastructure.package.package_root import PackageRoot


def _packager(root: Path) -> ArchivePackager:
    return ArchivePackager(PackageRoot(root))


def test_empty_mapping_creates_nothing(tmp_path: Path) -> None:
    destination = tmp_path / "export" / "all_files.zip"

    assert _packager(tmp_path).package(FileMap(), destination) is None
    assert not destination.parent.exists()


def test_missing_file_is_flagged_and_archive_still_written(tmp_path: Path) -> None:
    root = tmp_path / "pkg"
    root.mkdir()
    destination = tmp_path / "export" / "all_files.zip"
    file_map = FileMap()
    file_map.register(FileEntry(migration_id="m1", path_name="missing.png"))

    archive_path = _packager(root).package(file_map, destination)

    assert archive_path == destination.resolve()
    assert archive_path.is_file()
    assert file_map["missing.png"].errored
    with zipfile.ZipFile(archive_path) as archive:
        assert archive.namelist() == []


def test_files_resolve_from_root_then_web_resources(tmp_path: Path) -> None:
    root = tmp_path / "pkg"
    (root / "web_resources" / "img").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "page.html").write_text("<p>root</p>", encoding="utf-8")
    (root / "web_resources" / "img" / "a.png").write_bytes(b"PNG")
    file_map = FileMap()
    file_map.register(FileEntry(migration_id="r1", path_name="page.html", primary=True))
    file_map.register(FileEntry(migration_id="h1", path_name="img/a.png"))
    file_map.register(FileEntry(migration_id="h2", path_name="docs"))

    packager = _packager(root)
    archive_path = packager.package(file_map, tmp_path / "out.zip")

    with zipfile.ZipFile(archive_path) as archive:
        assert sorted(archive.namelist()) == ["img/a.png", "page.html"]
        assert archive.read("img/a.png") == b"PNG"
    assert not file_map["page.html"].errored
    assert not file_map["img/a.png"].errored
    assert file_map["docs"].errored
    assert packager.last_stats.written == 2
    assert packager.last_stats.errored == 1


def test_same_logical_path_is_written_once(tmp_path: Path) -> None:
    root = tmp_path / "pkg"
    root.mkdir()
    (root / "a.txt").write_text("a", encoding="utf-8")
    entries = {
        "id-1": FileEntry(migration_id="id-1", path_name="a.txt"),
        "id-2": FileEntry(migration_id="id-2", path_name="./a.txt"),
    }

    packager = _packager(root)
    archive_path = packager.package(entries, tmp_path / "out.zip")

    with zipfile.ZipFile(archive_path) as archive:
        assert archive.namelist() == ["a.txt"]
    assert packager.last_stats.duplicates == 1


def test_existing_archive_is_replaced(tmp_path: Path) -> None:
    root = tmp_path / "pkg"
    root.mkdir()
    (root / "b.txt").write_text("b", encoding="utf-8")
    destination = tmp_path / "out.zip"
    with zipfile.ZipFile(destination, "w") as archive:
        archive.writestr("stale.txt", "old")
    file_map = FileMap()
    file_map.register(FileEntry(migration_id="b", path_name="b.txt"))

    _packager(root).package(file_map, destination)

    with zipfile.ZipFile(destination) as archive:
        assert archive.namelist() == ["b.txt"]


def test_dotted_spelling_of_a_path_is_written_once(tmp_path: Path) -> None:
    root = tmp_path / "pkg"
    (root / "sub").mkdir(parents=True)
    (root / "b.html").write_text("<p>b</p>", encoding="utf-8")
    file_map = FileMap()
    file_map.register(FileEntry(migration_id="b1", path_name="b.html"))
    file_map.register(FileEntry(migration_id="b2", path_name="sub/../b.html"))

    packager = _packager(root)
    archive_path = packager.package(file_map, tmp_path / "out.zip")

    with zipfile.ZipFile(archive_path) as archive:
        assert archive.namelist() == ["b.html"]
    assert packager.last_stats.written == 1
    assert packager.last_stats.duplicates == 1
    assert not file_map["sub/../b.html"].errored
