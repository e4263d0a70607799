import struct

import pytest

from houseplanner.furniture import Chair, FurnitureType, Sofa, Table
from houseplanner.geometry import Point
from houseplanner.project import HouseSize, Project, ProjectFileError, size_for
from houseplanner.wall import Wall

# Byte offsets in a file holding no walls: 4-byte length + 19 UTF-16 chars.
_VERSION_AT = 4 + 2 * len("HouseLayoutDesigner")
_SIZE_AT = _VERSION_AT + 4
_WALLS_AT = _SIZE_AT + 4
_FIRST_TYPE_AT = _WALLS_AT + 8


def _sample():
    project = Project()
    project.house_size = HouseSize.LARGE
    project.walls = [Wall(Point(0, 0), Point(200, 0)), Wall(Point(200, 0), Point(200, 150))]
    sofa = Sofa(Point(100.5, 60.25))
    sofa.rotation = 45
    chair = Chair(Point(300, 300))
    chair.selected = True
    project.furniture = [sofa, chair, Table(Point(400, 120))]
    return project


def test_default_project_is_medium_and_empty():
    project = Project()
    assert project.house_size == HouseSize.MEDIUM
    assert project.canvas_size() == (600, 600)
    assert project.walls == [] and project.furniture == []


@pytest.mark.parametrize(
    "size, expected",
    [(HouseSize.SMALL, (300, 300)), (HouseSize.MEDIUM, (600, 600)), (HouseSize.LARGE, (800, 600))],
)
def test_size_for_presets(size, expected):
    assert size_for(size) == expected


def test_new_project_clears_and_resizes():
    project = _sample()
    project.new_project(HouseSize.SMALL)
    assert project.walls == [] and project.furniture == []
    assert project.canvas_size() == size_for(HouseSize.SMALL)


def test_clear_parts():
    project = _sample()
    project.clear_furniture()
    assert project.furniture == []
    assert len(project.walls) == 2
    project.clear_walls()
    assert project.walls == []


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "layout.bruh"
    original = _sample()
    original.save(path)

    loaded = Project()
    loaded.load(path)
    assert loaded.house_size == HouseSize.LARGE
    assert loaded.walls == original.walls
    assert [p.kind for p in loaded.furniture] == [p.kind for p in original.furniture]
    assert [p.position for p in loaded.furniture] == [p.position for p in original.furniture]
    assert [p.rotation for p in loaded.furniture] == [p.rotation for p in original.furniture]
    assert [p.selected for p in loaded.furniture] == [p.selected for p in original.furniture]


def test_header_bytes(tmp_path):
    path = tmp_path / "layout.bruh"
    Project().save(path)
    data = path.read_bytes()
    assert struct.unpack(">I", data[:4])[0] == 38
    assert data[4:_VERSION_AT] == "HouseLayoutDesigner".encode("utf-16-be")
    assert struct.unpack(">i", data[_VERSION_AT:_SIZE_AT])[0] == 1


def test_load_replaces_existing_content(tmp_path):
    path = tmp_path / "layout.bruh"
    Project().save(path)
    project = _sample()
    project.load(path)
    assert project.walls == [] and project.furniture == []
    assert project.house_size == HouseSize.MEDIUM


def test_missing_file_raises(tmp_path):
    project = _sample()
    with pytest.raises(ProjectFileError):
        project.load(tmp_path / "absent.bruh")
    assert len(project.walls) == 2


def test_bad_header_raises_and_leaves_empty(tmp_path):
    path = tmp_path / "bad.bruh"
    other = "SomethingElse".encode("utf-16-be")
    path.write_bytes(struct.pack(">I", len(other)) + other)
    project = _sample()
    with pytest.raises(ProjectFileError):
        project.load(path)
    assert project.walls == [] and project.furniture == []


def test_bad_version_raises(tmp_path):
    path = tmp_path / "layout.bruh"
    Project().save(path)
    data = bytearray(path.read_bytes())
    data[_VERSION_AT:_SIZE_AT] = struct.pack(">i", 2)
    path.write_bytes(bytes(data))
    with pytest.raises(ProjectFileError):
        Project().load(path)


def test_truncated_file_raises(tmp_path):
    path = tmp_path / "layout.bruh"
    _sample().save(path)
    path.write_bytes(path.read_bytes()[:-5])
    with pytest.raises(ProjectFileError):
        Project().load(path)


def test_unknown_furniture_type_is_skipped(tmp_path):
    path = tmp_path / "layout.bruh"
    project = Project()
    project.furniture = [Chair(Point(10, 10)), Table(Point(90, 90))]
    project.save(path)
    data = bytearray(path.read_bytes())
    data[_FIRST_TYPE_AT:_FIRST_TYPE_AT + 4] = struct.pack(">i", 7)
    path.write_bytes(bytes(data))

    loaded = Project()
    loaded.load(path)
    assert [p.kind for p in loaded.furniture] == [FurnitureType.TABLE]
    assert loaded.furniture[0].position == Point(90, 90)


def test_unknown_house_size_uses_medium_canvas(tmp_path):
    path = tmp_path / "layout.bruh"
    Project().save(path)
    data = bytearray(path.read_bytes())
    data[_SIZE_AT:_WALLS_AT] = struct.pack(">i", 9)
    path.write_bytes(bytes(data))

    loaded = Project()
    loaded.load(path)
    assert loaded.canvas_size() == size_for(HouseSize.MEDIUM)


def test_save_to_unwritable_path_raises(tmp_path):
    with pytest.raises(ProjectFileError):
        Project().save(tmp_path / "missing-dir" / "layout.bruh")