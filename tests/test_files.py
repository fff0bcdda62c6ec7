import pytest

from oaikit.files import (
    BytesSource,
    FileReadError,
    FileSaveError,
    PathSource,
    create_all_dir,
    create_file_part,
    file_stream_body,
)


def test_stream_body_reads_whole_file(tmp_path):
    payload = bytes(range(256)) * 1000
    path = tmp_path / "data.bin"
    path.write_bytes(payload)
    assert b"".join(file_stream_body(PathSource(path))) == payload


def test_stream_body_rejects_bytes_source():
    with pytest.raises(FileReadError, match="Cannot create stream from non-file source"):
        file_stream_body(BytesSource("a.txt", b"x"))


def test_stream_body_missing_file(tmp_path):
    with pytest.raises(FileReadError):
        file_stream_body(PathSource(tmp_path / "missing.txt"))


def test_file_part_from_path(tmp_path):
    path = tmp_path / "meow.txt"
    path.write_bytes(b":3")
    part = create_file_part(PathSource(str(path)))
    assert part.file_name == "meow.txt"
    assert part.mime_type == "application/octet-stream"
    assert b"".join(part.content) == b":3"


def test_file_part_from_bytes():
    part = create_file_part(BytesSource("meow.txt", b":3"))
    assert part.file_name == "meow.txt"
    assert part.content == b":3"
    assert part.mime_type == "application/octet-stream"


def test_file_part_without_file_name():
    with pytest.raises(FileReadError, match="cannot extract file name"):
        create_file_part(PathSource("/"))


def test_create_all_dir_nested(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    create_all_dir(target)
    assert target.is_dir()
    create_all_dir(target)
    assert target.is_dir()


def test_create_all_dir_under_a_file(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    with pytest.raises(FileSaveError):
        create_all_dir(blocker / "child")