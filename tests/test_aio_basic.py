import io
import os
import threading

import pytest

from cbench.aio_basic import async_read, main, run
from cbench.log import Logger


def test_async_read_returns_file_content(tmp_path):
    target = tmp_path / "data.bin"
    target.write_bytes(b"abcdef")
    fd = os.open(target, os.O_RDONLY)
    try:
        future = async_read(fd, 1024)
        assert future.result(timeout=5) == b"abcdef"
    finally:
        os.close(fd)


def test_async_read_limits_to_nbytes(tmp_path):
    target = tmp_path / "data.bin"
    target.write_bytes(b"abcdef")
    fd = os.open(target, os.O_RDONLY)
    try:
        assert async_read(fd, 3).result(timeout=5) == b"abc"
    finally:
        os.close(fd)


def test_async_read_invokes_callback_with_data(tmp_path):
    target = tmp_path / "data.bin"
    target.write_bytes(b"payload")
    received = []
    done = threading.Event()

    def callback(data):
        received.append(data)
        done.set()

    fd = os.open(target, os.O_RDONLY)
    try:
        future = async_read(fd, 1024, callback)
        assert future.result(timeout=5) == b"payload"
        assert done.wait(5)
    finally:
        os.close(fd)
    assert received == [b"payload"]


def test_async_read_bad_fd_sets_exception():
    future = async_read(-1, 16)
    with pytest.raises(OSError):
        future.result(timeout=5)


def test_run_reads_back_written_data(tmp_path):
    stream = io.StringIO()
    target = tmp_path / "test.txt"
    data = run(target, Logger(stream), delay=0)
    assert data == b"hello world"
    assert target.read_bytes() == b"hello world"
    output = stream.getvalue()
    assert "write 11 bytes data to file" in output
    assert ">>> hello world <<<" in output


def test_run_truncates_existing_file(tmp_path):
    target = tmp_path / "test.txt"
    target.write_bytes(b"x" * 100)
    data = run(target, Logger(io.StringIO()), delay=0)
    assert data == target.read_bytes()
    assert len(data) < 100


def test_run_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        run(tmp_path / "missing" / "test.txt", Logger(io.StringIO()), delay=0)


def test_main_reports_failure(tmp_path, capsys):
    status = main(["--path", str(tmp_path / "missing" / "x.txt"), "--delay", "0"])
    assert status == 1
    assert "ERROR" in capsys.readouterr().err


def test_main_success(tmp_path, capsys):
    target = tmp_path / "out.txt"
    assert main(["--path", str(target), "--delay", "0"]) == 0
    assert target.read_bytes() == b"hello world"