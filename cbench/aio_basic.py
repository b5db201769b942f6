"""Write a file, then read it back asynchronously with a completion callback."""

from __future__ import annotations

import argparse
import os
import threading
import time
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeout
from typing import Callable, Optional

from cbench.log import Logger, get_logger

__all__ = ["async_read", "run", "main"]

DATA = b"hello world"
BUFFER_SIZE = 1024
SUSPEND_TIMEOUT = 1.0
_O_SYNC = getattr(os, "O_SYNC", 0)


def _pread(fd: int, nbytes: int, offset: int) -> bytes:
    if hasattr(os, "pread"):
        return os.pread(fd, nbytes, offset)
    os.lseek(fd, offset, os.SEEK_SET)
    return os.read(fd, nbytes)


def async_read(
    fd: int,
    nbytes: int,
    callback: Optional[Callable[[bytes], None]] = None,
) -> Future[bytes]:
    """Read up to ``nbytes`` from offset 0 of ``fd`` on a worker thread.

    The returned future holds the bytes read. Once the read completes,
    ``callback`` (if given) is called with the data on the worker thread.
    """
    future: Future[bytes] = Future()

    def _worker() -> None:
        try:
            data = _pread(fd, nbytes, 0)
        except BaseException as exc:  # delivered through the future
            future.set_exception(exc)
            return
        future.set_result(data)
        if callback is not None:
            callback(data)

    threading.Thread(target=_worker, daemon=True).start()
    return future


def run(
    path: str | os.PathLike[str] = "test.txt",
    logger: Optional[Logger] = None,
    delay: float = 3.0,
) -> bytes:
    """Write the sample data to ``path`` and read it back asynchronously.

    Returns the bytes read. Raises OSError on file errors and TimeoutError
    when the read does not finish within one second.
    """
    log = logger if logger is not None else get_logger()
    fd = os.open(path, os.O_RDWR | os.O_CREAT | os.O_TRUNC | _O_SYNC, 0o755)
    try:
        written = os.write(fd, DATA)
        log.info("write %d bytes data to file", written)

        future = async_read(fd, BUFFER_SIZE, lambda _data: log.info("data is ready ..."))
        try:
            data = future.result(timeout=SUSPEND_TIMEOUT)
        except FutureTimeout as exc:
            raise TimeoutError("aio suspend failure: read did not complete in time") from exc

        log.info("read %d bytes data:", len(data))
        log.info(">>> %s <<<", data.decode(errors="replace"))
    finally:
        os.close(fd)

    time.sleep(delay)
    return data


def _install_lock(logger: Logger) -> None:
    mutex = threading.Lock()

    def _lock(acquire: bool, _udata: object) -> None:
        if acquire:
            mutex.acquire()
        else:
            mutex.release()

    logger.set_lock(_lock, None)


def main(argv: Optional[list[str]] = None) -> int:
    """Command entry point; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="aio-basic")
    parser.add_argument("--path", default="test.txt")
    parser.add_argument("--delay", type=float, default=3.0)
    args = parser.parse_args(argv)

    log = get_logger()
    _install_lock(log)
    try:
        run(args.path, log, args.delay)
    except (OSError, TimeoutError) as exc:
        log.error("%s", exc)
        return 1
    return 0