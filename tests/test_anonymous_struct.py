import struct
import sys

import pytest

from cbench.anonymous_struct import Foo, main


def test_pack_is_eight_bytes_and_round_trips():
    foo = Foo(7, -42)
    image = foo.pack()
    assert len(image) == 8
    assert struct.unpack("=ii", image) == (7, -42)


def test_as_long_matches_memory_image():
    foo = Foo(1)
    foo.field3 = 3
    assert foo.as_long() == int.from_bytes(foo.pack(), sys.byteorder, signed=True)


def test_field3_shares_storage_with_field2():
    foo = Foo(0, 0x00030003)
    assert foo.field3 == 3


def test_setting_field3_changes_field2():
    foo = Foo(1, 0)
    foo.field3 = 3
    assert foo.field3 == 3
    assert foo.field2 in (3, 3 << 16)


def test_setting_field3_keeps_other_half():
    foo = Foo(0, -1)
    foo.field3 = 0
    assert foo.field3 == 0
    assert foo.field2 != -1
    assert foo.field2 in (-65536, 0xFFFF)


def test_negative_field3():
    foo = Foo()
    foo.field3 = -1
    assert foo.field3 == -1


def test_field3_out_of_range():
    foo = Foo()
    with pytest.raises(ValueError):
        foo.field3 = 1 << 20
    assert foo.field3 == 0
    assert foo.field2 == 0


def test_field2_out_of_range():
    with pytest.raises(ValueError):
        Foo(0, 1 << 40)


def test_main_logs_fields(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().err.splitlines()
    assert len(lines) == 3
    assert lines[0].split(": ")[-1].startswith("0x")
    assert lines[1].endswith(": 1 3")
    assert lines[2].endswith(": -1")