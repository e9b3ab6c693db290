#!/usr/bin/env python
# -*- coding: UTF-8 -*-

import gzip

import pytest

from lnds.formats.base import ValuesFile, must_open, write_values


@pytest.mark.parametrize(
    "contents,type,sep,expected",
    [
        ("3\n1\n2\n", "int", None, [3, 1, 2]),
        ("3 1\t2\n# comment\n\n", "int", None, [3, 1, 2]),
        ("0.5,2.5,\n1e3\n", "float", ",", [0.5, 2.5, 1000.0]),
        ("chr 10|chr 2\n", "str", "|", ["chr 10", "chr 2"]),
    ],
)
def test_values_file(tmp_path, contents, type, sep, expected):
    filename = tmp_path / "values.txt"
    filename.write_text(contents)
    assert ValuesFile(str(filename), type=type, sep=sep) == expected


def test_values_file_gz(tmp_path):
    filename = str(tmp_path / "values.txt.gz")
    with gzip.open(filename, "wt") as fw:
        fw.write("4 3 2 1\n")
    assert ValuesFile(filename) == [4, 3, 2, 1]


def test_values_file_bad_value(tmp_path):
    filename = tmp_path / "values.txt"
    filename.write_text("1\n2\nthree\n")
    with pytest.raises(ValueError, match="line 3"):
        ValuesFile(str(filename))


def test_must_open_stdio():
    import sys

    assert must_open("-") is sys.stdin
    assert must_open("stdout", "w") is sys.stdout
    with pytest.raises(AssertionError):
        must_open("stdout")


def test_write_values(capsys):
    import sys

    write_values(sys.stdout, "kept", [1, 2, 3])
    write_values(sys.stdout, "removed", [], sep=",")
    out, _ = capsys.readouterr()
    assert out.splitlines() == ["kept: 1 2 3", "removed: "]


def test_values_file_closed_on_bad_value(monkeypatch):
    import io

    import lnds.formats.base as base

    fp = io.StringIO("1\n2\nthree\n4\n")
    monkeypatch.setattr(base, "must_open", lambda filename: fp)
    with pytest.raises(ValueError, match="line 3"):
        ValuesFile("values.txt")
    assert fp.closed
