#!/usr/bin/env python
# -*- coding: UTF-8 -*-

import sys

from lnds.apps.base import logger


CASTS = {"int": int, "float": float, "str": str, "natural": str}


class BaseFile(object):
    def __init__(self, filename):

        self.filename = filename
        if filename:
            logger.debug("Load file `%s`", filename)


class ValuesFile(BaseFile, list):
    """
    Ordered values read from a text file, one or more per line.

    Lines starting with `comment` and blank lines are ignored. With sep=None
    a line is split on any run of whitespace; otherwise on `sep`, in which
    case values keep their inner whitespace.
    """

    def __init__(self, filename, type="int", sep=None, comment="#"):

        super(ValuesFile, self).__init__(filename)
        cast = CASTS[type]

        fp = must_open(filename)
        try:
            for lineno, row in enumerate(fp, 1):
                row = row.rstrip("\r\n")
                if not row.strip() or row.startswith(comment):
                    continue
                self.extend(self.parse(row, cast, sep, lineno))
        finally:
            if fp is not sys.stdin:
                fp.close()

        logger.debug("Load %d values from `%s`", len(self), filename)

    def parse(self, row, cast, sep, lineno):
        for atom in row.split(sep):
            if sep is not None:
                atom = atom.strip()
                if not atom:
                    continue
            try:
                yield cast(atom)
            except ValueError:
                raise ValueError(
                    "Cannot parse `{0}` as {1} in `{2}` line {3}".format(
                        atom, cast.__name__, self.filename, lineno
                    )
                )


def must_open(filename, mode="r"):
    """
    Accepts filename and returns filehandle.

    Checks on stdin/stdout/stderr and .gz file.
    """
    if filename in ("-", "stdin"):
        assert "r" in mode
        fp = sys.stdin

    elif filename == "stdout":
        assert "w" in mode
        fp = sys.stdout

    elif filename == "stderr":
        assert "w" in mode
        fp = sys.stderr

    elif filename.endswith(".gz"):
        import gzip

        fp = gzip.open(filename, mode + "t")

    else:
        fp = open(filename, mode)

    return fp


def write_values(fw, tag, values, sep=" "):
    print("{0}: {1}".format(tag, sep.join(str(x) for x in values)), file=fw)
