#!/usr/bin/env python
# -*- coding: UTF-8 -*-
"""
Implementations of the subsequence algorithms: patience sorting, LNDS and LIS partitioning.
"""

from lnds.apps.base import dmain


if __name__ == "__main__":
    dmain(__file__)
