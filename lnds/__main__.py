#!/usr/bin/env python
# -*- coding: UTF-8 -*-
"""
Longest non-decreasing subsequence toolkit: find which elements of a sequence are out of sorted order.
"""

from lnds.apps.base import dmain


if __name__ == "__main__":
    dmain(__file__, type="module")
