#!/usr/bin/env python
# -*- coding: UTF-8 -*-
"""
Command-line scaffolding shared by the scripts: logging, option parsing and action dispatch.
"""

from lnds.apps.base import dmain


if __name__ == "__main__":
    dmain(__file__)
