"""
Useful recipes for formatting run summaries.
"""


def percentage(a, b, precision=1, mode=0):
    """
    >>> percentage(100, 200)
    '100 of 200 (50.0%)'
    >>> percentage(0, 0)
    '0 of 0 (0.0%)'
    """
    _a, _b = a, b
    ratio = a * 100.0 / b if b else 0.0
    pct = "{0:.{1}f}%".format(ratio, precision)
    a, b = thousands(a), thousands(b)
    if mode == 0:
        return "{0} of {1} ({2})".format(a, b, pct)
    elif mode == 1:
        return "{0} ({1})".format(a, pct)
    elif mode == 2:
        return ratio
    return pct


def thousands(x):
    """
    >>> thousands(12345)
    '12,345'
    >>> thousands(-1234)
    '-1,234'
    """
    s = "%d" % x
    groups = []
    while s and s[-1].isdigit():
        groups.append(s[-3:])
        s = s[:-3]
    return s + ",".join(reversed(groups))
