#!/usr/bin/env python
# -*- coding: UTF-8 -*-

"""
Longest non-decreasing subsequence, split a list into sorted and out-of-place elements.

Given a list, find which elements have to be removed so that the remaining
shorter list is sorted. This is the longest increasing subsequence problem,
relaxed so that equal elements may follow each other.

The method is patience sorting as described by Fredman (1975) and in Knuth,
TAOCP vol. 3, section 5.1.4, Algorithm I: for every subsequence length keep
only the subsequence whose final element is smallest. These "tails" are
always in sorted order, so each new element finds its place by bisection.
One predecessor link per element is enough to rebuild a longest
subsequence afterwards. Worst case O(n log n) comparisons, O(n) when the
input is already sorted.

Elements are ordered by a three-way comparator, cmp(a, b) < 0, == 0 or > 0
when a is less than, equal to or greater than b. The comparator must impose
a total order. This is not checked: a comparator that is not transitive or
not consistent gives an unspecified result.
"""

import sys

from more_itertools import pairwise
from natsort import natsort_keygen

from lnds.apps.base import ActionDispatcher, OptionParser, VALUE_TYPES, logger
from lnds.formats.base import ValuesFile, must_open, write_values
from lnds.utils.cbook import percentage
from lnds.utils.validator import validate_in_choices, validate_in_range

NO_PREDECESSOR = -1


def natural_cmp(a, b):
    """
    Three-way comparison through the elements' own ordering.

    >>> natural_cmp(1, 2), natural_cmp(2, 2), natural_cmp("b", "a")
    (-1, 0, 1)
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def reverse_cmp(cmp):
    return lambda a, b: cmp(b, a)


def cmp_from_key(key=None, reverse=False):
    """
    Turn a sort key, as taken by sorted(), into a three-way comparator.

    >>> cmp = cmp_from_key(len, reverse=True)
    >>> cmp("ab", "abc"), cmp("ab", "cd")
    (1, 0)
    """
    if key is None:
        cmp = natural_cmp
    else:
        cmp = lambda a, b: natural_cmp(key(a), key(b))
    return reverse_cmp(cmp) if reverse else cmp


def get_cmp(type="int", reverse=False):
    """
    Comparator for values parsed as `type`; 'natural' sorts strings the way
    natsort does, so that 'chr2' comes before 'chr10'.
    """
    validate_in_choices(type, VALUE_TYPES, tag="Value type")
    key = natsort_keygen() if type == "natural" else None
    return cmp_from_key(key, reverse=reverse)


def bisect_right(vs, target, cmp, lo=0, hi=None):
    """
    Return the position where target should be inserted in sorted vs. If
    target is already present, the position is one past the final existing
    occurrence, so it never points at an element equal to target.

    cmp(v, target) compares an entry of vs against target, which lets vs hold
    positions that stand for the elements being compared.

    >>> bisect_right([1, 2, 2, 2, 5], 2, natural_cmp)
    4
    >>> bisect_right([1, 2, 2, 2, 5], 0, natural_cmp)
    0
    >>> bisect_right([1, 2, 2, 2, 5], 2, natural_cmp, hi=2)
    2
    """
    if hi is None:
        hi = len(vs)
    while lo < hi:
        mid = (lo + hi) // 2
        if cmp(vs[mid], target) > 0:
            hi = mid
        else:
            lo = mid + 1
    return lo


def bisect_left(vs, target, cmp, lo=0, hi=None):
    """
    Return the leftmost position in sorted vs whose entry is not less than
    target.

    >>> bisect_left([1, 2, 2, 2, 5], 2, natural_cmp)
    1
    >>> bisect_left([1, 2, 2, 2, 5], 6, natural_cmp)
    5
    """
    if hi is None:
        hi = len(vs)
    while lo < hi:
        mid = (lo + hi) // 2
        if cmp(vs[mid], target) < 0:
            lo = mid + 1
        else:
            hi = mid
    return lo


def patience(xs, cmp=None, strict=False):
    """
    Run the patience pass over xs and return (tails, prev).

    tails[k] is the position in xs of the smallest element that ends a
    subsequence of length k + 1. prev[i] is the position of the element
    before xs[i] in that subsequence, or NO_PREDECESSOR if xs[i] starts it.
    prev[i] is only meaningful for positions that were ever stored in tails.

    With strict=True equal elements cannot follow each other, which gives
    the longest strictly increasing subsequence instead.

    >>> patience([3, 1, 2, 2, 0])
    ([4, 2, 3], [-1, -1, 1, 2, -1])
    >>> patience([3, 1, 2, 2, 0], strict=True)
    ([4, 3], [-1, -1, 1, 1, -1])
    """
    cmp = cmp or natural_cmp
    n = len(xs)
    tails = []
    prev = [NO_PREDECESSOR] * n
    if not n:
        return tails, prev

    search = bisect_left if strict else bisect_right
    position_cmp = lambda j, x: cmp(xs[j], x)

    tails.append(0)
    for i in range(1, n):
        x = xs[i]
        best = tails[-1]
        c = cmp(x, xs[best])
        if c > 0 or (c == 0 and not strict):
            # Fast path: x extends the longest known subsequence
            prev[i] = best
            tails.append(i)
            continue

        # x can only end a shorter subsequence. xs[tails[-1]] is known to
        # be greater than x, so it is left out of the search and r is
        # always an existing slot. Without strict, the search runs past
        # tails equal to x so that ties extend each other.
        r = search(tails, x, position_cmp, hi=len(tails) - 1)
        prev[i] = tails[r - 1] if r else NO_PREDECESSOR
        tails[r] = i

    return tails, prev


def backtrack(xs, tails, prev):
    """
    Walk the predecessor chain from the final tail backwards together with
    all positions of xs, and return (kept, removed). Both are filled from
    their back end so they come out in the original order.

    >>> xs = [3, 1, 2, 2, 0]
    >>> backtrack(xs, *patience(xs))
    ([1, 2, 2], [3, 0])
    """
    n = len(xs)
    if not n:
        return [], []

    kept = [None] * len(tails)
    removed = [None] * (n - len(tails))
    seq_idx = tails[-1]  # current element of the longest subsequence
    all_idx = n - 1  # current input element
    kept_idx = len(kept) - 1
    removed_idx = len(removed) - 1

    while all_idx >= 0:
        while all_idx >= 0 and seq_idx == all_idx:
            kept[kept_idx] = xs[all_idx]
            seq_idx = prev[seq_idx]
            all_idx -= 1
            kept_idx -= 1

        # seq_idx jumped back past one or more elements that are not on
        # the chain
        while seq_idx < all_idx:
            removed[removed_idx] = xs[all_idx]
            all_idx -= 1
            removed_idx -= 1

    return kept, removed


def partition_unsorted(xs, cmp=None, strict=False):
    """
    Partition xs into a longest non-decreasing subsequence and the rest.
    Both lists keep the original relative order of their elements, and xs
    itself is left untouched. When several longest subsequences exist, any
    one of them may be returned.

    >>> partition_unsorted([1, 2, 3, 4, 3, 2, 1])
    ([1, 2, 3, 3], [4, 2, 1])
    >>> partition_unsorted([2, 1, 3, 4, 3, 6, 3, 5, 8, 3, 7])
    ([1, 3, 3, 3, 3, 7], [2, 4, 6, 5, 8])
    >>> partition_unsorted([])
    ([], [])
    """
    if not isinstance(xs, (list, tuple)):
        xs = list(xs)

    tails, prev = patience(xs, cmp=cmp, strict=strict)
    if len(tails) == len(xs):
        # Input was already sorted
        return list(xs), []

    return backtrack(xs, tails, prev)


def longest_nondecreasing_subsequence(xs, cmp=None):
    """
    >>> longest_nondecreasing_subsequence([4, 3, 2, 1])
    [1]
    """
    return partition_unsorted(xs, cmp=cmp)[0]


def unsorted_elements(xs, cmp=None):
    """
    Elements that have to move elsewhere for xs to become sorted.

    >>> unsorted_elements([4, 3, 2, 1])
    [4, 3, 2]
    """
    return partition_unsorted(xs, cmp=cmp)[1]


def longest_nondecreasing_subseq_length(xs, cmp=None, strict=False):
    """
    >>> longest_nondecreasing_subseq_length([3, 1, 2, 2, 0])
    3
    >>> longest_nondecreasing_subseq_length([3, 1, 2, 2, 0], strict=True)
    2
    """
    if not isinstance(xs, (list, tuple)):
        xs = list(xs)
    tails, _ = patience(xs, cmp=cmp, strict=strict)
    return len(tails)


def longest_nonincreasing_subsequence(xs, cmp=None):
    """
    >>> longest_nonincreasing_subsequence([23, 19, 97, 16, 37, 44, 88, 77, 26])
    [97, 88, 77, 26]
    """
    return partition_unsorted(xs, cmp=reverse_cmp(cmp or natural_cmp))[0]


def longest_increasing_subsequence(xs, cmp=None):
    """
    Strictly increasing: equal elements cannot both be kept.

    >>> longest_increasing_subsequence([1, 2, 2, 3])
    [1, 2, 3]
    """
    return partition_unsorted(xs, cmp=cmp, strict=True)[0]


def longest_monotonic_subsequence(xs, cmp=None):
    """
    The longer of the non-decreasing and non-increasing subsequences,
    preferring non-decreasing on a tie.

    >>> longest_monotonic_subsequence([5, 4, 4, 1, 2])
    [5, 4, 4, 2]
    """
    lnds = longest_nondecreasing_subsequence(xs, cmp=cmp)
    lnis = longest_nonincreasing_subsequence(xs, cmp=cmp)
    if len(lnds) >= len(lnis):
        return lnds
    return lnis


def longest_monotonic_subseq_length(xs, cmp=None, strict=False):
    """Return the length of the longest monotonic subsequence of xs, second
    return value is the difference between non-decreasing and non-increasing
    lengths. With strict=True both directions are strictly monotonic.

    >>> longest_monotonic_subseq_length((4, 5, 1, 2, 3))
    (3, 1)
    >>> longest_monotonic_subseq_length((1, 2, 1))
    (2, 0)
    >>> longest_monotonic_subseq_length((3, 3), strict=True)
    (1, 0)
    """
    cmp = cmp or natural_cmp
    li = longest_nondecreasing_subseq_length(xs, cmp=cmp, strict=strict)
    ld = longest_nondecreasing_subseq_length(xs, cmp=reverse_cmp(cmp), strict=strict)
    return max(li, ld), li - ld


def is_nondecreasing(xs, cmp=None):
    """
    >>> is_nondecreasing([1, 1, 2]), is_nondecreasing([2, 1])
    (True, False)
    """
    cmp = cmp or natural_cmp
    return all(cmp(a, b) <= 0 for a, b in pairwise(xs))


def main():

    actions = (
        ("partition", "split values into longest sorted subsequence and the rest"),
        ("length", "report length of the longest sorted subsequence"),
        ("simulate", "partition a random integer array"),
    )
    p = ActionDispatcher(actions)
    p.dispatch(globals())


def partition(args):
    """
    %prog partition valuesfile

    Split the values in valuesfile into a longest sorted subsequence (kept)
    and the values that would have to move for the whole list to be sorted
    (removed). Values are read one or more per line; use - for stdin.
    """
    p = OptionParser(partition.__doc__)
    p.set_order()
    p.set_sep()
    p.set_outfile()
    p.set_verbose()
    opts, args = p.parse_args(args)

    if len(args) != 1:
        sys.exit(not p.print_help())

    (valuesfile,) = args
    xs = ValuesFile(valuesfile, type=opts.type, sep=opts.sep)
    cmp = get_cmp(opts.type, reverse=opts.reverse)
    kept, removed = partition_unsorted(xs, cmp=cmp, strict=opts.strict)
    logger.info("Removed %s values", percentage(len(removed), len(xs)))

    sep = opts.sep or " "
    fw = must_open(opts.outfile, "w")
    try:
        write_values(fw, "kept", kept, sep=sep)
        write_values(fw, "removed", removed, sep=sep)
    finally:
        if fw is not sys.stdout:
            fw.close()

    return kept, removed


def length(args):
    """
    %prog length valuesfile

    Print the length of the longest sorted subsequence of the values. With
    --monotonic, print the longest monotonic length and the difference
    between non-decreasing and non-increasing lengths.
    """
    p = OptionParser(length.__doc__)
    p.set_order()
    p.add_option(
        "--monotonic",
        default=False,
        action="store_true",
        help="Consider both ascending and descending order",
    )
    p.set_sep()
    p.set_verbose()
    opts, args = p.parse_args(args)

    if len(args) != 1:
        sys.exit(not p.print_help())

    (valuesfile,) = args
    xs = ValuesFile(valuesfile, type=opts.type, sep=opts.sep)
    cmp = get_cmp(opts.type, reverse=opts.reverse)
    if opts.monotonic:
        size, diff = longest_monotonic_subseq_length(xs, cmp=cmp, strict=opts.strict)
        print("{0}\t{1}".format(size, diff))
        return size, diff

    size = longest_nondecreasing_subseq_length(xs, cmp=cmp, strict=opts.strict)
    print(size)
    return size


def simulate(args):
    """
    %prog simulate

    Generate a random integer array and partition it, checking the result.
    """
    import numpy as np

    p = OptionParser(simulate.__doc__)
    p.add_option("--size", default=20, type="int", help="Number of values")
    p.add_option(
        "--maxvalue", default=20, type="int", help="Values are drawn from [0, maxvalue)"
    )
    p.add_option("--seed", default=None, type="int", help="Random seed")
    p.set_verbose()
    opts, args = p.parse_args(args)

    if len(args) != 0:
        sys.exit(not p.print_help())

    validate_in_range(opts.size, 0, tag="Size")
    validate_in_range(opts.maxvalue, 1, tag="Max value")
    rng = np.random.default_rng(opts.seed)
    xs = rng.integers(0, opts.maxvalue, size=opts.size).tolist()
    kept, removed = partition_unsorted(xs)
    print("values:", xs)
    print("kept:", kept)
    print("removed:", removed)

    ok = is_nondecreasing(kept) and len(kept) + len(removed) == len(xs)
    logger.info(
        "Kept %s values, non-decreasing: %s", percentage(len(kept), len(xs)), ok
    )
    return xs, kept, removed


if __name__ == "__main__":
    main()
