#!/usr/bin/env python
# -*- coding: UTF-8 -*-

"""
Validate command-line parameters before any input is read.
"""

from typing import Collection, Optional, Union, TypeVar

ComparableType = Union[int, float]
T = TypeVar("T")


class ValidationError(Exception):
    pass


def validate_in_choices(value: T, choices: Collection[T], tag: str = "Value") -> bool:
    """
    Validate that value is one of the accepted choices, e.g. a value type.

    Returns:
        True if validation passes. Raises ValidationError if it fails
    """
    if value not in choices:
        raise ValidationError(f"{tag} must be one of {choices}, you have: {value}")
    return True


def validate_in_range(
    value: ComparableType,
    min_value: ComparableType,
    max_value: Optional[ComparableType] = None,
    tag: str = "Value",
) -> bool:
    """
    Validate that value is within [min_value, max_value]. A missing max_value
    leaves the range open ended.

    Returns:
        True if validation passes. Raises ValidationError if it fails.
    """
    if value < min_value or (max_value is not None and value > max_value):
        upper = "inf" if max_value is None else max_value
        raise ValidationError(
            f"{tag} must be between [{min_value}, {upper}], you have: {value}"
        )
    return True
