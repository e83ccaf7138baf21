#!/usr/bin/python3
# -*- encoding: utf-8 -*-


class DayCodeError(Exception):
    """Base exception for day code operations."""
    pass


class DayOutOfRangeError(DayCodeError):
    """Raised when a timestamp or day falls outside the day code table."""

    def __init__(self, day, horizon_days):
        super().__init__("Day %d out of range [0, %d)" % (day, horizon_days))
        self.day = day
        self.horizon_days = horizon_days


class InvalidHorizonError(DayCodeError, ValueError):
    """Raised when a day code table is built with a non-positive horizon."""
    pass
