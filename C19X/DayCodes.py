#!/usr/bin/python3
# -*- encoding: utf-8 -*-

"""
Day codes are derived from a shared secret agreed with the central server on
registration. The hash of the shared secret is hashed again and again, and the
hashes are used in reverse order: the last day of the table gets the first
hash, day 0 gets the last one. Knowing the code of one day does not give away
the codes of the days after it, those were computed earlier in the chain.

A day code is the first eight bytes of a hash read as a big-endian signed long.
A beacon code seed is the same truncation of the hash of the day code bytes in
reverse order.
"""

import logging
import numbers
import numpy

import C19X.Config as Config
import C19X.ExternalFunctions as ExtFunc
from C19X.Errors import DayOutOfRangeError, InvalidHorizonError

logger = logging.getLogger(__name__)


def day_codes(shared_secret, days):

    if isinstance(days, bool) or not isinstance(days, int) or days <= 0:
        raise InvalidHorizonError("Horizon must be a positive number of days, got %r" % (days,))

    values = numpy.zeros(days, dtype=numpy.int64)

    digest = ExtFunc.sha(shared_secret)
    for i in reversed(range(days)):
        values[i] = ExtFunc.byte_array_to_long(digest)
        digest = ExtFunc.sha(digest)

    return values


def beacon_code_seed(day_code):
    data = ExtFunc.long_to_byte_array(day_code)
    return ExtFunc.byte_array_to_long(ExtFunc.sha(data[::-1]))


class DayCodeTable:
    """
    Precomputed day codes for `horizon_days` days starting at Config.EPOCH.

    The table is read-only once built. Lookups raise DayOutOfRangeError for
    timestamps before the epoch or past the last day of the table.
    """

    def __init__(self, shared_secret, horizon_days=Config.HORIZON_DAYS):
        self._epoch = Config.EPOCH_SECONDS
        self._values = day_codes(shared_secret, horizon_days)
        self._values.flags.writeable = False
        logger.debug("Built day code table for %d days from %s",
                     horizon_days, ExtFunc.uetime2str(self._epoch))

    def __len__(self):
        return len(self._values)

    @property
    def horizon_days(self):
        return len(self._values)

    @property
    def epoch(self):
        return self._epoch

    @property
    def values(self):
        return self._values.view()

    def _out_of_range(self, day):
        logger.critical("Day out of range: %d not in [0, %d)", day, self.horizon_days)
        return DayOutOfRangeError(day, self.horizon_days)

    def day(self, timestamp):
        elapsed = ExtFunc.timestamp2uetime(timestamp) - self._epoch

        # before the epoch is never day 0
        if elapsed < 0:
            raise self._out_of_range(elapsed // Config.SECONDS_PER_DAY)

        day = elapsed // Config.SECONDS_PER_DAY
        if day >= self.horizon_days:
            raise self._out_of_range(day)

        return day

    def code_for_day(self, day):
        if isinstance(day, bool) or not isinstance(day, numbers.Integral):
            raise TypeError("Day must be an integer, got %r" % (day,))
        if day < 0 or day >= self.horizon_days:
            raise self._out_of_range(day)
        return int(self._values[day])

    def day_code(self, timestamp):
        return int(self._values[self.day(timestamp)])

    get = day_code

    def seed(self, timestamp):
        """Beacon code seed and day for a timestamp, as a (seed, day) tuple."""
        day = self.day(timestamp)
        return beacon_code_seed(int(self._values[day])), day
