#!/usr/bin/python3
# -*- encoding: utf-8 -*-

"""
Constants shared by the day code derivation.
"""

import C19X.ExternalFunctions as ExtFunc

#: Reference time for counting days
EPOCH = "2020-01-01T00:00:00+0000"

#: EPOCH in seconds since the UNIX epoch
EPOCH_SECONDS = ExtFunc.iso2uetime(EPOCH)

#: Seconds in a day
SECONDS_PER_DAY = 24 * 60 * 60

#: Number of days covered by a day code table
HORIZON_DAYS = 365 * 5
