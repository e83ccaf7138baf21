#!/usr/bin/python3
# -*- encoding: utf-8 -*-

import math
import hashlib
import datetime
import numpy

# day codes and beacon code seeds are java longs, read big-endian
LONG_LENGTH = 8
LONG_DTYPE = numpy.dtype('>i8')


def sha(data):
    return hashlib.sha256(bytes(data)).digest()


def truncate(data, len):
    return data[:len]


def byte_array_to_long(digest):
    return int(numpy.frombuffer(truncate(digest, LONG_LENGTH), dtype=LONG_DTYPE)[0])


def long_to_byte_array(value):
    return numpy.array(value, dtype=LONG_DTYPE).tobytes()


def timestamp2uetime(timestamp):
    """
    Whole seconds since the UNIX epoch, rounded down.

    Accepts seconds (int or float) or a datetime; a naive datetime is
    read as UTC.
    """
    if isinstance(timestamp, datetime.datetime):
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=datetime.timezone.utc)
        timestamp = timestamp.timestamp()
    return int(math.floor(timestamp))


# extras

def iso2uetime(text):
    date = datetime.datetime.strptime(text, "%Y-%m-%dT%H:%M:%S%z")
    return int(date.timestamp())


def uetime2str(uetime):
    try:
        date = datetime.datetime.fromtimestamp(uetime, tz=datetime.timezone.utc)
    except (OverflowError, ValueError, OSError):
        # beyond what datetime can represent
        return str(uetime)
    return date.strftime("%Y-%m-%d %H:%M:%S")
