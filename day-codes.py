#!/usr/bin/python3
# -*- encoding: utf-8 -*-

import sys
import time
import logging
import C19X.ExternalFunctions as ExtFunc
from C19X.DayCodes import DayCodeTable
from C19X.Errors import DayOutOfRangeError


# main function
if __name__ == '__main__':

    if len(sys.argv) < 2:
        print("usage: %s <secret-file> [<unix-time>]" % (sys.argv[0]))
        exit(1)

    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # shared secret as agreed with the server on registration
    with open(sys.argv[1], 'rb') as fd:
        shared_secret = fd.read()

    tepoch = time.time()
    if len(sys.argv) == 3:
        tepoch = float(sys.argv[2])

    day_codes = DayCodeTable(shared_secret)

    try:
        seed, day = day_codes.seed(tepoch)
    except DayOutOfRangeError as e:
        print("No day code for %s: %s" % (ExtFunc.uetime2str(tepoch), e))
        exit(1)

    print("Time:     %s" % (ExtFunc.uetime2str(tepoch)))
    print("Day:      %d" % (day))
    print("Day code: %d" % (day_codes.day_code(tepoch)))
    print("Seed:     %d" % (seed))
