#!/usr/bin/env python3

# Count the valid phone numbers that can be dialled by moving
# a chess knight around a telephone keypad.
#
#   1 2 3
#   4 5 6
#   7 8 9
#   _ 0 _
#
# A valid phone number may not start with 0 or 1, and every
# digit after the first must be a knight move (an L shape)
# away from the digit before it.

import logging
from optparse import OptionParser

import pandas as pd

logger = logging.getLogger(__name__)

# Allowed knight moves from every key on the pad.
# 5 is a dead end - no L shape leaves the centre key.
KNIGHT_MOVES = {0: (4, 6),
                1: (6, 8),
                2: (7, 9),
                3: (4, 8),
                4: (0, 3, 9),
                5: (),
                6: (0, 1, 7),
                7: (2, 6),
                8: (1, 3),
                9: (2, 4)}

DIGITS = tuple(range(10))
START_DIGITS = tuple(range(2, 10))

REPORT_LENGTHS = range(1, 11)
REPORT_FORMAT = 'number of valid phone numbers of length: {} is {}'


class SequenceCounter:
    """Counts knight-move phone numbers without generating them.

    Working up from single digit numbers, row L holds one count per
    key on the pad.  A key's count in row L is the sum of the counts
    in row L-1 of every key a knight can reach from it, so only the
    previous row is ever needed to build the next one.  Because knight
    moves are symmetric the sum of row L is the number of valid
    phone numbers L digits long.
    """

    __moves = KNIGHT_MOVES

    def __baseRow(self):
        # Every start digit is a complete 1-digit number on its own
        return [1 if digit in START_DIGITS else 0 for digit in DIGITS]

    def __accumulate(self, previousRow, nextRow):
        # Zero first - nextRow still holds the last iteration's counts
        for i in DIGITS:
            nextRow[i] = 0
        for i in DIGITS:
            for v in self.__moves[i]:
                nextRow[i] += previousRow[v]
        previousRow[:] = nextRow

    def count(self, sequenceLength):
        """Return the number of valid phone numbers sequenceLength digits long.

        Non-positive lengths have no valid phone numbers, so 0 is returned.
        """
        if sequenceLength < 1:
            return 0

        previousRow = self.__baseRow()
        nextRow = [0] * len(DIGITS)
        for n in range(1, sequenceLength):
            self.__accumulate(previousRow, nextRow)
            logger.debug('row %d: %s', n + 1, list(previousRow))

        return sum(previousRow)

    def rows(self, maxLength):
        """Yield (length, row) for every length from 1 to maxLength.

        Each row yielded is a copy, so callers may keep them.
        """
        if maxLength < 1:
            return

        previousRow = self.__baseRow()
        nextRow = [0] * len(DIGITS)
        yield 1, list(previousRow)
        for n in range(2, maxLength + 1):
            self.__accumulate(previousRow, nextRow)
            yield n, list(previousRow)


def count(sequenceLength):
    return SequenceCounter().count(sequenceLength)


def rowTable(maxLength):
    """Tabulate the counting rows for lengths 1..maxLength.

    One row per length, one column per key, plus a 'total' column
    which is the number of valid phone numbers of that length.
    """
    lengths = []
    rows = []
    for length, row in SequenceCounter().rows(maxLength):
        lengths.append(length)
        rows.append(row)

    # Counts outgrow int64 past length 52, keep them as Python ints
    table = pd.DataFrame(rows,
                         index=pd.Index(lengths, name='length', dtype='int64'),
                         columns=list(DIGITS),
                         dtype=object)
    table['total'] = pd.Series([sum(row) for row in rows], index=table.index, dtype=object)
    return table


# Generates every phone number from a given starting key.  Far slower
# than SequenceCounter, but it is an independent way of arriving at
# the same answer so it is what we check the counts against.
class PhoneNumber:

    def __init__(self, startPoint, numberLength):
        # True and 2.0 hash like 1 and 2, so check the type too
        if isinstance(startPoint, bool) or not isinstance(startPoint, int) or startPoint not in KNIGHT_MOVES:
            raise ValueError('start point must be a key on the pad (0-9), got %r' % (startPoint,))
        self.__startPoint = startPoint
        # Length of desired phone number
        self.__phoneNumberLength = numberLength

    # We want this class to be iterable.  Each iteration gets its own
    # stem so the same instance can be walked more than once.
    def __iter__(self):
        return self.__walk([self.__startPoint])

    # Recursive generator: extend the stem by every legal move,
    # yield it once it is long enough, then pop the leaf so the
    # stem is as we found it for the next possible move.
    def __walk(self, soFar):
        if len(soFar) == self.__phoneNumberLength:
            yield ''.join(str(num) for num in soFar)
        elif len(soFar) < self.__phoneNumberLength:
            for nextPossibleMove in KNIGHT_MOVES[soFar[-1]]:
                soFar.append(nextPossibleMove)
                for v in self.__walk(soFar):
                    yield v
                soFar.pop()


def allPhoneNumbers(numberLength):
    """Yield every valid phone number numberLength digits long."""
    for startPoint in START_DIGITS:
        for possibleNumber in PhoneNumber(startPoint, numberLength):
            yield possibleNumber


def main(argv=None):
    parser = OptionParser()
    parser.add_option("-v", "--verbose", action="store_true", dest="verbose", default=False,
                      help="Log each counting row to stderr")
    parser.add_option("-t", "--table", action="store_true", dest="table", default=False,
                      help="Also print the counting rows for every length")

    (options, args) = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if options.verbose else logging.WARNING,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')

    counter = SequenceCounter()
    for i in REPORT_LENGTHS:
        print(REPORT_FORMAT.format(i, counter.count(i)))

    if options.table:
        print(rowTable(REPORT_LENGTHS[-1]).to_string())


if __name__ == '__main__':
    main()
