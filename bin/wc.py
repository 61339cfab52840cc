#!/usr/bin/env python3

"""
usage: wc.py [-h] [-l] [-w] [-c] [-m] [FILE ...]

count lines and words and bytes and characters

positional arguments:
  FILE         a file to examine (default: stdin)

options:
  -h, --help   show this help message and exit
  -l, --lines  count lines
  -w, --words  count words
  -c, --bytes  count bytes
  -m, --chars  count characters

quirks:
  acts like 'wc -lwc' if called without -l, -w, -c, or -m
  prints the counts in the order lines, words, bytes, chars, whatever the order of options
  pads every count to the digits of the most bytes in any one file
  counts a last line not closed by "\\n" as a line, unlike Bash 'wc'

unsurprising quirks:
  prompts Tty Stdin, like Mac 'grep -R .', unlike Bash 'wc'
  takes '-' as meaning stdin, like Linux 'wc -', unlike Mac 'wc -'
  adds a 'total' line when given more than one file

examples:
  wc.py wc.py
  wc.py -l wc.py head.py
  echo 'a b' |wc.py -w
"""


import collections
import re
import sys

import argdoc
import streams


METRICS = "lines words bytes chars".split()

DEFAULT_METRICS = "lines words bytes".split()

WORD_REGEX = re.compile(r"(?:\S|[\x1C-\x1F])+")
# Python's str.isspace calls the U+001C..U+001F separators space, Unicode White_Space doesn't


Counts = collections.namedtuple("Counts", METRICS)

CountedFile = collections.namedtuple("CountedFile", "path counts".split())


def main(argv):

    args = argdoc.parse_args(argv[1:])
    paths = args.files if args.files else ["-"]

    metrics = list(_ for _ in METRICS if getattr(args, _))
    metrics = metrics if metrics else list(DEFAULT_METRICS)

    # Count each file, but skip past each file that won't open

    streams.prompt_tty_stdin(paths)

    try:
        wc_paths(paths, metrics=metrics, stdout=sys.stdout)
    except streams.LinewiseError as exc:
        streams.stderr_print("wc.py: error: {}".format(exc))
        sys.exit(1)


def wc_paths(paths, metrics, stdout):
    """Count each file, then print a row per file, and a row of totals if many files"""

    counted_files = list()
    for source in streams.resolve_sources(paths):
        if source.error:
            streams.stderr_print("wc.py: {}: {}".format(source.path, source.error))

            continue

        lines = streams.read_lines(source.incoming, path=source.path)
        counts = count_lines(lines)
        counted_files.append(CountedFile(source.path, counts=counts))

    # Pad every count to the digits of the most bytes of any one file

    most_bytes = max((_.counts.bytes for _ in counted_files), default=0)
    width = len(str(most_bytes))

    # Print one row per file

    rows = list()
    for counted_file in counted_files:
        figures = list(getattr(counted_file.counts, _) for _ in metrics)
        if (len(paths) == 1) and (len(metrics) == 1):
            row = str(figures[0])
        else:
            row = " ".join("{:>{}}".format(_, width) for _ in figures)

        suffix = "" if (counted_file.path == "-") else (" " + counted_file.path)
        rows.append(row + suffix + "\n")

    # Print the totals too, if more than one file

    if len(paths) > 1:
        totals = sum_counts(_.counts for _ in counted_files)
        figures = list(getattr(totals, _) for _ in metrics)
        row = " ".join("{:>{}}".format(_, width) for _ in figures)
        rows.append(row + " total\n")

    for row in rows:
        streams.write_chars(stdout, chars=row)

    return counted_files


def count_lines(lines):
    """Count the lines, words, bytes, and chars of one stream of lines"""

    lines_ = 0
    words = 0
    bytes_ = 0
    chars = 0

    for line in lines:
        lines_ += 1
        words += len(WORD_REGEX.findall(line.text))
        bytes_ += len(line.raw)
        chars += len(line.text)

    counts = Counts(lines=lines_, words=words, bytes=bytes_, chars=chars)

    return counts


def sum_counts(many_counts):
    """Add up each metric across many files"""

    totals = Counts(lines=0, words=0, bytes=0, chars=0)
    for counts in many_counts:
        totals = Counts(*(a + b for (a, b) in zip(totals, counts)))

    return totals


if __name__ == "__main__":
    with streams.BrokenPipeErrorSink():
        sys.exit(main(sys.argv))
