#!/usr/bin/env python3

"""
usage: head.py [-h] [-n COUNT] [-c COUNT] [FILE ...]

show just the leading lines (or bytes) of each file

positional arguments:
  FILE                  the file to drop trailing lines from (default: stdin)

options:
  -h, --help            show this help message and exit
  -n COUNT, --lines COUNT
                        how many leading lines to show (default: 10)
  -c COUNT, --bytes COUNT
                        how many leading bytes to show, in place of lines

quirks:
  takes a count ended by b, kB, K, MB, M, GB, G, ... Q, or KiB, MiB, ... QiB
  shows bytes, not lines, when given both -c and -n
  rejects a count of zero, and rejects a count led by "-" or "+"

unsurprising quirks:
  prompts for stdin, like mac bash "grep -R .", unlike bash "head"
  takes file "-" as meaning stdin, like linux "head -", unlike mac "head -"
  heads each file with '==> FILE <==' when given more than one file

examples:
  head.py /dev/null
  head.py head.py
  head.py -n 5 head.py
  head.py -c 1K head.py |wc.py -c
  head.py -n 3 head.py wc.py
"""


import re
import sys

import argdoc
import streams


DEFAULT_COUNT = 10


def form_suffix_multipliers():
    """Map b to 512, kB to 1000, K and KiB to 1024, and so on up through Q"""

    multipliers = dict(b=512, kB=1000)
    for (index, letter) in enumerate("KMGTPEZYRQ"):
        multipliers["{}B".format(letter)] = 1000 ** (1 + index)
        multipliers[letter] = 1024 ** (1 + index)
        multipliers["{}iB".format(letter)] = 1024 ** (1 + index)

    return multipliers


SUFFIX_MULTIPLIERS = form_suffix_multipliers()


def main(argv):

    args = argdoc.parse_args(argv[1:])
    paths = args.files if args.files else ["-"]

    try:
        extractor = BoundedExtractor.from_args(args)
    except streams.ConfigError as exc:
        streams.stderr_print("head.py: error: {}".format(exc))
        sys.exit(2)  # exit 2 to reject usage

    # Show the head of each file, but skip past each file that won't open

    streams.prompt_tty_stdin(paths)

    try:
        head_paths(paths, extractor=extractor, stdout=sys.stdout)
    except streams.LinewiseError as exc:
        streams.stderr_print("head.py: error: {}".format(exc))
        sys.exit(1)


def head_paths(paths, extractor, stdout):
    """Show the head of each file, led by a header when more than one file"""

    headed = len(paths) > 1
    headers = 0

    for source in streams.resolve_sources(paths):
        if source.error:
            streams.stderr_print(
                "head.py: cannot open '{}' for reading: {}".format(
                    source.path, source.error
                )
            )

            continue

        if headed:
            name = "standard input" if (source.path == "-") else source.path
            header = "==> {} <==\n".format(name)
            if headers:
                header = "\n" + header
            streams.write_chars(stdout, chars=header)
            headers += 1

        extractor.extract(source.incoming, stdout=stdout, path=source.path)

    return headers


class BoundedExtractor:
    """Copy out just the first few lines, or the first few bytes"""

    def __init__(self, lines=DEFAULT_COUNT, bytes_=None):

        self.lines = lines
        self.bytes_ = bytes_

    @classmethod
    def from_args(cls, args):

        lines = DEFAULT_COUNT
        if args.lines is not None:
            lines = parse_count(args.lines)

        bytes_ = None
        if args.bytes is not None:
            bytes_ = parse_count(args.bytes)

        extractor = cls(lines=lines, bytes_=bytes_)

        return extractor

    def extract(self, incoming, stdout, path=None):
        """Copy out the bounded head of one stream"""

        if self.bytes_ is not None:
            chunks = streams.read_chunks(incoming, count=self.bytes_, path=path)
            for chars in streams.decode_chunks(chunks):
                streams.write_chars(stdout, chars=chars)

            return

        if self.lines:
            lines = streams.read_lines(incoming, path=path)
            for (index, line) in enumerate(lines):
                streams.write_chars(stdout, chars=line.text)
                if (index + 1) >= self.lines:
                    break


def parse_count(chars):
    """Take a positive int, with an optional multiplier suffix, else raise ConfigError"""

    match = re.match(r"^([0-9]+)([A-Za-z]*)$", string=chars.strip())
    if not match:
        raise streams.ConfigError("invalid count: {!r}".format(chars))

    (digits, suffix) = match.groups()

    multiplier = 1
    if suffix:
        if suffix not in SUFFIX_MULTIPLIERS.keys():
            raise streams.ConfigError("invalid count suffix: {!r}".format(chars))
        multiplier = SUFFIX_MULTIPLIERS[suffix]

    count = int(digits) * multiplier
    if not count:
        raise streams.ConfigError("count must be positive, not: {!r}".format(chars))

    return count


if __name__ == "__main__":
    with streams.BrokenPipeErrorSink():
        sys.exit(main(sys.argv))
