#!/usr/bin/env python3

r"""
usage: echo.py [-h] [-n] [WORD ...]

print some words

positional arguments:
  WORD        a word to print

options:
  -h, --help  show this help message and exit
  -n          print just the words, don't add an end-of-line

quirks:
  understands "-n" like bash or zsh echo, unlike sh echo
  doesn't take "\n" and such as escapes, like bash "echo", unlike bash "echo -e"

examples:
  echo.py 'Hello, Echo World!'
  echo.py -n 'a b' |wc.py -c
  echo.py x x y |tr ' ' '\n' |uniq.py -c
"""


import sys

import argdoc
import streams


def main(argv):

    args = argdoc.parse_args(argv[1:])

    end = "" if args.n else "\n"

    try:
        echo_words(args.words, end=end, stdout=sys.stdout)
    except streams.LinewiseError as exc:
        streams.stderr_print("echo.py: error: {}".format(exc))
        sys.exit(1)


def echo_words(words, end, stdout):
    """Join the words by single spaces, and end the line, or don't"""

    line = " ".join(words) + end
    streams.write_chars(stdout, chars=line)

    return line


if __name__ == "__main__":
    with streams.BrokenPipeErrorSink():
        sys.exit(main(sys.argv))
