#!/usr/bin/env python3

"""
usage: uniq.py [-h] [-c] [-d] [-u] [-i] [IN_FILE] [OUT_FILE]

drop each line that repeats the line just before it

positional arguments:
  IN_FILE            the file to read (default: stdin)
  OUT_FILE           the file to create or replace (default: stdout)

options:
  -h, --help         show this help message and exit
  -c, --count        prefix each line by the count of its repeats
  -d, --repeated     print only the lines that did repeat
  -u, --unique       print only the lines that didn't repeat
  -i, --ignore-case  compare lines without regard to upper and lower case

quirks:
  adds a "\\n" to the last line, when the last line has no "\\n"
  prints nothing when given both -d and -u, same as bash "uniq -du"
  quits at the first file that won't open, there being no next file to move on to

unsurprising quirks:
  prompts for stdin, like mac bash "grep -R .", unlike bash "uniq"
  drops only adjacent repeats, so 'sort |uniq' to drop all repeats

examples:
  echo $'x\\nx\\nx\\ny' |uniq.py -c
  sort words.txt |uniq.py -d
  uniq.py -c words.txt counts.txt
"""


import sys

import argdoc
import streams


def main(argv):

    args = argdoc.parse_args(argv[1:])
    in_path = args.in_file if args.in_file else "-"

    collapser = AdjacencyCollapser(
        count=bool(args.count),
        repeated=bool(args.repeated),
        unique=bool(args.unique),
        ignore_case=bool(args.ignore_case),
    )

    # Collapse the one input file into the one output file

    streams.prompt_tty_stdin([in_path])

    try:
        uniq_path(in_path, out_path=args.out_file, collapser=collapser)
    except streams.OpenError as exc:
        streams.stderr_print("uniq.py: {}: {}".format(exc.path, exc))
        sys.exit(1)
    except streams.LinewiseError as exc:
        streams.stderr_print("uniq.py: error: {}".format(exc))
        sys.exit(1)


def uniq_path(in_path, out_path, collapser):
    """Open the input, then the output, then copy out each run of lines"""

    incoming = streams.open_source(in_path)
    try:
        with streams.open_sink(out_path) as outgoing:
            lines = streams.read_lines(incoming, path=in_path)
            collapser.collapse(lines, stdout=outgoing, path=out_path)
    finally:
        if in_path != streams.STDIN_PATH:
            incoming.close()


class Run:
    """Hold the first line of a run of equal lines, and count the run"""

    def __init__(self, line, key):
        self.line = line
        self.key = key
        self.count = 1


class AdjacencyCollapser:
    """Collapse each run of adjacent equal lines into its first line"""

    def __init__(self, count=False, repeated=False, unique=False, ignore_case=False):

        self.count = count
        self.repeated = repeated
        self.unique = unique
        self.ignore_case = ignore_case

    def key(self, line):
        """Pick out what to compare:  the line without its "\n", maybe casefolded"""

        trimmed = line.trimmed
        if self.ignore_case:
            trimmed = trimmed.casefold()

        return trimmed

    def collapse(self, lines, stdout, path=None):
        """Copy out one line per run, flushing each run when the next line differs"""

        run = None
        for line in lines:
            key = self.key(line)
            if run and (run.key == key):
                run.count += 1
            else:
                if run:
                    self.flush(run, stdout=stdout, path=path)
                run = Run(line, key=key)

        if run:
            self.flush(run, stdout=stdout, path=path)

    def flush(self, run, stdout, path=None):
        """Write out the first line of the run, if the -d and -u filters allow"""

        if self.repeated and (run.count < 2):
            return
        if self.unique and (run.count > 1):
            return

        chars = run.line.text
        if chars and not run.line.terminated:
            chars += "\n"  # close the last line, even when the input didn't

        if self.count:
            chars = "{:>7} ".format(run.count) + chars

        streams.write_chars(stdout, chars=chars, path=path)


if __name__ == "__main__":
    with streams.BrokenPipeErrorSink():
        sys.exit(main(sys.argv))
