#!/usr/bin/env python3

r"""
usage: cat.py [-h] [-A] [-b] [-e] [-E] [-n] [-t] [-T] [-u] [-v] [FILE ...]

copy each line of input bytes to output (as if "cat"enating them slowly)

positional arguments:
  FILE                  a file to copy out (default: stdin)

options:
  -h, --help            show this help message and exit
  -A, --show-all        call for -v and -E and -T
  -b, --number-nonblank
                        number each non-empty line of output
  -e                    call for -v and -E
  -E, --show-ends       show each "\n" lf as "$\n"
  -n, --number          number each line of output
  -t                    call for -v and -T
  -T, --show-tabs       show each "\t" tab as "^I"
  -u                    ignored
  -v, --show-nonprinting
                        show c0 controls and bytes past ascii as ^ and M- escapes

quirks:
  does print hard b"\x09" tab after each line number, via "{:>6}\t", same as bash "cat"
  doesn't reset the line number between files, same as bash "cat"
  rejects -n together with -b, unlike bash "cat"
  shows no "$" on a last line that has no "\n", same as bash "cat"

unsurprising quirks:
  prompts for stdin, like mac bash "grep -R .", unlike bash "cat -" and "cat"
  takes file "-" as meaning stdin, like linux "cat -", unlike mac "cat -"

examples:
  cat.py -  # copy out each line of input
  echo a b c |tr ' ' '\n' |bin/cat.py -  # pass stdin through to stdout
  (echo a; echo; echo b) |cat.py -b  # number just the non-blank lines
  (echo a; echo b; echo c) |cat -n |cat.py -etv  # show \t as ^I and \n as $
  echo $'\x5A\xC2\xA0' |cat.py -v  # show &nbsp; Non-Break Space as M-BM-
"""


import sys

import argdoc
import streams


def main(argv):

    args = argdoc.parse_args(argv[1:])
    paths = args.files if args.files else ["-"]

    try:
        annotator = LineAnnotator.from_args(args)
    except streams.ConfigError as exc:
        streams.stderr_print("cat.py: error: {}".format(exc))
        sys.exit(2)  # exit 2 to reject usage

    # Catenate each file, but skip past each file that won't open

    streams.prompt_tty_stdin(paths)

    try:
        cat_paths(paths, annotator=annotator, stdout=sys.stdout)
    except streams.LinewiseError as exc:
        streams.stderr_print("cat.py: error: {}".format(exc))
        sys.exit(1)


def cat_paths(paths, annotator, stdout):
    """Copy out each line of each file, and say which files wouldn't open"""

    numbered = 0  # one count across all the files, never reset

    for source in streams.resolve_sources(paths):
        if source.error:
            streams.stderr_print("cat.py: {}: {}".format(source.path, source.error))

            continue

        lines = streams.read_lines(source.incoming, path=source.path)
        numbered = annotator.annotate_lines(lines, numbered=numbered, stdout=stdout)

    return numbered


class LineAnnotator:
    """Decorate each line with ends, tabs, nonprinting, and numbers, as configured"""

    def __init__(
        self,
        show_ends=False,
        show_tabs=False,
        show_nonprinting=False,
        number=False,
        number_nonblank=False,
    ):

        if number and number_nonblank:
            raise streams.ConfigError(
                "choose -n to number all lines, or -b to number non-blank lines, not both"
            )

        self.show_ends = show_ends
        self.show_tabs = show_tabs
        self.show_nonprinting = show_nonprinting
        self.number = number
        self.number_nonblank = number_nonblank

    @classmethod
    def from_args(cls, args):
        """Fold the -A, -e, -t shorthands into the flags they call for"""

        show_ends = bool(args.show_ends or args.show_all or args.e)
        show_tabs = bool(args.show_tabs or args.show_all or args.t)
        show_nonprinting = bool(
            args.show_nonprinting or args.show_all or args.e or args.t
        )

        annotator = cls(
            show_ends=show_ends,
            show_tabs=show_tabs,
            show_nonprinting=show_nonprinting,
            number=bool(args.number),
            number_nonblank=bool(args.number_nonblank),
        )

        return annotator

    def annotate_lines(self, lines, numbered, stdout):
        """Write each line as it arrives, and return the count of numbered lines"""

        for line in lines:
            (chars, numbered) = self.annotate_line(line, numbered=numbered)
            streams.write_chars(stdout, chars=chars)

        return numbered

    def annotate_line(self, line, numbered):
        """Form one line of output, and count it up if numbered"""

        terminator = "\n" if line.terminated else ""

        if self.show_nonprinting:
            body = cat_repr_bytes(line.raw[: len(line.raw) - len(terminator)])
        else:
            body = line.trimmed

        if self.show_ends and terminator:
            body += "$"

        if self.show_tabs:
            body = body.replace("\t", "^I")

        chars = body + terminator

        if self.number or (self.number_nonblank and not line.blank):
            numbered += 1
            chars = "{:>6}\t".format(numbered) + chars

        return (chars, numbered)


def cat_repr_bytes(raw):
    """Show c0 controls and bytes past ascii as ^ and M- escapes, but not "\t" tab"""

    reps = ""
    for xx in raw:

        rep = ""
        if xx >= 0x80:
            rep = "M-"
            xx -= 0x80

        if xx == ord("\t") and not rep:
            rep += "\t"
        elif xx < ord(" "):
            rep += "^" + chr(xx + ord("@"))  # ^@ ^A ... ^_
        elif xx == 0x7F:
            rep += "^?"
        else:
            rep += chr(xx)

        reps += rep

    return reps


if __name__ == "__main__":
    with streams.BrokenPipeErrorSink():
        sys.exit(main(sys.argv))
