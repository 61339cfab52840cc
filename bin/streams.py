#!/usr/bin/env python3

"""
Open each input file (or stdin), and split its bytes into lines, for the line tools

Every tool here runs the same pipeline:  resolve a path into a Source, read Lines
from it, transform them, write them out.  Only the pattern is shared, no state is
"""


import codecs
import collections
import contextlib
import os
import sys


STDIN_PATH = "-"

CHUNK_SIZE = 64 * 1024


#
# Sort the errors into those we skip past, and those that stop the run
#


class LinewiseError(Exception):
    """Fail a run of a line tool"""


class OpenError(LinewiseError):
    """Fail to open a path as a readable (or writable) stream"""

    def __init__(self, path, cause):
        super(OpenError, self).__init__(path, cause)
        self.path = path
        self.cause = cause

    def __str__(self):
        return oserror_reason(self.cause)


class IoError(LinewiseError):
    """Fail to read (or write) a stream after it did open"""

    def __init__(self, path, cause):
        super(IoError, self).__init__(path, cause)
        self.path = path
        self.cause = cause

    def __str__(self):
        return "{}: {}".format(self.path, oserror_reason(self.cause))


class ConfigError(LinewiseError):
    """Reject the options before reading any input"""


def oserror_reason(exc):
    """Say why the OSError happened, like 'No such file or directory'"""

    reason = getattr(exc, "strerror", None)
    if not reason:
        reason = str(exc)

    return reason


#
# Resolve each path into a readable byte stream
#


Source = collections.namedtuple("Source", "path incoming error".split())


def open_source(path):
    """Open a path as a readable binary stream, else raise OpenError"""

    if path == STDIN_PATH:
        return sys.stdin.buffer  # never consult the filesystem for "-"

    try:
        incoming = open(path, "rb")  # pylint: disable=consider-using-with
    except OSError as exc:
        raise OpenError(path, cause=exc) from exc

    return incoming


def resolve_sources(paths):
    """Yield one Source per path, opening each just before its turn, closing it after"""

    for path in paths:

        try:
            incoming = open_source(path)
        except OpenError as exc:
            yield Source(path, incoming=None, error=exc)

            continue

        try:
            yield Source(path, incoming=incoming, error=None)
        finally:
            if path != STDIN_PATH:
                incoming.close()


def open_sink(path):
    """Open a path as a writable text stream (created or truncated), else stdout"""

    if (path is None) or (path == STDIN_PATH):
        return contextlib.nullcontext(sys.stdout)

    try:
        outgoing = open(path, "w", encoding="utf-8")  # pylint: disable=consider-using-with
    except OSError as exc:
        raise OpenError(path, cause=exc) from exc

    return outgoing


#
# Split a byte stream into lines, keeping each "\n" terminator
#


class Line(collections.namedtuple("Line", "raw text".split())):
    """Hold the bytes of one line, and the chars decoded from them"""

    __slots__ = ()

    @property
    def terminated(self):
        return self.raw.endswith(b"\n")

    @property
    def trimmed(self):
        """Drop the "\n" terminator, if any, for comparing lines"""

        if self.text.endswith("\n"):
            return self.text[: -len("\n")]

        return self.text

    @property
    def blank(self):
        return not self.trimmed


def decode_bytes(raw):
    """Decode as UTF-8, but never raise UnicodeDecodeError"""

    text = raw.decode("utf-8", errors="replace")
    # \uFFFD Replacement Character, in place of raising UnicodeDecodeError
    # per https://unicode.org/charts/PDF/UFFF0.pdf

    return text


def read_lines(incoming, path=None):
    """Yield each Line of the stream, till end-of-stream"""

    while True:

        try:
            raw = incoming.readline()
        except OSError as exc:
            raise IoError(path, cause=exc) from exc

        if not raw:
            break

        yield Line(raw, text=decode_bytes(raw))


def read_chunks(incoming, count, path=None):
    """Yield up to the count of bytes, chunk by chunk, but stop at end-of-stream"""

    length = 0
    while length < count:

        try:
            chunk = incoming.read(min(count - length, CHUNK_SIZE))
        except OSError as exc:
            raise IoError(path, cause=exc) from exc

        if not chunk:
            break

        yield chunk
        length += len(chunk)


def decode_chunks(chunks):
    """Decode chunks as UTF-8, without splitting a char across two chunks"""

    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    for chunk in chunks:
        text = decoder.decode(chunk)
        if text:
            yield text

    text = decoder.decode(b"", final=True)
    if text:
        yield text


def write_chars(outgoing, chars, path=None):
    """Write chars out, but raise IoError in place of the OSError"""

    try:
        outgoing.write(chars)
    except BrokenPipeError:
        raise
    except OSError as exc:
        raise IoError(path, cause=exc) from exc


#
# Define some Python idioms
#


# deffed in many files  # missing from docs.python.org
def prompt_tty_stdin(paths):
    if STDIN_PATH in paths:
        if sys.stdin.isatty():
            stderr_print("Press ⌃D EOF to quit")


# deffed in many files  # missing from docs.python.org
def stderr_print(*args, **kwargs):
    sys.stdout.flush()
    print(*args, **kwargs, file=sys.stderr)
    sys.stderr.flush()  # esp. when kwargs["end"] != "\n"


# deffed in many files  # missing from docs.python.org
class BrokenPipeErrorSink(contextlib.ContextDecorator):
    """Cut unhandled BrokenPipeError down to sys.exit(1)

    Test with large Stdout cut sharply, such as:  cat.py /usr/share/dict/words |head.py

    More narrowly than:  signal.signal(signal.SIGPIPE, handler=signal.SIG_DFL)
    As per https://docs.python.org/3/library/signal.html#note-on-sigpipe
    """

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        (exc_type, exc, exc_traceback) = exc_info
        if isinstance(exc, BrokenPipeError):  # catch this one

            null_fileno = os.open(os.devnull, flags=os.O_WRONLY)
            os.dup2(null_fileno, sys.stdout.fileno())  # avoid the next one

            sys.exit(1)
