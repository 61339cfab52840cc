# -*- coding: utf-8 -*-

"""
Parse command line args as per a top-of-file docstring of help lines

Begin the doc with 'usage:', then a paragraph of description, then 'positional
arguments:' and 'options:' paragraphs in the shape that 'argparse --help' prints.
Take all the paragraphs after those, such as 'quirks:' and 'examples:', as the epilog

Quirks:
  plural args go to an english plural key, such as '[FILE ...]' to '.files'
  you lose your '-h' and '--help' options if you drop all your 'options:'
  options without a metavar count up from zero, options with a metavar take a str
"""


import argparse
import inspect
import re
import sys


#
# Work with an ArgumentParser compiled from the DocString of the Calling Module
#


def parse_args(args=None, doc=None):
    """
    Call 'argparse.parse_arg' on a Parser of the calling Module's DocString

    However,
    + work instead from the given Doc, if any
    + print help and exit zero when Args call for Help
    """

    alt_argv = sys.argv[1:] if (args is None) else args

    alt_doc = doc
    if doc is None:
        f = inspect.currentframe()
        alt_doc = module_find_doc(f.f_back)

    parser = ArgumentParser(doc=alt_doc)
    namespace = parser.parse_args(alt_argv)

    return namespace


def module_find_doc(frame):
    """Pick the Doc out of the Module of the Calling Frame"""

    module = inspect.getmodule(frame)
    module_doc = module.__doc__

    return module_doc


class ArgumentParser(argparse.ArgumentParser):
    """Form an ArgumentParser with Args and Options and Epilog, from a Doc"""

    def __init__(self, doc):

        paras = textwrap_split_paras(doc)
        paras = paras if paras[1:] else textwrap_split_paras("usage: prog\n\ndesc")

        # Pick the ArgParse Prog out of the top line

        usage_words = paras[0][0].split()
        prog = usage_words[1] if usage_words[1:] else "prog"

        # Pick the ArgParse Description out of the 2nd Paragraph of Doc

        description = " ".join(_.strip() for _ in paras[1])

        # Take up all the rest of the Doc as the ArgParse Epilog

        epilog = None
        epi = parser_epi_from_doc(doc)
        if epi:
            epilog_at = doc.index(epi)
            epilog = doc[epilog_at:].rstrip()

        # Form an ArgumentParser with Epilog, but begin with no Args and no Options

        super(ArgumentParser, self).__init__(
            prog=prog,
            description=description,
            add_help=parser_add_help_from_doc(doc),
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=epilog,
        )

        # Add zero or more Args and/or Options from the Doc

        parser_adds_from_doc(parser=self, doc=doc)


def parser_add_help_from_doc(doc):
    """Find the conventional H/ Help Option and return True, else False"""

    for line in doc.splitlines():
        rejoined = " ".join(line.split())
        if rejoined.startswith("-h, --help"):

            return True

    return False


def parser_epi_from_doc(doc):
    """Pick the first Line of an ArgParse Epilog out of a Doc"""

    alt_doc = argparse_doc_upgrade(doc)
    paras = textwrap_split_paras(text=alt_doc)

    paras = paras[2:]  # Skip over Usage and Desc

    if paras:
        if paras[0][0].startswith("positional arguments"):

            paras = paras[1:]  # mutate

    if paras:
        if paras[0][0].startswith("options"):

            paras = paras[1:]  # mutate

    if paras:
        epi = paras[0][0]

        return epi

    return None


#
# Rip Add_Argument calls out from the Doc
#


def parser_adds_from_doc(parser, doc):
    """Rip the Add_Argument Calls from Doc of Positional Arguments and/or Options"""

    alt_doc = argparse_doc_upgrade(doc)
    paras = textwrap_split_paras(text=alt_doc)

    # Take one Para of Usage, then skip the Para of Description

    usage = " ".join(paras[0])
    assert usage.startswith("usage: "), repr(usage)
    paras = paras[2:]

    # Take the next Para as Lines of Args, if tagged as Positional Arguments

    if paras:
        if paras[0][0].startswith("positional arguments"):
            for line in textwrap_para_unbreakdent_lines(para=paras[0][1:]):
                parser_add_arg_line(parser, usage=usage, line=line)

            paras = paras[1:]

    # Take the next Para as Lines of Options, if tagged as Options

    if paras:
        if paras[0][0].startswith("options"):
            for line in textwrap_para_unbreakdent_lines(para=paras[0][1:]):
                parser_add_option_line(parser, usage=usage, line=line)


def textwrap_para_unbreakdent_lines(para):
    """Join the continuation lines dented beneath each leading line"""

    above_dent = None

    lines = list()
    for line in para:
        lstripped = line.lstrip()
        dent = line[: -len(lstripped)] if (line != lstripped) else ""

        if lines:
            if len(dent) > len(above_dent):
                lines[-1] += " " + line.strip()

                continue

        lines.append(line)
        above_dent = dent

    return lines

    # such as:  [' a', '    b', ' c']  ->  [' a b', ' c']


def parser_add_arg_line(parser, usage, line):
    """Rip out one Add_Argument Call of a Positional Arg from one Doc Line"""

    words = line.split()
    if not words:

        return

    # Divide the Line into Metavar and Help

    metavar = words[0]
    help_tail = line[line.index(metavar) + len(metavar) :].strip()

    dest = metavar.lower()

    # Take mentions of NArgs ? or NArgs * or NArgs + from Usage

    nargs = None
    if "[{}]".format(metavar) in usage:
        nargs = "?"  # argparse.OPTIONAL
    elif " {} [{} ...]".format(metavar, metavar) in usage:
        dest = plural_en(metavar.lower())  # mutate
        nargs = "+"  # argparse.ONE_OR_MORE
    elif "[{} ...]".format(metavar) in usage:
        dest = plural_en(metavar.lower())  # mutate
        nargs = "*"  # argparse.ZERO_OR_MORE

    # Tell the Parser to add this Arg

    alt_help_tail = help_tail.replace("%", "%%") if help_tail else None
    parser.add_argument(dest, metavar=metavar, nargs=nargs, help=alt_help_tail)


def parser_add_option_line(parser, usage, line):
    """Rip one Add_Argument Call of an Option or two from one Doc Line"""

    # Split off the leading '-x, --ex METAVAR' from the help words that follow

    match = re.match(
        r"^\s*(-[^\s,]+)(?: ([A-Z][A-Z_]*))?(?:, (--[^\s,]+)(?: ([A-Z][A-Z_]*))?)?(.*)$",
        string=line,
    )
    if not match:

        return

    (opt, metavar, long_opt, long_metavar, help_tail) = match.groups()

    dests = [opt] if (long_opt is None) else [opt, long_opt]
    metavar = metavar or long_metavar

    # Take Metavar from Usage, when missing from the Help Line

    if metavar is None:
        for dest in dests:
            usage_match = re.search(
                r"\[{} ([A-Z][A-Z_]*)\]".format(re.escape(dest)), string=usage
            )
            if usage_match:
                metavar = usage_match.group(1)

                break

    # Call victory when Parser Add_Help already did add this Option

    if dests == ["-h", "--help"]:
        if parser.add_help:

            return

    # Tell the Parser to add this Option

    help_tail = help_tail.strip()
    alt_help_tail = help_tail.replace("%", "%%") if help_tail else None

    if metavar is None:
        parser.add_argument(*dests, action="count", default=0, help=alt_help_tail)
    else:
        parser.add_argument(*dests, metavar=metavar, help=alt_help_tail)


# deffed in many files  # missing from docs.python.org
def plural_en(word):
    """Guess the English plural of a word"""

    consonants = "bcdfghjklmnpqrstvwxz"  # without "y"

    if re.match(r"^.*ex$", string=word):
        plural = word[: -len("ex")] + "ices"  # vortex, vortices
    elif re.match(r"^.*f$", string=word):
        plural = word[: -len("f")] + "ves"  # leaf, leaves
    elif re.match(r"^.*is$", string=word):
        plural = word[: -len("is")] + "es"  # basis, bases
    elif re.match(r"^.*ix$", string=word):
        plural = word[: -len("ix")] + "ices"  # appendix, appendices
    elif re.match(r"^.*o$", string=word):
        plural = word + "es"  # tomato, tomatoes
    elif re.match(r"^.*on$", string=word):
        plural = word[: -len("on")] + "a"  # criterion, criteria
    elif re.match(r"^.*[{}]y$".format(consonants), string=word):
        plural = word[: -len("y")] + "ies"  # lorry, lorries
    elif re.match(r"^.*(ch|s|sh|x|z)$", string=word):
        plural = word + "es"  # stitch bus ash box lutz
    else:
        plural = word + "s"  # word, words, file, files

    return plural


# deffed in many files  # missing from docs.python.org
def textwrap_split_paras(text):
    """Divide the Chars into a List of non-empty Lists of possibly dented Lines"""

    if text is None:

        return None

    paras = list()

    para = None
    for line in (text + "\n\n").splitlines():
        if not line.strip():
            if para is not None:
                paras.append(para)
            para = None
        elif not para:
            para = [line]
        else:
            para.append(line)

    assert para is None

    return paras

    # such as:  "  a\n    b\n  c\n"  ->  [['  a', '    b', '  c']]


# deffed in many files  # missing from docs.python.org
def argparse_doc_upgrade(doc):
    """Cut the jitter in Doc from ArgParse evolving across Python 3"""

    alt_doc = doc.strip()

    index = (alt_doc + "\n\n").index("\n\n")  # unwrap the Usage paragraph
    alt_doc = " ".join(_.strip() for _ in alt_doc[:index].splitlines()) + alt_doc[index:]

    pattern = r" \[([A-Z_]+) \[[A-Z_]+ [.][.][.]\]\]"
    alt_doc = re.sub(pattern, repl=r" [\1 ...]", string=alt_doc)

    alt_doc = alt_doc.replace("\noptional arguments:", "\noptions:")

    return alt_doc
