import enum
import os
from pathlib import Path
from typing import NamedTuple, Tuple

HELP_FLAGS = ("-h", "--help")
VERBOSE_FLAGS = ("-v", "--verbose")

HELP_TEXT = """
fix-skin: primitively adjust DDNet skins so that they will no longer error in the client
Usage:
    fix-skin [-h|--help] [-v|--verbose] file:input file:output

Options:
    -h, --help     show this text and exit
    -v, --verbose  log each step of the conversion

Return codes:
   -*: Incorrect invocation
    0: Success
    1: Process error
"""


class InvocationStatus(enum.IntEnum):
    OK = 0
    TOO_FEW_ARGS = 1
    TOO_MANY_ARGS = 2
    INPUT_MISSING = 3
    OUTPUT_DIR_MISSING = 4
    OUTPUT_EXISTS = 5
    UNKNOWN_ARGUMENT = 6
    HELP_REQUESTED = 7


MESSAGES = {
    InvocationStatus.TOO_FEW_ARGS: "Not enough arguments.",
    InvocationStatus.TOO_MANY_ARGS: "Too many arguments.",
    InvocationStatus.INPUT_MISSING: "Input file is inaccessible or does not exist.",
    InvocationStatus.OUTPUT_DIR_MISSING: "Output file directory is unreadable or does not exist.",
    InvocationStatus.OUTPUT_EXISTS: "Output file already exists.",
    InvocationStatus.UNKNOWN_ARGUMENT: "Unrecognized argument given where a file path was expected.",
}


class ParsedArguments(NamedTuple):
    input_path: str = ""
    output_path: str = ""
    verbose: bool = False
    help_requested: bool = False
    unknown_tokens: Tuple[str, ...] = ()


def message_for(status):
    return MESSAGES.get(InvocationStatus(status), "")


def parse(args):
    positional = []
    unknown = []
    verbose = False
    help_requested = False
    for arg in args:
        if not arg.startswith("-"):
            positional.append(arg)
        elif arg in HELP_FLAGS:
            help_requested = True
        elif arg in VERBOSE_FLAGS:
            verbose = True
        else:
            unknown.append(arg)

    parsed = ParsedArguments(
        input_path=positional[0] if len(positional) > 0 else "",
        output_path=positional[1] if len(positional) > 1 else "",
        verbose=verbose,
        help_requested=help_requested,
        unknown_tokens=tuple(unknown),
    )
    return parsed, len(positional)


def validate(args):
    """
    Classify the process arguments (program name excluded).

    Returns (status, parsed). Only existence checks touch the filesystem.
    """
    parsed, count = parse(args)

    if parsed.help_requested:
        return InvocationStatus.HELP_REQUESTED, parsed
    if count < 2:
        if parsed.unknown_tokens and count + len(parsed.unknown_tokens) >= 2:
            return InvocationStatus.UNKNOWN_ARGUMENT, parsed
        return InvocationStatus.TOO_FEW_ARGS, parsed
    if count > 2:
        return InvocationStatus.TOO_MANY_ARGS, parsed

    if not os.path.exists(parsed.input_path):
        return InvocationStatus.INPUT_MISSING, parsed
    # Path("out.png").parent is "."
    if not Path(parsed.output_path).parent.is_dir():
        return InvocationStatus.OUTPUT_DIR_MISSING, parsed
    if os.path.lexists(parsed.output_path):
        return InvocationStatus.OUTPUT_EXISTS, parsed

    return InvocationStatus.OK, parsed
