import logging
import sys

from skin_args import HELP_TEXT, InvocationStatus, message_for, validate
from skin_image import convert_skin

log = logging.getLogger("fix_skin")


def configure_logging(verbose):
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        stream=sys.stdout,
        level=level,
        format="%(levelname)s: %(message)s",
    )


def print_help(status=InvocationStatus.OK):
    out = sys.stdout
    if status not in (InvocationStatus.OK, InvocationStatus.HELP_REQUESTED):
        out = sys.stderr
        print(message_for(status), file=out)
    print(HELP_TEXT, file=out)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    status, args = validate(argv)
    if status == InvocationStatus.HELP_REQUESTED:
        print_help(status)
        return 0
    if status != InvocationStatus.OK:
        print_help(status)
        return -int(status)

    configure_logging(args.verbose)
    for token in args.unknown_tokens:
        log.warning("Ignoring unknown argument %s", token)

    result = convert_skin(args.input_path, args.output_path)
    if not result.ok:
        print(f"Caught exception: {result.error}", file=sys.stderr)
        print(HELP_TEXT, file=sys.stderr)
        return 1

    log.info("Saved %s (%s -> %s)", args.output_path, result.source, result.target)
    return 0


if __name__ == "__main__":
    sys.exit(main())
