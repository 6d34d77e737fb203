import sys
import argparse

from .policy import digits_only
from .utils import enable_log_forwarding, listen_to_logs


def get_parser():
    parser = argparse.ArgumentParser(
        prog="termmask",
        description="Read a secret from the terminal, showing a mask instead of the typed characters.",
    )
    parser.add_argument("--mask", default="*", help="the mask character (default '*')")
    parser.add_argument("--label", default=None, help="text to show before the input")
    parser.add_argument(
        "--beep", action="store_true", help="beep on every keystroke"
    )
    parser.add_argument(
        "--cancel-on-escape",
        action="store_true",
        help="cancel the input when escape is pressed",
    )
    parser.add_argument(
        "--digits", action="store_true", help="only accept the digits 0-9"
    )
    parser.add_argument(
        "--log", action="store_true", help="forward logs to 'termmask --listen'"
    )
    parser.add_argument(
        "--listen", action="store_true", help="print the logs of other termmask processes"
    )
    parser.add_argument("--version", action="store_true", help="show the version")
    return parser


def cli(argv=None):
    """Entry point of the termmask command. Returns the exit code.

    The captured secret is written to stdout, so it can be used in a pipe or
    command substitution; the prompt itself goes to stderr. A cancelled
    prompt writes nothing and exits with 1.
    """
    from . import __version__
    from ._main import ask_secret

    argv = sys.argv[1:] if argv is None else argv
    args = get_parser().parse_args(argv)

    if args.version:
        print("termmask", __version__)
        return 0
    if args.listen:
        listen_to_logs()
        return 0
    if args.log:
        enable_log_forwarding()

    options = dict(
        mask=args.mask,
        beep=args.beep,
        cancel_on_escape=args.cancel_on_escape,
    )
    if args.digits:
        options["policy"] = digits_only

    try:
        result = ask_secret(args.label, stdout=sys.__stderr__, **options)
    except KeyboardInterrupt:
        return 130

    if result.is_cancelled:
        return 1
    sys.stdout.write(result.text + "\n")
    sys.stdout.flush()
    return 0
