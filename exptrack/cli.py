import argparse

from exptrack import config
from exptrack.core.engine import TrackerEngine
from exptrack.storage.memory_store import MemoryTransactionStore

from exptrack.app import shell as shell_cmd
from exptrack.app.console import ConsoleView


def build_parser():
    parser = argparse.ArgumentParser(
        prog="exptrack",
        description="exptrack — a small interactive expense ledger",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="""
Examples:
  exptrack
  exptrack shell
  exptrack web --port 8000

Tips:
- Inside the shell, type 'help' for the list of commands
- 'filter category food' then 'apply' highlights matching rows
"""
    )

    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="Override logging.level from config.yaml (DEBUG, INFO, ...)"
    )

    subparsers = parser.add_subparsers(dest="command")

    # -------- SHELL --------
    subparsers.add_parser(
        "shell",
        aliases=["sh"],
        help="Interactive ledger shell (default)"
    )

    # -------- WEB --------
    web = subparsers.add_parser(
        "web",
        help="Serve the JSON API"
    )
    web.add_argument("--host", default=config.get("web.host", "127.0.0.1"))
    web.add_argument("--port", type=int, default=config.get("web.port", 5000))

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    config.configure_logging(args.log_level)

    # ==================================================
    # COMMAND DISPATCH
    # ==================================================

    if args.command in (None, "shell", "sh"):
        store = MemoryTransactionStore()
        view = ConsoleView()
        engine = TrackerEngine(store, view)
        print("exptrack — type 'help' for commands.")
        shell_cmd.run(engine, view)

    elif args.command == "web":
        from exptrack.web_ui import create_app

        create_app().run(host=args.host, port=args.port, debug=config.get("web.debug", False))


if __name__ == "__main__":
    main()
