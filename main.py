import csv
import curses
import logging
import os
import sys

import csv_codec
from app_state import initial_model
from config_paths import ensure_config_dirs, load_config
from logging_config import setup_logging
from persistence import JsonFileGateway, MemoryGateway, encode_table, load_table

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

try:
    from _version import __version__
except Exception:
    __version__ = "0.0.0"


USAGE = (
    "csvgrid - terminal grid editor with CSV import/export\n\n"
    "Usage:\n"
    "  csvgrid [store.json] [--memory]\n"
    "  csvgrid [store.json] --import data.csv\n"
    "  csvgrid [store.json] --export out.csv|-\n"
    "  csvgrid -v\n"
    "  csvgrid -h\n"
)

logger = logging.getLogger("csvgrid.main")


class UsageError(Exception):
    pass


def parse_args(args):
    opts = {
        "version": False,
        "help": False,
        "memory": False,
        "import_path": None,
        "export_path": None,
        "store_path": None,
    }
    it = iter(args)
    for arg in it:
        if arg in ("-v", "-V"):
            opts["version"] = True
        elif arg == "-h":
            opts["help"] = True
        elif arg == "--memory":
            opts["memory"] = True
        elif arg in ("--import", "--export"):
            value = next(it, None)
            if value is None:
                raise UsageError(f"{arg} requires a path")
            opts[arg[2:] + "_path"] = value
        elif arg.startswith("-") and arg != "-":
            raise UsageError(f"Unknown option: {arg}")
        elif opts["store_path"] is None:
            opts["store_path"] = arg
        else:
            raise UsageError(f"Unexpected argument: {arg}")
    if opts["import_path"] and opts["export_path"]:
        raise UsageError("--import and --export are mutually exclusive")
    return opts


def import_csv(gateway, csv_path) -> int:
    try:
        with open(csv_path, "r", encoding="utf-8", newline="") as fh:
            text = fh.read()
    except OSError as exc:
        print(f"Import failed: {exc}", file=sys.stderr)
        return 1
    try:
        table = csv_codec.decode(text)
        gateway.save(encode_table(table))
    except (csv.Error, OSError) as exc:
        print(f"Import failed: {exc}", file=sys.stderr)
        return 1
    rows, cols = table.size()
    logger.info("Imported %s (%dx%d)", csv_path, rows, cols)
    return 0


def export_csv(gateway, csv_path) -> int:
    text = csv_codec.encode(load_table(gateway))
    if csv_path == "-":
        sys.stdout.write(text + "\n")
        return 0
    try:
        with open(csv_path, "w", encoding="utf-8", newline="") as fh:
            fh.write(text + "\n")
    except OSError as exc:
        print(f"Export failed: {exc}", file=sys.stderr)
        return 1
    return 0


def main():
    try:
        opts = parse_args(sys.argv[1:])
    except UsageError as exc:
        print(f"{exc}\n\n{USAGE}", file=sys.stderr)
        sys.exit(2)

    if opts["version"]:
        print(__version__)
        return

    if opts["help"]:
        print(USAGE)
        return

    ensure_config_dirs()
    cfg = load_config()
    level = getattr(logging, cfg["LOG_LEVEL"], logging.WARNING)
    interactive = not (opts["import_path"] or opts["export_path"])
    setup_logging(level, log_file=cfg["LOG_FILE"], console=not interactive)

    store_path = opts["store_path"] or cfg["TABLE_PATH"]
    if opts["memory"]:
        gateway = MemoryGateway()
        store_path = None
    else:
        gateway = JsonFileGateway(store_path)

    if opts["import_path"]:
        sys.exit(import_csv(gateway, opts["import_path"]))
    if opts["export_path"]:
        sys.exit(export_csv(gateway, opts["export_path"]))

    model = initial_model(load_table(gateway))

    from orchestrator import Orchestrator

    def curses_main(stdscr):
        Orchestrator(
            stdscr,
            model,
            gateway,
            store_path=store_path,
            editor_command=cfg["EDITOR_COMMAND"],
        ).run()

    curses.wrapper(curses_main)


if __name__ == "__main__":
    main()
