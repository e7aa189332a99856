import json
import logging
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
XDG_DATA_HOME = os.environ.get("XDG_DATA_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
DATA_HOME = XDG_DATA_HOME if XDG_DATA_HOME else os.path.join(HOME, ".local", "share")
CONFIG_DIR = os.path.join(CONFIG_HOME, "csvgrid")
DATA_DIR = os.path.join(DATA_HOME, "csvgrid")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
TABLE_PATH_DEFAULT = os.path.join(DATA_DIR, "table.json")
LOG_LEVEL_DEFAULT = "WARNING"
LOG_FILE_DEFAULT = os.path.join(DATA_DIR, "csvgrid.log")
EDITOR_COMMAND_DEFAULT = None

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)
    os.makedirs(DATA_DIR, exist_ok=True)


def load_config():
    cfg = {
        "TABLE_PATH": TABLE_PATH_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
        "LOG_FILE": LOG_FILE_DEFAULT,
        "EDITOR_COMMAND": EDITOR_COMMAND_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logging.getLogger("csvgrid.config").warning(
            "Ignoring unreadable config %s: %s", CONFIG_JSON, exc
        )
        return cfg

    if not isinstance(data, dict):
        return cfg

    table_path = data.get("table_path")
    if isinstance(table_path, str) and table_path.strip():
        cfg["TABLE_PATH"] = os.path.expanduser(table_path)

    level = data.get("log_level")
    if isinstance(level, str) and level.upper() in LOG_LEVELS:
        cfg["LOG_LEVEL"] = level.upper()

    if "log_file" in data:
        log_file = data.get("log_file")
        if log_file is None:
            cfg["LOG_FILE"] = None
        elif isinstance(log_file, str) and log_file.strip():
            cfg["LOG_FILE"] = os.path.expanduser(log_file)

    editor_cmd = data.get("editor_command")
    if (
        isinstance(editor_cmd, list)
        and editor_cmd
        and all(isinstance(item, str) for item in editor_cmd)
    ):
        cfg["EDITOR_COMMAND"] = editor_cmd

    return cfg
