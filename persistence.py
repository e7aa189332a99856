import json
import logging
import math
import os
import tempfile

from cell import Numeric, Text
from default_table_initializer import DefaultTableInitializer
from table import Table


logger = logging.getLogger("csvgrid.persistence")

KIND_NUMERIC = "Numeric"
KIND_TEXT = "Text"


# ---------- document encoding ----------
def encode_cell(cell) -> dict:
    if isinstance(cell, Numeric):
        return {"kind": KIND_NUMERIC, "value": cell.value}
    return {"kind": KIND_TEXT, "value": cell.value}


def encode_table(table: Table) -> list:
    return [[encode_cell(cell) for cell in row] for row in table.rows]


def decode_cell(item):
    if not isinstance(item, dict):
        return None
    kind = item.get("kind")
    value = item.get("value")
    if kind == KIND_NUMERIC:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        try:
            value = float(value)
        except OverflowError:
            return None
        if not math.isfinite(value):
            return None
        return Numeric(value)
    if kind == KIND_TEXT:
        if not isinstance(value, str):
            return None
        return Text(value)
    return None


def decode_document(document) -> Table | None:
    """Rebuild a Table from a saved document, or None if it is malformed."""
    if not isinstance(document, list):
        return None
    rows = []
    width = None
    for raw_row in document:
        if not isinstance(raw_row, list):
            return None
        if width is None:
            width = len(raw_row)
        elif len(raw_row) != width:
            return None
        row = []
        for item in raw_row:
            cell = decode_cell(item)
            if cell is None:
                return None
            row.append(cell)
        rows.append(tuple(row))
    return Table(tuple(rows))


# ---------- gateways ----------
class PersistenceGateway:
    """Host boundary: `save` is fire-and-forget, `load` runs once at startup."""

    def save(self, document: list) -> None:
        raise NotImplementedError

    def load(self) -> list | None:
        raise NotImplementedError


class MemoryGateway(PersistenceGateway):
    def __init__(self, document: list | None = None):
        self.document = document
        self.saves = 0

    def save(self, document: list) -> None:
        self.document = document
        self.saves += 1

    def load(self) -> list | None:
        return self.document


class JsonFileGateway(PersistenceGateway):
    def __init__(self, path: str):
        self.path = path

    def load(self) -> list | None:
        if not os.path.exists(self.path) or os.path.getsize(self.path) == 0:
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read %s: %s", self.path, exc)
            return None

    def save(self, document: list) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            prefix=".csvgrid-", suffix=".json", dir=directory
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(document, fh, ensure_ascii=False, allow_nan=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise
        logger.debug("Saved table to %s", self.path)


def load_table(gateway: PersistenceGateway) -> Table:
    document = gateway.load()
    if document is None:
        logger.info("No saved table; starting from the default table")
        return DefaultTableInitializer().create()
    table = decode_document(document)
    if table is None:
        logger.warning("Saved table is malformed; starting from the default table")
        return DefaultTableInitializer().create()
    return table
