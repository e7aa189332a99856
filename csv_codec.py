import csv
import io
import logging

import pandas as pd

from cell import parse_user_input, stringify
from table import Table


logger = logging.getLogger("csvgrid.csv_codec")


def encode(table: Table) -> str:
    """Render the table as CSV text: `,` between fields, `\\n` between rows.

    Fields holding a comma, quote, or line break are quoted with `""` escaping.
    A row made of a single empty field is written as `""` so that it survives
    decoding.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    for row in table.rows:
        writer.writerow([stringify(cell) for cell in row])
    text = buffer.getvalue()
    return text[:-1] if text.endswith("\n") else text


def decode(text: str) -> Table:
    """Parse CSV text into a Table, inferring Numeric/Text for every field.

    Short records are padded with empty Text cells up to the widest record.
    Raises csv.Error only for input the csv tokenizer itself rejects.
    """
    records = list(csv.reader(io.StringIO(text)))
    df = pd.DataFrame(records, dtype=object)
    if df.shape[1] == 0:
        return Table.empty()
    widths = {len(record) for record in records}
    if len(widths) > 1:
        logger.debug("Padding ragged CSV: widths %s", sorted(widths))
    df = df.map(lambda field: parse_user_input("" if field is None else field))
    return Table.from_frame(df)
