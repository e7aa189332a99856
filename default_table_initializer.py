from cell import parse_user_input
from table import Table


class DefaultTableInitializer:
    ROWS = [["Name", "Age"], ["Bob", "18"]]

    def create(self) -> Table:
        return Table.from_rows(
            [[parse_user_input(text) for text in row] for row in self.ROWS]
        )
