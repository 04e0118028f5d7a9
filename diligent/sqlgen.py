"""SQL statement generation for the benchmark table."""

from __future__ import annotations

from .datagen import DataGen

_COLUMNS = "pk, uniq, small_grp, large_grp, fixed_val, seq_num, ts, payload"


class SqlGen:
    """Builds SQL statements that touch the records of a DataGen."""

    def __init__(self, table: str, dg: DataGen | None) -> None:
        if not table:
            raise ValueError("Table cannot be empty")
        if dg is None:
            raise ValueError("DataGen cannot be None")
        self.table = table
        self._dg = dg

    def insert_statement(self, n: int) -> str:
        rec = self._dg.record(n)
        return (
            f"INSERT INTO {self.table} "
            "(pk, uniq, small_grp, large_grp, fixed_val, seq_num, payload) "
            f"VALUES ('{rec.pk}', '{rec.uniq}', '{rec.small_grp}', '{rec.large_grp}', "
            f"'{rec.fixed_value}', {rec.seq_num}, '{rec.payload}')"
        )

    def select_by_pk_statement(self, n: int) -> str:
        return f"SELECT {_COLUMNS} FROM {self.table} where pk='{self._dg.key(n)}'"

    def select_by_uk_statement(self, n: int) -> str:
        return f"SELECT {_COLUMNS} FROM {self.table} where uniq='{self._dg.uniq(n)}'"

    def update_payload_by_pk_statement(self, n: int) -> str:
        return (
            f"UPDATE {self.table} SET payload='{self._dg.random_payload()}' "
            f"where pk='{self._dg.key(n)}'"
        )

    def delete_by_pk_statement(self, n: int) -> str:
        return f"DELETE FROM {self.table} where pk='{self._dg.key(n)}'"