"""Optimistic list state for admin clients.

A collection mirrors one admin listing. Each user action goes through a
transaction: the snapshot of the visible rows is captured, the speculative
change is applied immediately (``APPLYING``), and the action result then
either reconciles the server-confirmed records into the *current* rows
(``COMMITTED``) or restores exactly the captured snapshot
(``ROLLED_BACK``).

Rows are plain dicts as produced by the serializers. Lists are never
mutated in place, so a snapshot is simply the list object that was visible
when the transaction began.

Two overlapping transactions are not coordinated: rolling back the older one
discards whatever the newer one applied after its snapshot was taken.
"""

import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

APPLYING = "applying"
COMMITTED = "committed"
ROLLED_BACK = "rolled_back"

Row = Dict[str, Any]


class TransactionStateError(RuntimeError):
    pass


@dataclass
class OptimisticTransaction:
    kind: str  # create/update/delete/replace
    snapshot: Sequence[Row]
    optimistic_value: Any
    state: str = APPLYING
    server_value: Any = None
    error: Optional[str] = None
    target_ids: List[Any] = field(default_factory=list)


class OptimisticCollection:
    def __init__(
        self,
        rows: Iterable[Row] = (),
        *,
        key: str = "id",
        sort_key: Optional[Callable[[Row], Any]] = None,
        reverse: bool = True,
    ):
        self.key = key
        self._sort_key = sort_key
        self._reverse = reverse
        self._placeholder_ids = itertools.count(1)
        self.last_error: Optional[str] = None
        self._rows: List[Row] = []
        self._ref: List[Row] = self._rows
        self._set(list(rows))

    @property
    def rows(self) -> List[Row]:
        return list(self._rows)

    def get(self, row_id: Any) -> Optional[Row]:
        for row in self._ref:
            if row.get(self.key) == row_id:
                return row
        return None

    def _set(self, rows: List[Row]) -> None:
        if self._sort_key is not None:
            rows = sorted(rows, key=self._sort_key, reverse=self._reverse)
        self._rows = rows
        self._ref = rows

    def _begin(self, kind: str, optimistic: List[Row], value: Any, target_ids: List[Any]) -> OptimisticTransaction:
        tx = OptimisticTransaction(kind=kind, snapshot=self._ref, optimistic_value=value, target_ids=target_ids)
        self._set(optimistic)
        return tx

    def placeholder_id(self) -> int:
        return -next(self._placeholder_ids)

    def begin_create(self, record: Row) -> OptimisticTransaction:
        placeholder = dict(record)
        placeholder[self.key] = self.placeholder_id()
        return self._begin("create", [placeholder, *self._ref], placeholder, [placeholder[self.key]])

    def begin_update(self, row_id: Any, changes: Row) -> OptimisticTransaction:
        current = self.get(row_id)
        if current is None:
            raise KeyError(row_id)
        updated = {**current, **changes}
        optimistic = [updated if row.get(self.key) == row_id else row for row in self._ref]
        return self._begin("update", optimistic, updated, [row_id])

    def begin_replace(self, records: Iterable[Row]) -> OptimisticTransaction:
        by_id = {record[self.key]: record for record in records}
        optimistic = [by_id.get(row.get(self.key), row) for row in self._ref]
        return self._begin("replace", optimistic, list(by_id.values()), list(by_id))

    def begin_delete(self, row_ids: Iterable[Any]) -> OptimisticTransaction:
        ids = list(row_ids)
        doomed = set(ids)
        optimistic = [row for row in self._ref if row.get(self.key) not in doomed]
        return self._begin("delete", optimistic, None, ids)

    def _merge(self, records: Iterable[Row]) -> None:
        by_id = {record[self.key]: record for record in records}
        self._set([by_id.get(row.get(self.key), row) for row in self._ref])

    def commit(self, tx: OptimisticTransaction, server_value: Any = None) -> OptimisticTransaction:
        if tx.state != APPLYING:
            raise TransactionStateError(f"transaction already {tx.state}")
        if tx.kind == "create":
            placeholder_id = tx.target_ids[0]
            remaining = [row for row in self._ref if row.get(self.key) != placeholder_id]
            self._set([server_value, *remaining] if server_value else remaining)
        elif tx.kind == "update" and server_value:
            self._merge([server_value])
        elif tx.kind == "replace" and server_value:
            self._merge(server_value)
        tx.server_value = server_value
        tx.state = COMMITTED
        return tx

    def rollback(self, tx: OptimisticTransaction, message: Optional[str] = None) -> OptimisticTransaction:
        if tx.state != APPLYING:
            raise TransactionStateError(f"transaction already {tx.state}")
        self._set(list(tx.snapshot))
        tx.error = message
        tx.state = ROLLED_BACK
        self.last_error = message
        return tx

    def apply(self, tx: OptimisticTransaction, result: Any) -> OptimisticTransaction:
        """Settle ``tx`` from an action result (``ok``/``data``/``message``)."""
        if not result.ok:
            return self.rollback(tx, result.message)
        data = result.data
        if tx.kind == "replace" and isinstance(data, dict):
            data = data.get("posts") or data.get("items") or []
        return self.commit(tx, data)

    def run(self, tx: OptimisticTransaction, action: Callable[[], Any]) -> OptimisticTransaction:
        try:
            result = action()
        except Exception as exc:
            self.rollback(tx, str(exc) or exc.__class__.__name__)
            raise
        return self.apply(tx, result)
