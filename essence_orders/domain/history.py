# essence_orders/domain/history.py
from typing import Any, Dict, List

from essence_orders.domain.cart import CartSnapshot
from essence_orders.domain.errors import NothingToRedo, NothingToUndo


class CartHistory:
    """
    Caretaker: liniowa historia snapshotow koszyka z kursorem.

    snapshots[cursor] to stan biezacy, wszystko przed kursorem mozna cofnac,
    wszystko po kursorze mozna ponowic. Nowy record() ucina galaz redo.
    """

    def __init__(self, snapshots: List[CartSnapshot] | None = None, cursor: int = -1):
        self._snapshots: List[CartSnapshot] = list(snapshots or [])
        self._cursor = cursor if self._snapshots else -1

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._snapshots)

    def is_empty(self) -> bool:
        return not self._snapshots

    def can_undo(self) -> bool:
        return self._cursor > 0

    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def current(self) -> CartSnapshot | None:
        if self.is_empty():
            return None
        return self._snapshots[self._cursor]

    def record(self, snapshot: CartSnapshot) -> None:
        del self._snapshots[self._cursor + 1:]
        self._snapshots.append(snapshot)
        self._cursor = len(self._snapshots) - 1

    def undo(self) -> CartSnapshot:
        if not self.can_undo():
            raise NothingToUndo()
        self._cursor -= 1
        return self._snapshots[self._cursor]

    def redo(self) -> CartSnapshot:
        if not self.can_redo():
            raise NothingToRedo()
        self._cursor += 1
        return self._snapshots[self._cursor]

    # serializacja dla magazynow historii (redis)
    def to_dict(self) -> Dict[str, Any]:
        return {
            "cursor": self._cursor,
            "snapshots": [s.model_dump(mode="json") for s in self._snapshots],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CartHistory":
        snapshots = [CartSnapshot.model_validate(s) for s in data.get("snapshots", [])]
        return cls(snapshots=snapshots, cursor=data.get("cursor", -1))

    def copy(self) -> "CartHistory":
        #snapshoty sa niemutowalne, wystarczy plytka kopia listy
        return CartHistory(snapshots=list(self._snapshots), cursor=self._cursor)
