# receipt_points/services/store.py
from __future__ import annotations
import threading
from typing import Callable, Dict

from ..ids import new_receipt_id
from ..schemas import Receipt

class ReceiptNotFound(LookupError):
    def __init__(self, receipt_id: str):
        super().__init__(receipt_id)
        self.receipt_id = receipt_id

class ReceiptStore:
    """
    In-memory receipts keyed by generated id.
    Lives as long as the app that owns it; nothing is evicted.
    """

    def __init__(self, id_factory: Callable[[], str] = new_receipt_id):
        self._id_factory = id_factory
        self._receipts: Dict[str, Receipt] = {}
        self._lock = threading.Lock()

    def submit(self, receipt: Receipt) -> str:
        # IdentifierGenerationError propagates; nothing is stored in that case
        receipt_id = self._id_factory()
        with self._lock:
            self._receipts[receipt_id] = receipt
        return receipt_id

    def get(self, receipt_id: str) -> Receipt:
        with self._lock:
            receipt = self._receipts.get(receipt_id)
        if receipt is None:
            raise ReceiptNotFound(receipt_id)
        return receipt

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._receipts

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)
