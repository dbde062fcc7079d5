"""
Invoice number generator.

Numbers look like MP00000042: a fixed prefix plus a zero-padded counter.
The counter lives in a CounterStore handed in by the caller, so the
service itself holds no global state and tests get a fresh store each time.
"""

import logging
import re
import threading
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "MP"
DEFAULT_WIDTH = 8


class CounterStore(ABC):
    """Where the last-used invoice number is kept."""

    @abstractmethod
    def get(self) -> int:
        """Last-used number, 0 if nothing has been issued."""
        pass

    @abstractmethod
    def set(self, value: int) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass


class InMemoryCounterStore(CounterStore):
    """Process-local counter. Durable stores are the caller's business."""

    def __init__(self, start: int = 0):
        self._value = start

    def get(self) -> int:
        return self._value

    def set(self, value: int) -> None:
        self._value = value

    def clear(self) -> None:
        self._value = 0


class InvoiceNumberService:
    """Issues, validates and administers invoice numbers."""

    def __init__(self, store: CounterStore, prefix: str = DEFAULT_PREFIX,
                 width: int = DEFAULT_WIDTH):
        self.store = store
        self.prefix = prefix
        self.width = width
        self._pattern = re.compile(rf"{re.escape(prefix)}[0-9]{{{width}}}")
        self._lock = threading.Lock()

    def format(self, value: int) -> str:
        return f"{self.prefix}{str(value).zfill(self.width)}"

    def next_number(self) -> str:
        """Increment the counter, save it, and return the formatted number."""
        with self._lock:
            value = self.store.get() + 1
            self.store.set(value)
        number = self.format(value)
        logger.info(f"Issued invoice number {number}")
        return number

    def is_valid(self, invoice_number: str) -> bool:
        return self._pattern.fullmatch(invoice_number or "") is not None

    def current(self) -> int:
        return self.store.get()

    def set_counter(self, value: int) -> None:
        """Admin: make `value` the last-used number. Next issued is value + 1."""
        if value < 0:
            raise ValueError(f"Invoice counter cannot be negative: {value}")
        with self._lock:
            self.store.set(value)
        logger.info(f"Invoice counter set to {value}")

    def reset(self) -> None:
        """Admin: start numbering over from 1."""
        with self._lock:
            self.store.clear()
        logger.info("Invoice counter reset")
