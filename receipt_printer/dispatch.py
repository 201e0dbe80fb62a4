"""Print dispatch - hands an encoded receipt to the RawBT printing app.

The primary ``rawbt:`` URL is opened first; after a fixed delay the
``intent:`` fallback is opened unconditionally. The delay is a heuristic,
not a completion signal. Only one dispatch may be outstanding at a time.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from .config import get_settings
from .escpos.transport import PrintJob, encode_receipt
from .models.receipt import ReceiptData

logger = logging.getLogger(__name__)

Navigate = Callable[[str], Union[None, Awaitable[None]]]


class PrintInProgressError(RuntimeError):
    """A print dispatch is already running."""


class PrintDispatcher:
    """Serialises print attempts behind a busy flag.

    Args:
        navigate: opens a URL on the device; sync or async
        width: printable columns, defaults to the configured width
        package: RawBT package id for the intent fallback
        delay: seconds between the primary and the fallback navigation
    """

    def __init__(
        self,
        navigate: Navigate,
        *,
        width: Optional[int] = None,
        package: Optional[str] = None,
        delay: Optional[float] = None,
    ) -> None:
        settings = get_settings()
        self.navigate = navigate
        self.width = width if width is not None else settings.width
        self.package = package or settings.rawbt_package
        self.delay = delay if delay is not None else settings.dispatch_delay
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    async def _open(self, url: str) -> None:
        result = self.navigate(url)
        if inspect.isawaitable(result):
            await result

    async def print_receipt(self, receipt: Union[ReceiptData, Mapping[str, Any]]) -> PrintJob:
        """Encode ``receipt`` and open the primary then the fallback URL.

        Raises:
            PrintInProgressError: another dispatch has not finished
        """
        if self._busy:
            raise PrintInProgressError("a receipt is already being printed")
        self._busy = True
        try:
            job = encode_receipt(receipt, self.width, package=self.package)
            logger.info(f"Dispatching receipt ({job.size} bytes)")
            await self._open(job.rawbt_url)
            await asyncio.sleep(self.delay)
            await self._open(job.intent_url)
            return job
        except Exception as e:
            logger.error(f"Print error: {e}", exc_info=True)
            raise
        finally:
            self._busy = False


__all__ = ["PrintDispatcher", "PrintInProgressError", "Navigate"]
