"""Single-assignment result slot shared between the callback handler and the flow"""

import asyncio
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class OneShot(Generic[T]):
    """A result that can be completed at most once

    The first call to set_result() or set_exception() wins; later calls are
    ignored and return False.
    """

    def __init__(self):
        self._event = asyncio.Event()
        self._value: Optional[T] = None
        self._error: Optional[BaseException] = None

    @property
    def done(self) -> bool:
        return self._event.is_set()

    def set_result(self, value: T) -> bool:
        if self._event.is_set():
            return False
        self._value = value
        self._event.set()
        return True

    def set_exception(self, error: BaseException) -> bool:
        if self._event.is_set():
            return False
        self._error = error
        self._event.set()
        return True

    def result(self) -> T:
        """Return the value or raise the stored exception

        Raises:
            RuntimeError: If nothing has been set yet
        """
        if not self._event.is_set():
            raise RuntimeError("Result is not set yet")
        if self._error is not None:
            raise self._error
        return self._value

    async def wait(self, timeout: Optional[float] = None) -> T:
        """Wait until completed, then behave like result()

        Raises:
            asyncio.TimeoutError: If timeout elapses first
        """
        if timeout:
            await asyncio.wait_for(self._event.wait(), timeout=timeout)
        else:
            await self._event.wait()
        return self.result()
