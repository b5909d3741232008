"""Tests for the single-assignment result slot."""

from __future__ import annotations

import asyncio

import pytest

from oauth.oneshot import OneShot


async def test_first_result_wins() -> None:
    slot: OneShot[str] = OneShot()

    assert slot.set_result("first") is True
    assert slot.set_result("second") is False
    assert slot.set_exception(ValueError("late")) is False

    assert await slot.wait() == "first"


async def test_exception_is_raised_from_wait() -> None:
    slot: OneShot[str] = OneShot()

    assert slot.set_exception(ValueError("denied")) is True
    assert slot.set_result("code") is False

    with pytest.raises(ValueError, match="denied"):
        await slot.wait()


async def test_wait_blocks_until_set() -> None:
    slot: OneShot[str] = OneShot()

    async def complete_later() -> None:
        await asyncio.sleep(0)
        slot.set_result("done")

    task = asyncio.ensure_future(complete_later())
    assert await slot.wait() == "done"
    await task


async def test_wait_times_out() -> None:
    slot: OneShot[str] = OneShot()

    with pytest.raises(asyncio.TimeoutError):
        await slot.wait(timeout=0.01)
    assert not slot.done


def test_result_before_completion_raises() -> None:
    with pytest.raises(RuntimeError):
        OneShot().result()
