"""Tests for fieldcheck._internal.invoke — uniform sync/async calls."""

import asyncio

import pytest

from fieldcheck._internal.invoke import invoke, settle


class TestSettle:
    @pytest.mark.asyncio
    async def test_plain_value_returned(self) -> None:
        value = ["a"]
        assert await settle(value) is value

    @pytest.mark.asyncio
    async def test_coroutine_awaited(self) -> None:
        async def produce() -> list[str]:
            return ["a"]

        assert await settle(produce()) == ["a"]

    @pytest.mark.asyncio
    async def test_future_awaited(self) -> None:
        future: asyncio.Future[str] = asyncio.get_running_loop().create_future()
        future.set_result("done")
        assert await settle(future) == "done"


class TestInvoke:
    @pytest.mark.asyncio
    async def test_sync_callable(self) -> None:
        assert await invoke(lambda v: [v], "x") == ["x"]

    @pytest.mark.asyncio
    async def test_async_callable(self) -> None:
        async def rule(value: str) -> list[str]:
            return [value.upper()]

        assert await invoke(rule, "x") == ["X"]

    @pytest.mark.asyncio
    async def test_kwargs_forwarded(self) -> None:
        def rule(value: str, *, suffix: str) -> str:
            return value + suffix

        assert await invoke(rule, "a", suffix="!") == "a!"

    @pytest.mark.asyncio
    async def test_exception_propagates(self) -> None:
        def rule(value: str) -> list[str]:
            raise ValueError(value)

        with pytest.raises(ValueError, match="boom"):
            await invoke(rule, "boom")

    @pytest.mark.asyncio
    async def test_rule_called_before_await(self) -> None:
        calls: list[str] = []
        pending = invoke(calls.append, "x")
        assert calls == ["x"]
        assert await pending is None

    @pytest.mark.asyncio
    async def test_raise_held_until_await(self) -> None:
        error = ValueError("later")

        def rule(value: str) -> list[str]:
            raise error

        pending = invoke(rule, "x")
        with pytest.raises(ValueError) as exc_info:
            await pending
        assert exc_info.value is error
