"""Fallback hooks – user callables answering in place of the emulated host."""
from __future__ import annotations

import inspect
from typing import Any, Callable

Hook = Callable[..., Any]


async def invoke_hook(hook: Hook, *args: Any) -> Any:
    """Call *hook* and resolve its result, awaiting it when it is awaitable."""
    result = hook(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


__all__ = ["Hook", "invoke_hook"]
