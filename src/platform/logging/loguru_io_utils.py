from inspect import getfile
from os.path import basename
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    MASK,
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


_MAX_CONTENT_LENGTH = 500


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    target = getattr(func, '__func__', func)
    try:
        filename = basename(getfile(target))
    except TypeError:
        filename = '<builtin>'
    return f'{filename}::{func.__qualname__}'


def increase_call_depth() -> None:
    call_depth_var.set(call_depth_var.get() + 1)


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if layer <= 0:
        call_depth_var.set(0)
        chain_start_time_var.set(0)


def mask_sensitive(data: Any) -> Any:
    if isinstance(data, dict):
        return {
            key: MASK if key in SENSITIVE_KEYWORDS else mask_sensitive(value)
            for key, value in data.items()
        }
    if isinstance(data, list | tuple):
        return type(data)(mask_sensitive(item) for item in data)
    return data


def truncate_content(data: Any, *, max_length: int = _MAX_CONTENT_LENGTH) -> str:
    content = str(data)
    if len(content) <= max_length:
        return content
    return f'{content[:max_length]}...(+{len(content) - max_length} chars)'
