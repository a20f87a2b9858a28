"""
Context utilities to inject instance/stage/size into log records.
"""
import logging
from contextvars import ContextVar
from contextlib import contextmanager
from typing import Optional, Tuple

instance_id_var: ContextVar[Optional[str]] = ContextVar("instance_id", default=None)
stage_var: ContextVar[Optional[str]] = ContextVar("stage", default=None)
size_var: ContextVar[Optional[Tuple[int, int]]] = ContextVar("size", default=None)

def set_context(instance_id: Optional[str] = None, stage: Optional[str] = None, size: Optional[Tuple[int, int]] = None) -> None:
    if instance_id is not None:
        instance_id_var.set(str(instance_id))
    if stage is not None:
        stage_var.set(str(stage))
    if size is not None:
        size_var.set(tuple(size))

def current_size() -> Optional[Tuple[int, int]]:
    return size_var.get()

class LogContextFilter(logging.Filter):
    """
    Adds contextvars to LogRecord so formatters can print them.
    """
    def filter(self, record: logging.LogRecord) -> bool:
        size = size_var.get()
        record.instance_id = instance_id_var.get() or "-"
        record.stage = stage_var.get() or "-"
        record.size = f"{size[0]}x{size[1]}" if size else "-"
        return True

@contextmanager
def instance_context(instance_id: str, size: Optional[Tuple[int, int]] = None, stage: Optional[str] = None):
    prev_i, prev_st, prev_sz = instance_id_var.get(), stage_var.get(), size_var.get()
    try:
        set_context(instance_id, stage, size)
        yield
    finally:
        instance_id_var.set(prev_i)
        stage_var.set(prev_st)
        size_var.set(prev_sz)

@contextmanager
def stage_context(stage: str):
    prev = stage_var.get()
    try:
        stage_var.set(stage)
        yield
    finally:
        stage_var.set(prev)
