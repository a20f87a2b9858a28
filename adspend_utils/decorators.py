"""
Reusable decorators for timing and exception logging.
"""
import time
import logging
from functools import wraps
from typing import Optional, Type

from adspend_utils.context import current_size, stage_context
from exceptions import AllocationError

def log_and_time(phase_name: Optional[str] = None, error_cls: Type[AllocationError] = AllocationError, rethrow: bool = True):
    """
    Logs start/end/duration and logs exceptions with stack traces.
    Pipeline errors are re-raised with the stage filled in; anything else
    is rethrown as error_cls.
    """
    def outer(func):
        @wraps(func)
        def inner(*args, **kwargs):
            logger = logging.getLogger(func.__module__)
            name = phase_name or func.__name__
            t0 = time.perf_counter()
            with stage_context(name):
                logger.info(f"▶️ {name} start")
                try:
                    result = func(*args, **kwargs)
                    dt = time.perf_counter() - t0
                    logger.info(f"✅ {name} done in {dt:.3f}s")
                    return result
                except AllocationError as e:
                    dt = time.perf_counter() - t0
                    if e.stage is None:
                        e.stage = name
                    if e.size is None:
                        e.size = current_size()
                    logger.exception(f"❌ {name} failed after {dt:.3f}s: {e}")
                    if rethrow:
                        raise
                    return None
                except Exception as e:
                    dt = time.perf_counter() - t0
                    logger.exception(f"❌ {name} failed after {dt:.3f}s: {e}")
                    if rethrow:
                        raise error_cls(str(e), stage=name, size=current_size()) from e
                    return None
        return inner
    return outer
