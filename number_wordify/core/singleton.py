"""
singleton.py — number-wordify
==============================
Thread-safe Singleton metaclass used by the configuration manager.

    class MyService(metaclass=SingletonMeta):
        def __init__(self):
            ...

    svc1 = MyService()
    svc2 = MyService.get_instance()
    assert svc1 is svc2

Instances are created with double-checked locking and can be dropped
with clear_instance() (tests only).
"""
from __future__ import annotations

import threading
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class SingletonMeta(type):
    """Metaclass that turns a plain class into a thread-safe singleton."""

    _instances: Dict[type, Any] = {}
    _lock: threading.Lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                if cls not in cls._instances:
                    instance = super().__call__(*args, **kwargs)
                    cls._instances[cls] = instance
                    logger.debug(f"[Singleton] Created: {cls.__name__}")
        return cls._instances[cls]

    def get_instance(cls, *args, **kwargs):
        """Same as calling the class."""
        return cls(*args, **kwargs)

    def clear_instance(cls) -> None:
        """Drop the instance (tests only)."""
        with cls._lock:
            if cls in cls._instances:
                del cls._instances[cls]
                logger.debug(f"[Singleton] Cleared: {cls.__name__}")


__all__ = ["SingletonMeta"]
