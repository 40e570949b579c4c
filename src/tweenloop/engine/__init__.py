from .tick_source import AsyncioTickSource, Tick, TickSource

__all__ = ["AsyncioTickSource", "Tick", "TickSource"]
