"""
Profiler package — per-column type inference over a row stream.

Modules
-------
type_profiler
    Value classification and the running :class:`ColumnProfile` per column.
"""
