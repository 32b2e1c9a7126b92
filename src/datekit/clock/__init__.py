"""
datekit.clock
~~~~~~~~~~~~~

Clock capability.  The calendar functions never read the time themselves;
anything that needs "now" takes a zero-argument Clock so tests can pin it.

Basic usage::

    from datetime import datetime
    from datekit.clock import get_current_year

    get_current_year()                                  # system clock
    get_current_year(lambda: datetime(2030, 1, 1))      # → 2030
"""

from datekit.clock.clock import Clock, get_current_year, system_clock

__all__ = ["Clock", "get_current_year", "system_clock"]
