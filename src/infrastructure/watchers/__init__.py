"""Filesystem change notification implementations."""

from src.infrastructure.watchers.watchdog_notifier import WatchdogChangeNotifier

__all__ = ["WatchdogChangeNotifier"]
