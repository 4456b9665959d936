"""
Hook Registry

HookRegistry: in-process dispatcher for filters and actions.

Filters pass a value through every callback in priority order, each callback
receiving the previous callback's result. Actions call every callback and
discard the results. A callback that raises is logged and skipped; a
misbehaving module never breaks rendering or a settings save.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

# ── Hook names ────────────────────────────────────────────────────────────────
# Page-scoped hooks are prefixed with the page slug, e.g. "orbitools.adminkit_fields".
HOOK_REGISTER_FIELDS = "fields.register"
HOOK_HTML_FIELD_CONTENT = "fields.html_content"
HOOK_ADMINKIT_STRUCTURE = "adminkit_structure"
HOOK_ADMINKIT_FIELDS = "adminkit_fields"
HOOK_ADMINKIT_SAVE_FIELDS = "adminkit_save_fields"
HOOK_SANITIZE_SETTING = "sanitize_setting"
HOOK_PRE_SAVE_SETTINGS = "pre_save_settings"
HOOK_POST_SAVE_SETTINGS = "post_save_settings"

DEFAULT_PRIORITY = 10


def page_hook(slug: str, hook: str) -> str:
    """Return the page-scoped name of a hook, e.g. "orbitools.pre_save_settings"."""
    return f"{slug}.{hook}"


class HookRegistry:
    """
    Registry of filter and action callbacks.

    Callbacks with the same priority run in registration order.
    """

    def __init__(self) -> None:
        self._filters: dict[str, list[tuple[int, int, Callable[..., Any]]]] = defaultdict(list)
        self._actions: dict[str, list[tuple[int, int, Callable[..., Any]]]] = defaultdict(list)
        self._counter = 0

    # ── Registration ──────────────────────────────────────────────────────────

    def add_filter(self, hook_name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        """Subscribe a callback that transforms the value passed through hook_name."""
        self._add(self._filters, hook_name, callback, priority)

    def add_action(self, hook_name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        """Subscribe a callback that is notified when hook_name fires."""
        self._add(self._actions, hook_name, callback, priority)

    def remove_filter(self, hook_name: str, callback: Callable[..., Any]) -> bool:
        """Unsubscribe a filter callback. Returns True if it was registered."""
        return self._remove(self._filters, hook_name, callback)

    def remove_action(self, hook_name: str, callback: Callable[..., Any]) -> bool:
        """Unsubscribe an action callback. Returns True if it was registered."""
        return self._remove(self._actions, hook_name, callback)

    def has_filter(self, hook_name: str) -> bool:
        return bool(self._filters.get(hook_name))

    def has_action(self, hook_name: str) -> bool:
        return bool(self._actions.get(hook_name))

    def _add(self, table, hook_name, callback, priority) -> None:
        self._counter += 1
        table[hook_name].append((priority, self._counter, callback))
        table[hook_name].sort(key=lambda entry: (entry[0], entry[1]))

    def _remove(self, table, hook_name, callback) -> bool:
        entries = table.get(hook_name, [])
        remaining = [entry for entry in entries if entry[2] != callback]
        if len(remaining) == len(entries):
            return False
        table[hook_name] = remaining
        return True

    # ── Dispatch ──────────────────────────────────────────────────────────────

    def apply_filters(self, hook_name: str, value: Any, *args: Any) -> Any:
        """
        Pass value through every filter subscribed to hook_name.

        Args:
            hook_name: Hook name, e.g. "orbitools.adminkit_fields".
            value:     Initial value handed to the first callback.
            *args:     Extra context passed unchanged to every callback.

        Returns:
            The value returned by the last callback that did not raise.
        """
        for _, _, callback in list(self._filters.get(hook_name, [])):
            try:
                value = callback(value, *args)
            except Exception as exc:
                logger.warning("Filter %r on %s raised: %s", callback, hook_name, exc)
        return value

    def do_action(self, hook_name: str, *args: Any) -> int:
        """
        Call every action subscribed to hook_name.

        Returns:
            Number of callbacks that completed without raising.
        """
        completed = 0
        for _, _, callback in list(self._actions.get(hook_name, [])):
            try:
                callback(*args)
                completed += 1
            except Exception as exc:
                logger.warning("Action %r on %s raised: %s", callback, hook_name, exc)
        return completed
