"""Optional trace logging to a file.

Tracing is off unless TEXTOPS_TRACE_LOG names a file. Each line is
prefixed with a timestamp and the component that wrote it, which makes
it easy to follow what a single CLI invocation did without turning on
DEBUG logging on stderr.

Usage:
    from textops.trace import trace

    trace("cli", "dispatching table")
    trace("cli", "render failed", include_traceback=True)
"""

import os
import traceback as _traceback_module
from datetime import datetime
from typing import Optional, Set


# Cache of directories we've already ensured exist, to avoid
# repeated os.makedirs calls on every trace write.
_ensured_dirs: Set[str] = set()


def _ensure_parent_dirs(file_path: str) -> None:
    """Create parent directories for a file path if they don't exist."""
    parent = os.path.dirname(os.path.abspath(file_path))
    if parent not in _ensured_dirs:
        os.makedirs(parent, exist_ok=True)
        _ensured_dirs.add(parent)


def resolve_trace_path(*env_vars: str) -> Optional[str]:
    """Resolve trace file path from environment variables.

    Checks env vars in order; unset or empty values are skipped.

    Returns:
        Resolved file path, or None if tracing is disabled.
    """
    for var in env_vars:
        value = os.environ.get(var)
        if value:
            return value
    return None


def trace_write(
    component: str,
    msg: str,
    trace_path: Optional[str],
    *,
    include_traceback: bool = False,
) -> None:
    """Write a trace message to the given path.

    Creates parent directories automatically. Never raises - tracing
    errors are silently ignored to avoid breaking the command.

    Args:
        component: Component name for the log prefix (e.g., "cli").
        msg: Message to write.
        trace_path: File path to write to. If None, does nothing.
        include_traceback: If True, append the current exception traceback.
    """
    if not trace_path:
        return
    try:
        _ensure_parent_dirs(trace_path)
        with open(trace_path, "a", encoding="utf-8") as f:
            ts = datetime.now().strftime("%H:%M:%S.%f")[:-3]
            f.write(f"[{ts}] [{component}] {msg}\n")
            if include_traceback:
                tb = _traceback_module.format_exc()
                if tb and tb.strip() != "NoneType: None":
                    f.write(f"[{ts}] [{component}] Traceback:\n{tb}\n")
    except OSError:
        pass  # Never let tracing errors break the command


def trace(
    component: str,
    msg: str,
    *,
    include_traceback: bool = False,
) -> None:
    """Write a trace message to the file named by TEXTOPS_TRACE_LOG."""
    path = resolve_trace_path("TEXTOPS_TRACE_LOG")
    trace_write(component, msg, path, include_traceback=include_traceback)
