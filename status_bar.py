import os
import time


def render_status(context, width):
    """
    context keys: status_msg, status_until, mode, selected, shape, store_path
    """
    now = time.time()
    if context.get("status_msg") and now < context.get("status_until", 0):
        text = f" {context['status_msg']}"
    else:
        mode = context.get("mode", "CELL")
        selected = context.get("selected") or "-"
        rows, cols = context.get("shape", (0, 0))
        store = context.get("store_path") or "memory"
        if store != "memory":
            store = os.path.basename(store)
        text = f" {mode} | {selected} | {rows}x{cols} | {store} | F2 edit F3-F8 rows/cols ^X quit"

    return text.ljust(width)[:width]
