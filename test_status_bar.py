import time

from status_bar import render_status


def test_status_shows_mode_and_selection():
    text = render_status(
        {"mode": "CELL", "selected": "B2", "shape": (2, 3), "store_path": "/x/table.json"},
        120,
    )
    assert text.startswith(" CELL | B2 | 2x3 | table.json |")
    assert len(text) == 120


def test_status_message_takes_precedence():
    text = render_status(
        {"status_msg": "Saved", "status_until": time.time() + 5, "mode": "CELL"}, 20
    )
    assert text == " Saved".ljust(20)


def test_expired_message_and_memory_store():
    text = render_status(
        {"status_msg": "old", "status_until": time.time() - 1, "mode": "CSV"}, 200
    )
    assert text.startswith(" CSV | - | 0x0 | memory |")
