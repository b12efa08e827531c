#!/usr/bin/env python3
"""
Interactive terminal client for the salon site (no browser).

Usage:
  uvicorn luxe_salon.main:app --port 3000    # in another shell
  python3 scripts/browse_local.py

Drives the same ClientApp the tests use: fetches /services.json from
CLIENT_BASE_URL, renders pages into a headless view and prints them as text.
"""

from __future__ import annotations

import html
import re
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from luxe_salon.infrastructure.view.memory_view import MemoryView
from luxe_salon.wiring.dependencies import build_client

_TAG_RE = re.compile(r"<[^>]+>")


def _as_text(markup: str) -> str:
    text = html.unescape(_TAG_RE.sub("", markup))
    lines = [line.strip() for line in text.splitlines()]
    return "\n".join(line for line in lines if line)


def _print_help() -> None:
    print("Commands:")
    print("  /page <home|services|loyalty|admin>")
    print("  /service <slug>      e.g. /service hair-cut")
    print("  /gender <women|men>")
    print("  /search <text>       (empty text restores the previous view)")
    print("  /book <id>           click Book Now on a listed service")
    print("  /admin               click Request Access on the admin page")
    print("  /retry               retry after a load error")
    print("  /width <px>          resize the viewport")
    print("  /state               show the current UI state")
    print("  /quit")


def main() -> None:
    view = MemoryView()
    client = build_client(view=view)

    print("\nLocal Salon Browser")
    print("-" * 60)
    client.start()
    print(_as_text(view.content))
    _print_help()

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue

        cmd, _, arg = user_text.partition(" ")
        cmd = cmd.lower()
        alerts_before = len(view.alerts)

        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            _print_help()
            continue
        if cmd == "/page":
            client.on_nav_click(arg.strip())
        elif cmd == "/service":
            client.on_service_click(arg.strip())
        elif cmd == "/gender":
            client.on_gender_click(arg.strip())
        elif cmd == "/search":
            client.on_search_input(arg)
        elif cmd == "/book":
            if not arg.strip().isdigit() or not view.click_booking(int(arg)):
                print("(no such Book Now button on this page)")
        elif cmd == "/admin":
            if not view.click_admin_access():
                print("(no Request Access button on this page)")
        elif cmd == "/retry":
            if not view.click_retry():
                print("(nothing to retry)")
        elif cmd == "/width":
            if arg.strip().isdigit():
                view.resize(int(arg))
                client.on_resize()
        elif cmd == "/state":
            print(client.state.get_state())
            continue
        else:
            print("Unknown command, try /help")
            continue

        for message in view.alerts[alerts_before:]:
            print("\n[alert]\n" + message)
        print("-" * 60)
        print(_as_text(view.content))


if __name__ == "__main__":
    main()
