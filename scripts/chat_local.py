#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP).

Usage:
  python3 scripts/chat_local.py

What it does:
- Keeps one session token for the conversation
- Sends your typed messages through the same HandleChatMessageUseCase as /api/chat
- Prints decision details (intent, confidence, extracted fields) and the reply HTML as text
"""

from __future__ import annotations

import re
import sys
from html import unescape
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

load_dotenv()

from schedula.wiring.dependencies import get_handle_chat_message_use_case  # noqa: E402


def _print_header(session_id: str | None) -> None:
    print("\nLocal Chat Harness")
    print("-" * 60)
    print(f"session_id: {session_id or '(new)'}")
    print("Type your message and press Enter.")
    print("Commands: /new (new session), /quit, /help")
    print("-" * 60)


def _html_to_text(html: str) -> str:
    text = re.sub(r"</(p|h3|li|tr|div)>", "\n", html)
    text = re.sub(r"</t[dh]>", "  ", text)
    text = re.sub(r"<[^>]+>", "", text)
    return "\n".join(line.strip() for line in unescape(text).splitlines() if line.strip())


def main() -> None:
    use_case = get_handle_chat_message_use_case()
    session_id: str | None = None
    _print_header(session_id)

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue

        cmd = user_text.lower()
        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            print("Commands:")
            print("  /new  -> start a new session (forgets partial bookings)")
            print("  /quit -> exit")
            continue
        if cmd == "/new":
            session_id = None
            print("New session will start with the next message")
            continue

        try:
            reply = use_case.handle(user_text, session_id=session_id)
        except Exception as e:
            print(f"ERROR: {e}")
            continue

        session_id = reply.session_id
        extracted = reply.extracted

        print("\n--- Decision ---")
        print(f"session_id: {session_id}")
        print(f"intent: {extracted.intent} (confidence {extracted.confidence})")
        print(f"date: {extracted.date}  time: {extracted.time_of_day}  end: {extracted.end_time_of_day}")
        print(f"duration: {extracted.duration}  category: {extracted.category}")
        print(f"success: {reply.success}")

        print("\n--- Reply ---")
        print(_html_to_text(reply.html) or "(empty reply)")
        print("-" * 60)


if __name__ == "__main__":
    main()
