from __future__ import annotations

import time
from typing import Callable, Dict, Optional

from .keys import KeyEvent, KeyKind
from .session import Screen, TypingSession

Handler = Callable[[TypingSession, KeyEvent, float], TypingSession]


class InputDispatcher:
    """Routes one logical key press to the session, by screen.

    ``dispatch`` returns the session to keep using: restarting from the
    summary screen hands back a brand-new one.
    """

    def __init__(self) -> None:
        self._handlers: Dict[Screen, Handler] = {
            Screen.MAIN: self._on_main,
            Screen.END_ROUND: self._on_end_round,
            Screen.SHOW_OPTIONS: self._on_options,
        }

    def dispatch(self, session: TypingSession, event: KeyEvent, now: Optional[float] = None) -> TypingSession:
        if now is None:
            now = time.monotonic()
        if event.kind is KeyKind.QUIT:
            session.request_exit()
            return session
        return self._handlers[session.screen](session, event, now)

    def _on_main(self, session: TypingSession, event: KeyEvent, now: float) -> TypingSession:
        # the countdown starts with the first key, whatever it is
        session.start_timer(now)
        if event.kind is KeyKind.CHAR:
            session.type_char(event.char)
        elif event.kind is KeyKind.SPACE:
            session.next_word()
        elif event.kind is KeyKind.BACKSPACE:
            session.backspace()
        return session

    def _on_end_round(self, session: TypingSession, event: KeyEvent, now: float) -> TypingSession:
        if not session.accepts_input(now):
            return session
        if event.is_char("r"):
            return session.restart()
        if event.is_char("q"):
            session.request_exit()
        elif event.is_char("e"):
            session.open_options()
        return session

    def _on_options(self, session: TypingSession, event: KeyEvent, now: float) -> TypingSession:
        kind = event.kind
        if kind is KeyKind.UP or event.is_char("k"):
            session.move_choice(-1)
        elif kind is KeyKind.DOWN or event.is_char("j"):
            session.move_choice(1)
        elif kind is KeyKind.LEFT or event.is_char("h"):
            session.cycle_choice(-1)
        elif kind is KeyKind.RIGHT or event.is_char("l"):
            session.cycle_choice(1)
        elif kind is KeyKind.CONFIRM:
            session.confirm_choice(now)
        return session
