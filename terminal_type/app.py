from __future__ import annotations

import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Static

from .config import Config
from .dispatch import InputDispatcher
from .keys import QUIT, KeyEvent, from_textual
from .leaderboard import LeaderboardStore
from .render import (
    render_help,
    render_leaderboard,
    render_options,
    render_prompt,
    render_stats,
    render_summary,
)
from .session import Screen, TypingSession

logger = logging.getLogger(__name__)

TICK_SEC = 0.05


# ---------------------------
# UI widgets
# ---------------------------

class StatsBar(Static):
    """Countdown and word counter."""
    pass


class PromptView(Static):
    """Word stream, round summary or options, depending on the screen."""
    pass


class ScoreBar(Static):
    """Leaderboard."""
    pass


class HelpBar(Static):
    """Help / controls."""
    pass


# ---------------------------
# App
# ---------------------------

class TerminalTypeApp(App):
    CSS = """
    Screen {
        background: transparent;
    }

    #root {
        height: 100%;
        padding: 1 2;
    }

    StatsBar {
        background: #0f172a;
        border: round #1f2937;
        padding: 0 2;
        height: 3;
    }

    PromptView {
        background: #0b1220;
        border: round #1f2937;
        padding: 1 2;
        height: 1fr;
    }

    ScoreBar {
        background: #111827;
        border: round #1f2937;
        padding: 0 2;
        height: 14;
    }

    HelpBar {
        background: #0f172a;
        border: round #1f2937;
        padding: 0 2;
        height: 3;
    }
    """

    TITLE = "Terminal Type"

    BINDINGS = [
        Binding("ctrl+c", "quit_round", "Quit", priority=True),
        Binding("ctrl+q", "quit_round", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        config: Optional[Config] = None,
        store: Optional[LeaderboardStore] = None,
    ) -> None:
        super().__init__()
        self.dispatcher = InputDispatcher()
        self.session = TypingSession(config, store)

    def compose(self) -> ComposeResult:
        with Container(id="root"):
            self.stats_bar = StatsBar()
            self.prompt_view = PromptView()
            self.score_bar = ScoreBar()
            self.help_bar = HelpBar()
            yield self.stats_bar
            yield self.prompt_view
            yield self.score_bar
            yield self.help_bar

    def on_mount(self) -> None:
        logger.info(
            "Starting: %s round, %s words",
            self.session.round_time.label, self.session.text_theme.label,
        )
        self.session.refresh_leaderboard()
        self._render_all()
        self.set_interval(TICK_SEC, self._tick)

    def _tick(self) -> None:
        self.session.refresh_leaderboard()
        self.session.tick()
        self._render_all()
        self._check_exit()

    def on_key(self, event: events.Key) -> None:
        key = from_textual(event.key, event.character, event.is_printable)
        if key is None:
            return
        event.stop()
        event.prevent_default()
        self._handle(key)

    def action_quit_round(self) -> None:
        self._handle(QUIT)

    def _handle(self, key: KeyEvent) -> None:
        self.session = self.dispatcher.dispatch(self.session, key)
        self._render_all()
        self._check_exit()

    def _check_exit(self) -> None:
        if self.session.exit:
            self.exit()

    def _render_all(self) -> None:
        session = self.session
        self.stats_bar.update(render_stats(session))
        if session.screen is Screen.MAIN:
            self.prompt_view.update(render_prompt(session))
        elif session.screen is Screen.END_ROUND:
            self.prompt_view.update(render_summary(session))
        else:
            self.prompt_view.update(render_options(session))
        self.score_bar.update(render_leaderboard(session.top_scores))
        self.help_bar.update(render_help(session))
