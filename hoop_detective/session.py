"""
One game: the attempt loop, the countdown and the terminal outcome.

Each turn races a single line read against the session deadline. The read
runs on a daemon thread and hands its line back over a queue; if the deadline
passes first the thread is simply abandoned and the game ends.
"""

from __future__ import annotations

import logging
import queue
import sys
import threading
import time
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, Optional, Tuple

from hoop_detective.directory import PlayerDirectory
from hoop_detective.hints import HintAllocator, name_hint
from hoop_detective.logics import compare_players, get_feedback, get_header, get_instructions, get_player_details
from hoop_detective.models import Player
from hoop_detective.utils import format_duration, format_time_remaining

logger = logging.getLogger(__name__)


class SessionState(Enum):
    ACTIVE = "active"
    WON = "won"
    LOST_BY_ATTEMPTS = "lost_by_attempts"
    LOST_BY_TIME = "lost_by_time"
    QUIT = "quit"


@dataclass(frozen=True)
class GameRules:
    max_attempts: int = 8
    max_hints: int = 3
    duration: float = 6 * 60
    # attempt number -> name hint level
    name_hint_checkpoints: Tuple[Tuple[int, int], ...] = ((4, 1), (6, 2))


class ThreadedLineReader:
    """Reads one line per call, giving up once ``timeout`` seconds have passed."""

    def __init__(self, stream=None):
        self.stream = stream

    def read_line(self, timeout: float) -> Optional[str]:
        """Return the line, None on timeout; raise EOFError if the stream is closed."""
        stream = self.stream if self.stream is not None else sys.stdin
        pipe: "queue.Queue[str]" = queue.Queue(maxsize=1)

        def reader_task():
            try:
                line = stream.readline()
            except (OSError, ValueError):
                # Unreadable stdin ends the game like a closed one
                line = ""
            pipe.put(line)

        worker = threading.Thread(target=reader_task, name="line-reader", daemon=True)
        worker.start()

        try:
            line = pipe.get(timeout=max(timeout, 0))
        except queue.Empty:
            return None
        if line == "":
            raise EOFError("input stream closed")
        return line.rstrip("\r\n")


class GameSession:
    def __init__(
        self,
        directory: PlayerDirectory,
        target: Optional[Player] = None,
        rules: Optional[GameRules] = None,
        reader=None,
        clock: Callable[[], float] = time.monotonic,
        rng=None,
    ):
        self.directory = directory
        self.target = target if target is not None else directory.pick_random_target()
        self.rules = rules or GameRules()
        self.reader = reader or ThreadedLineReader()
        self.clock = clock
        self.hints = HintAllocator(self.target, rng)

        self.state = SessionState.ACTIVE
        self.attempts = 0
        self.hints_used = 0
        self.started_at = clock()
        self.deadline = self.started_at + self.rules.duration
        logger.debug("Session started with %d players in the directory", len(directory))

    @property
    def hints_left(self) -> int:
        return self.rules.max_hints - self.hints_used

    def elapsed(self) -> float:
        return self.clock() - self.started_at

    def remaining_time(self) -> float:
        return self.deadline - self.clock()

    def print_intro(self):
        minutes = int(self.rules.duration // 60)
        started = datetime.now()
        print(get_instructions(len(self.directory)))
        print(
            f"\nYou have {self.rules.max_attempts} attempts and {minutes} minutes "
            "to guess the mystery NBA player!"
        )
        print(f"You can use up to {self.rules.max_hints} hints by typing 'hint'.")
        print("Type 'quit' to exit the game.")
        print(f"⏰ Game started at: {started:%H:%M:%S}")
        print(f"⏰ Time limit: {started + timedelta(seconds=self.rules.duration):%H:%M:%S}")
        print(get_header())

    def play(self) -> SessionState:
        while self.state is SessionState.ACTIVE and self.attempts < self.rules.max_attempts:
            remaining = self.remaining_time()
            if remaining <= 0:
                print(f"\n⏰ TIME'S UP! You ran out of time after {format_duration(self.elapsed())}.")
                self._lose(SessionState.LOST_BY_TIME)
                break

            print(
                f"\nAttempt {self.attempts + 1}/{self.rules.max_attempts} - "
                f"Time remaining: {format_time_remaining(remaining)} - Enter your guess: ",
                end="",
                flush=True,
            )
            try:
                line = self.reader.read_line(timeout=remaining)
            except EOFError:
                logger.info("Input closed while waiting for a guess")
                print("\n⏰ Input closed. The game is over.")
                self._lose(SessionState.LOST_BY_TIME)
                break

            if line is None:
                print(f"\n⏰ TIME'S UP! You ran out of time after {format_duration(self.elapsed())}.")
                self._lose(SessionState.LOST_BY_TIME)
                break

            self.handle_input(line)
        return self.state

    def handle_input(self, line: str) -> SessionState:
        if self.state is not SessionState.ACTIVE:
            raise RuntimeError(f"game already finished ({self.state.value})")

        command = line.strip()
        if command.lower() == "quit":
            self.quit()
        elif command.lower() == "hint":
            self._hint()
        else:
            self._guess(command)
        return self.state

    def quit(self):
        print(f"\nThanks for playing! The mystery player was: {self.target.name}")
        self._transition(SessionState.QUIT)

    def _hint(self):
        if self.hints_used >= self.rules.max_hints:
            print(f"❌ You've already used all {self.rules.max_hints} hints!")
            return

        revealed = self.hints.reveal_random_attribute()
        if revealed is None:
            print("❌ All available attributes have already been revealed!")
            return

        self.hints_used += 1
        _, text = revealed
        print(f"💡 Hint #{self.hints_used}: {text}")
        print(f"💡 Hints remaining: {self.hints_left}")

    def _guess(self, name: str):
        if not name:
            print("❌ Please type a player's name, 'hint' or 'quit'.")
            return

        guessed = self.directory.find_by_name(name)
        if guessed is None:
            print(f"❌ Player '{name}' not found. Please check the spelling.")
            suggestion = self.directory.suggest_name(name)
            if suggestion:
                print(f"🤔 Did you mean: {suggestion}?")
            print(
                "💡 Tip: Type 'hint' to get a clue about the mystery player "
                f"({self.hints_left} hints remaining)"
            )
            return

        self.attempts += 1
        print(get_feedback(compare_players(guessed, self.target)))

        if guessed.name == self.target.name:
            self._win()
            return

        if self.attempts == self.rules.max_attempts:
            print(
                f"\n💔 Game Over! You've used all {self.rules.max_attempts} attempts "
                f"in {format_duration(self.elapsed())}."
            )
            self._lose(SessionState.LOST_BY_ATTEMPTS)
            return

        level = dict(self.rules.name_hint_checkpoints).get(self.attempts)
        if level == 1:
            print(f"💡 Hint: The player's name starts with: {name_hint(self.target.name, 1)}")
        elif level == 2:
            print(f"💡 Hint: The player's name pattern: {name_hint(self.target.name, 2)}")

    def _win(self):
        print("\n🎉 CONGRATULATIONS! 🎉")
        print(f"You guessed correctly in {self.attempts} attempts and {format_duration(self.elapsed())}!")
        if self.hints_used > 0:
            print(f"You used {self.hints_used} hint(s) to help you.")
        print(f"The mystery player was: {self.target.name}")
        print(get_player_details(self.target))
        self._transition(SessionState.WON)

    def _lose(self, state: SessionState):
        print(f"The mystery player was: {self.target.name}")
        print(get_player_details(self.target))
        self._transition(state)

    def _transition(self, state: SessionState):
        logger.debug(
            "Session %s -> %s after %d attempts, %d hints",
            self.state.value,
            state.value,
            self.attempts,
            self.hints_used,
        )
        self.state = state
