from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Optional

from tictactoe.ai.config import MIN_LEVEL
from tictactoe.ai.memory import PatternMemory
from tictactoe.ai.learner import OutcomeLearner
from tictactoe.ai.robo_ai import RoboAI
from tictactoe.app.match import Match
from tictactoe.cli.commands import Command, CommandProcessor, CommandType
from tictactoe.cli.view import CliView, Message, MessageType

logger = logging.getLogger(__name__)


@dataclass
class PlayConfig:
    board_size: int = 3
    lvl: int = MIN_LEVEL
    memory_path: Optional[str] = None  # None = default file; "" = in-process only
    seed: Optional[int] = None
    robo_delay_sec: float = 0.35
    reset_delay_sec: float = 1.2
    clear_screen: bool = True


class PlayController:
    """
    Human vs robo terminal loop:
      - render (board + message + state)
      - read one line, parse into Command or cell index
      - apply the human move, then let the robo reply
      - after a finished round, pause and start the next one

    The robo's search runs after the human move has been rendered.
    """

    def __init__(
        self,
        *,
        config: PlayConfig,
        input_fn: Callable[[str], str] = input,
        sleep_fn: Callable[[float], None] = time.sleep,
    ) -> None:
        self.cfg = config
        self._input = input_fn
        self._sleep = sleep_fn

        if config.memory_path == "":
            memory = PatternMemory.in_memory()
        elif config.memory_path is None:
            memory = PatternMemory()
        else:
            memory = PatternMemory.from_file(config.memory_path)

        ai = RoboAI(memory=memory, rng=random.Random(config.seed))
        self.match = Match(ai, OutcomeLearner(memory), size=config.board_size, level=config.lvl)
        self.view = CliView(clear=config.clear_screen)
        self.cmd = CommandProcessor(board_size=config.board_size)
        self._running = True

    # ---------- Main loop ----------

    def run(self) -> None:
        self.view.set_message(Message(MessageType.INFO, self.cmd.help_text()))
        while self._running:
            self.view.render(self.match)
            try:
                line = self._input("")
            except EOFError:
                break

            parsed = self.cmd.parse(line)
            if not parsed.ok:
                if parsed.error:
                    self.view.set_error(parsed.error)
                continue

            if parsed.command is not None:
                self.handle_command(parsed.command)
            elif parsed.index is not None:
                self.handle_move(parsed.index)

        logger.info("Session ended on %dx%d at level %d", self.match.size, self.match.size, self.match.level)

    # ---------- Input handling ----------

    def handle_command(self, command: Command) -> None:
        if command.type == CommandType.QUIT:
            self.view.set_message(Message(MessageType.QUIT, "Exiting..."))
            self._running = False
            return

        if command.type == CommandType.HELP:
            self.view.set_message(Message(MessageType.INFO, self.cmd.help_text()))
            return

        if command.type == CommandType.RESTART:
            self.match.reset_all()
            self.view.set_restart("Game restarted.")
            return

        if command.type == CommandType.SIZE:
            try:
                self.match.change_size(command.arg)
            except ValueError as e:
                self.view.set_error(str(e))
                return
            self.cmd = CommandProcessor(board_size=self.match.size)
            self.view.set_restart(f"New {self.match.size}x{self.match.size} board.")
            return

        self.view.set_error("Unknown/unsupported command. Use /help")

    def handle_move(self, index: int) -> None:
        result = self.match.play_human(index)
        if not result.success:
            self.view.set_error(result.error_message)
            return
        self.view.set_move(index, self.match.size, is_you=True)

        if self.match.finished is None:
            self.view.render(self.match)
            self._sleep(self.cfg.robo_delay_sec)
            robo = self.match.play_robo()
            if robo is not None:
                self.view.set_move(robo, self.match.size, is_you=False)

        if self.match.finished is not None:
            self._end_round()

    def _end_round(self) -> None:
        self.view.set_result(self.match.finished)
        self.view.render(self.match)
        self._sleep(self.cfg.reset_delay_sec)
        self.match.next_round()
