"""
Game Session for Wayfarer.

The turn loop. Each turn shows the scene, reads one command, dispatches
it to the movement or combat skill, and checks whether the game is over.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from wayfarer.engine.intent import CommandParser
from wayfarer.engine.models import Command, CommandType, SessionState, TurnResult
from wayfarer.engine.output import GameOutput
from wayfarer.models.character import Player
from wayfarer.models.world import Location, WorldGraph
from wayfarer.skills.combat import resolve_combat
from wayfarer.skills.movement import resolve_move

logger = logging.getLogger(__name__)

INVALID_COMMAND = "Huh? Invalid command!"
EXITS_HEADER = "There are exits available... "
FAREWELL = "Okay. Bye!"
DEATH_MESSAGES = (
    "YOU HAVE DIED!!",
    "You fall to the ground where your bones are eventually gnawed on by a large fuzzy animal.",
)


class GameSession:
    """
    Session state machine.

    Starts EXPLORING and moves to ENDED on QUIT or player death. Once
    ENDED, further commands are ignored.
    """

    def __init__(
        self,
        world: WorldGraph,
        start_location_id: str,
        output: GameOutput,
        *,
        player: Player | None = None,
        parser: CommandParser | None = None,
    ) -> None:
        self.world = world
        self.current_location: Location = world.get_location(start_location_id)
        self.output = output
        self.player = player or Player()
        self.parser = parser or CommandParser()
        self.state = SessionState.EXPLORING
        self.turn_count = 0

    @property
    def is_running(self) -> bool:
        return self.state == SessionState.EXPLORING

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def show_location(self) -> None:
        self.output.println(self.current_location.title)
        self.output.println(self.current_location.description)
        self.output.println()

    def show_characters(self) -> None:
        for npc in self.world.npcs_of(self.current_location):
            self.output.println(npc.describe())
        self.output.println()

    def show_exits(self) -> None:
        self.output.println(EXITS_HEADER)
        for exit_ in self.world.exits_of(self.current_location):
            self.output.println(str(exit_))

    def show_scene(self) -> None:
        """Location text, any NPCs (alive or dead), then the exits."""
        self.show_location()
        if self.current_location.has_characters():
            self.show_characters()
        self.show_exits()

    # -------------------------------------------------------------------------
    # Turn processing
    # -------------------------------------------------------------------------

    def process_command(self, player_input: str) -> TurnResult:
        """
        Process one line of input.

        Args:
            player_input: Raw line from the player

        Returns:
            TurnResult describing the outcome; command is None when the
            session had already ended
        """
        if not self.is_running:
            return self._result(None, valid=False, messages=[])

        self.turn_count += 1
        messages: list[str] = []
        self._emit(messages, "")

        command = self.parser.parse(player_input)
        logger.debug("Turn %d: %r classified as %s", self.turn_count, command.token, command.type.value)

        if not command.token:
            self._emit(messages, INVALID_COMMAND)
            return self._result(command, valid=False, messages=messages)

        valid = self._dispatch(command, messages)

        if not valid:
            self._emit(messages, INVALID_COMMAND)
            self._emit(messages, "")

        player_died = False
        if not self.player.is_alive:
            for line in DEATH_MESSAGES:
                self._emit(messages, line)
            self.state = SessionState.ENDED
            player_died = True
            logger.info("Session ended: player died at %s", self.current_location.id)

        return self._result(command, valid=valid, messages=messages, player_died=player_died)

    def _dispatch(self, command: Command, messages: list[str]) -> bool:
        if command.type == CommandType.MOVE:
            return self._do_move(command.token)

        if command.type == CommandType.ATTACK:
            return self._do_attack(command.token, messages)

        if command.type == CommandType.QUIT:
            self._emit(messages, FAREWELL)
            self.state = SessionState.ENDED
            logger.info("Session ended: player quit after %d turns", self.turn_count)
            return True

        return False

    def _do_move(self, token: str) -> bool:
        result = resolve_move(self.world, self.current_location, token)
        if not result.success or result.destination is None:
            return False

        logger.debug("Moving %s -> %s", self.current_location.id, result.destination.id)
        self.current_location = result.destination
        self.player.restore()
        return True

    def _do_attack(self, token: str, messages: list[str]) -> bool:
        result = resolve_combat(self.player, self.current_location, token)
        for line in result.messages:
            self._emit(messages, line)
        return result.success

    def _emit(self, messages: list[str], text: str) -> None:
        messages.append(text)
        self.output.println(text)

    def _result(
        self,
        command: Command | None,
        *,
        valid: bool,
        messages: list[str],
        player_died: bool = False,
    ) -> TurnResult:
        return TurnResult(
            command=command,
            valid=valid,
            state=self.state,
            location_id=self.current_location.id,
            player_hp=self.player.hit_points,
            player_died=player_died,
            messages=messages,
        )

    # -------------------------------------------------------------------------
    # Loop
    # -------------------------------------------------------------------------

    def play_turn(self, read_line: Callable[[], str]) -> TurnResult:
        """Show the scene, read one line and process it."""
        self.show_scene()
        return self.process_command(read_line())

    def run(self, read_line: Callable[[], str]) -> None:
        """
        Play until the session ends.

        Exceptions raised by read_line (end of input, I/O errors)
        propagate to the caller.
        """
        while self.is_running:
            self.play_turn(read_line)
