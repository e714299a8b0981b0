"""Interactive console game played through a labyrinth."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import TextIO

from .labyrinth import (
    Direction,
    Item,
    Labyrinth,
    MoveOutcome,
    Player,
    collect_item,
    discard_item,
    move,
)
from .csvutil import wait_for_key_press

DEFAULT_CSV = "graphquest.csv"

MAIN_MENU = (
    "\n--- GraphQuest ---\n"
    "1. Cargar laberinto CSV\n"
    "2. Comenzar juego\n"
    "3. Salir\n"
    "Selccionar Opción: "
)

GAME_MENU = (
    "\n--- Menú del Juego ---\n"
    "1. Recoger ítem(s)\n"
    "2. Descartar ítem(s)\n"
    "3. Avanzar en una dirección (WASD)\n"
    "4. Reiniciar partida\n"
    "5. Salir del juego\n"
    "Seleccione una opción: "
)

OUT_OF_TIME = "¡Te has quedado sin tiempo! Fin del juego.\n"
COLLECT_PROMPT = "Ingrese el número del ítem a recoger (0 para terminar): "
DIRECTION_PROMPT = (
    "¿A qué dirección quieres avanzar? (W = arriba, S = abajo, A = izquierda, D = derecha): "
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_MENU_CHOICE = re.compile(r"[ \t\n\r\f\v]*[+-]?\d+\n")
_DIRECTION_LABELS = (
    (Direction.UP, "W (arriba)"),
    (Direction.DOWN, "S (abajo)"),
    (Direction.LEFT, "A (izquierda)"),
    (Direction.RIGHT, "D (derecha)"),
)


def _item_lines(items: Sequence[Item]) -> str:
    return "".join(
        f"  {number}) {item.name} (Valor: {item.value}, Peso: {item.weight})\n"
        for number, item in enumerate(items, start=1)
    )


class Game:
    """One play-through: a player walking a labyrinth from its first room."""

    def __init__(
        self,
        labyrinth: Labyrinth,
        inp: TextIO | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.labyrinth = labyrinth
        self.backup = labyrinth.copy()
        self.inp = inp if inp is not None else sys.stdin
        self.out = out if out is not None else sys.stdout
        self.player = Player()
        self.room = labyrinth.initial_room()
        self.playing = True

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def _read_line(self) -> str:
        line = self.inp.readline()
        if not line:
            raise EOFError("input exhausted")
        return line

    def _read_int(self) -> int | None:
        match = _LEADING_INT.match(self._read_line())
        return int(match.group(1)) if match else None

    def _pause(self) -> None:
        wait_for_key_press(self.inp, self.out)

    def show_status(self) -> None:
        """Write the current room, the remaining time, the inventory and the exits."""
        room, player = self.room, self.player
        parts = [
            "\n=== Estado Actual ===\n",
            f"Sala: {room.name}\n",
            f"Descripción: {room.description}\n",
            "\nÍtems en la sala:\n",
            _item_lines(room.items) or "  (No hay ítems en esta sala)\n",
            f"\nTiempo restante: {player.remaining_time}\n",
            "\nInventario del jugador:\n",
            _item_lines(player.items) or "  (Inventario vacío)\n",
            f"Peso total: {player.total_weight()}\n",
            f"Puntaje acumulado: {sum(item.value for item in player.items)}\n",
            "\nDirecciones disponibles:\n",
        ]
        parts.extend(
            f"  - {label}\n"
            for direction, label in _DIRECTION_LABELS
            if getattr(room, direction.name.lower()) != -1
        )
        self._write("".join(parts))

    def collect(self) -> None:
        """Let the player pick items from the current room until they enter 0."""
        room = self.room
        if not room.items:
            self._write("No hay ítems para recoger en esta sala.\n")
            self._pause()
            return

        self._write("Ítems disponibles para recoger:\n" + _item_lines(room.items) + COLLECT_PROMPT)
        while True:
            choice = self._read_int()
            if choice == 0:
                break
            if choice is None or not 1 <= choice <= len(room.items):
                self._write("Opción inválida. Intente nuevamente: ")
                continue

            item = collect_item(self.player, room, choice - 1)
            if self.player.remaining_time <= 0:
                self._write(OUT_OF_TIME)
                break
            self._write(f"Recogiste: {item.name}\n")

            if not room.items:
                self._write("No quedan más ítems en la sala.\n")
                break
            self._write("Ítems restantes:\n" + _item_lines(room.items) + COLLECT_PROMPT)

    def discard(self) -> None:
        """Let the player drop inventory items until they enter 0."""
        player = self.player
        if not player.items:
            self._write("No tienes ítems para descartar.\n")
            self._pause()
            return

        while True:
            self._write(
                "\nÍtems en tu inventario:\n"
                + _item_lines(player.items)
                + "Ingrese el número del ítem a descartar (0 para terminar): "
            )
            choice = self._read_int()
            if choice == 0:
                break
            if choice is None or not 1 <= choice <= len(player.items):
                self._write("Opción inválida. Intente nuevamente.\n")
                self._pause()
                continue

            item = discard_item(player, choice - 1)
            self._write(f"Descartaste: {item.name}\n")
            if player.remaining_time <= 0:
                self._write(OUT_OF_TIME)
                break
            if not player.items:
                self._write("Ya no tienes más ítems en tu inventario.\n")
                break

    def advance(self) -> None:
        """Ask for a WASD direction and move the player that way."""
        self._write(DIRECTION_PROMPT)
        tokens = self._read_line().split()
        try:
            direction = Direction.from_key(tokens[0] if tokens else "")
        except ValueError:
            direction = None

        outcome = MoveOutcome.BLOCKED
        if direction is not None:
            self.room, outcome = move(self.player, self.room, self.labyrinth, direction)

        if outcome is MoveOutcome.BLOCKED:
            self._write("Dirección inválida o no disponible.\n")
            self._pause()
        elif outcome is MoveOutcome.NO_ROOM:
            self._write("No hay una sala en esa dirección.\n")
        elif outcome is MoveOutcome.OUT_OF_TIME:
            self._write(OUT_OF_TIME)
            self.playing = False
        else:
            self._write(f"Avanzaste a la sala: {self.room.name}\n")
            if outcome is MoveOutcome.REACHED_FINAL:
                self.playing = False

    def restart(self) -> None:
        """Put the labyrinth and the player back as they were at the start."""
        self._write("Reiniciando partida...\n")
        self._pause()
        self.player.reset()
        self.labyrinth.rooms = self.backup.copy().rooms
        self.room = self.labyrinth.initial_room()

    def run(self) -> bool:
        """Play until the player leaves, runs out of time or reaches the final room.

        Returns True when the final room was reached.
        """
        if self.room is None:
            self._write("No se encontró la sala inicial.\n")
            return False

        actions = {1: self.collect, 2: self.discard, 3: self.advance, 4: self.restart}
        try:
            while self.playing and not self.room.is_final:
                self.show_status()
                self._write(GAME_MENU)
                option = self._read_int()
                if option == 5:
                    self._write("Saliendo del juego...\n")
                    self.playing = False
                elif option in actions:
                    actions[option]()
                else:
                    self._write("Opción inválida.\n")
        except EOFError:
            self.playing = False

        if not self.room.is_final:
            return False

        self.show_status()
        self._write(
            "\n¡Felicidades! Has llegado a la sala final.\n"
            f"Puntaje final: {self.player.score}\n"
            "Ítems recolectados:\n"
            + _item_lines(self.player.items)
        )
        if not self.player.items:
            self._write("  (No recogiste ningún ítem)\n")
            self._pause()
        return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the main menu; an optional first argument names the labyrinth CSV."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else DEFAULT_CSV
    inp, out = sys.stdin, sys.stdout

    labyrinth = Labyrinth()
    backup: Labyrinth | None = None

    while True:
        out.write(MAIN_MENU)
        out.flush()
        line = inp.readline()
        if not line:
            break
        if not _MENU_CHOICE.fullmatch(line):
            out.write("Opción inválida.\n")
            continue

        option = int(line)
        if option == 1:
            try:
                loaded = Labyrinth.load(path)
            except OSError as exc:
                sys.stderr.write(f"Error Abriendo el archivo: {exc.strerror or exc}\n")
                continue
            except ValueError as exc:
                sys.stderr.write(f"Error leyendo el archivo: {exc}\n")
                continue
            labyrinth.rooms.update(loaded.rooms)
            backup = labyrinth.copy()
            out.write("Laberinto cargado exitosamente.\n")
        elif option == 2:
            if backup is None:
                out.write("Primero debes cargar un laberinto.\n")
            else:
                game = Game(labyrinth, inp, out)
                game.backup = backup
                game.run()
                # The menu discards one line of input after every game.
                inp.readline()
        elif option == 3:
            out.write("¡Hasta luego!\n")
            break

    out.flush()
    return 0