"""Line-oriented command scripts driving an ImageSession.

One command per line; blank lines and ``#`` comments are skipped::

    generate checkerboard 10 10
    apply blur
    apply mosaic 200
    undo
    save out.png

Commands
--------
- load PATH
- generate KIND HEIGHT WIDTH
- apply FILTER
- apply mosaic SEEDS
- undo / redo
- save PATH
"""
from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

import numpy as np

from .buffer import PixelBuffer
from .errors import PixMillError
from .mosaic import RandomLike
from .session import ImageSession
from .utils.loader import load_image, save_image

logger = logging.getLogger(__name__)

Loader = Callable[[Union[str, Path]], PixelBuffer]
Saver = Callable[[PixelBuffer, Union[str, Path]], None]


class ScriptError(PixMillError, ValueError):
    """A script line could not be parsed or executed."""

    def __init__(self, line_no: int, message: str):
        super().__init__(f"line {line_no}: {message}")
        self.line_no = line_no


def _int_arg(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"{what} must be an integer, got {token!r}") from None


class ScriptRunner:
    """Executes script commands against one session.

    Parameters
    ----------
    session : ImageSession | None
        Session to drive; a fresh one is created if None.
    loader, saver : callable
        File codec hooks; default to the Pillow helpers.
    rng : numpy.random.Generator | int | None
        Randomness handed to every mosaic command.
    """

    def __init__(
        self,
        session: Optional[ImageSession] = None,
        loader: Loader = load_image,
        saver: Saver = save_image,
        rng: RandomLike = None,
    ) -> None:
        self.session = session if session is not None else ImageSession()
        self.loader = loader
        self.saver = saver
        # one generator for the whole script so repeated mosaics differ
        self.rng = np.random.default_rng(rng) if isinstance(rng, int) else rng

    def run(self, lines: Iterable[str]) -> ImageSession:
        """Execute every command, stopping at the first failure."""
        for line_no, raw in enumerate(lines, start=1):
            try:
                tokens = shlex.split(raw, comments=True)
                if not tokens:
                    continue
                self.execute(tokens)
            except ScriptError:
                raise
            except (PixMillError, ValueError, OSError) as e:
                raise ScriptError(line_no, str(e)) from e
        return self.session

    def run_file(self, path: Union[str, Path]) -> ImageSession:
        with open(path, "r", encoding="utf-8") as f:
            return self.run(f)

    def execute(self, tokens: list) -> None:
        command, args = tokens[0].lower(), tokens[1:]
        logger.debug("script: %s %s", command, " ".join(args))
        if command == "load":
            self._expect(args, 1, "load PATH")
            self.session.load(self.loader(args[0]))
        elif command == "generate":
            self._expect(args, 3, "generate KIND HEIGHT WIDTH")
            self.session.generate(args[0], _int_arg(args[1], "height"), _int_arg(args[2], "width"))
        elif command == "apply":
            if not args:
                raise ValueError("Error: Missing filter type.")
            if args[0].lower() == "mosaic":
                self._expect(args, 2, "apply mosaic SEEDS")
                self.session.mosaic(_int_arg(args[1], "seed count"), self.rng)
            else:
                self._expect(args, 1, "apply FILTER")
                self.session.apply_filter(args[0])
        elif command == "undo":
            self._expect(args, 0, "undo")
            self.session.undo()
        elif command == "redo":
            self._expect(args, 0, "redo")
            self.session.redo()
        elif command == "save":
            self._expect(args, 1, "save PATH")
            self.saver(self.session.current, args[0])
        else:
            raise ValueError(f"Error: Not a valid command: {command!r}")

    @staticmethod
    def _expect(args: list, count: int, usage: str) -> None:
        if len(args) != count:
            raise ValueError(f"usage: {usage}")


__all__ = ["ScriptRunner", "ScriptError"]
