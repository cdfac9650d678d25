from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from cinder import config
from cinder.builtin.env_builtin import register, register_one
from cinder.errors import CinderError, EntryPointError, ProgramStateError, UnboundName
from cinder.evaluation.expressions import apply
from cinder.evaluation.statements import Definition
from cinder.types.environment import Environment
from cinder.types.value import Expr, Variant

logger = logging.getLogger(__name__)


class Program:
    """
    Owns the global environment and the ordered top-level definitions.
    Running it executes the definitions, then calls the entry point with no
    arguments.
    """

    def __init__(self, entry_point: str | None = None):
        self.entry_point: str = entry_point or config.entry_point()
        if self.entry_point != config.DEFAULT_ENTRY_POINT:
            logger.debug(
                "Using entry point %s instead of %s",
                self.entry_point,
                config.DEFAULT_ENTRY_POINT,
            )
        self.env: Environment = Environment()
        register(self.env)

        self._definitions: list[Definition] = []
        self._ran = False

    @property
    def definitions(self) -> tuple[Definition, ...]:
        return tuple(self._definitions)

    def register_builtin(self, name: str, behavior: Callable[[Expr], Optional[Expr]]) -> None:
        register_one(self.env, name, behavior)

    def add(self, definition: Definition) -> None:
        if not isinstance(definition, Definition):
            raise TypeError(f"Expected a Definition, got {type(definition).__name__}")
        self._definitions.append(definition)

    def run(self) -> None:
        if self._ran:
            raise ProgramStateError("Program has already been run")
        self._ran = True

        for definition in self._definitions:
            logger.debug("Defining %s", definition.name)
            definition.execute(self.env)

        try:
            main = self.env.get(self.entry_point)
        except UnboundName:
            raise EntryPointError(
                f"Entry point {self.entry_point} is not defined", self.entry_point
            ) from None

        match main.variant:
            case Variant.FUNCTION:
                logger.debug("Calling entry point %s", self.entry_point)
                apply(main, [], self.env)
            case _:
                raise EntryPointError(
                    f"Entry point {self.entry_point} is not a function: {main.render()}",
                    self.entry_point,
                )

    def render(self) -> str:
        return "\n".join(d.render() for d in self._definitions)

    def __str__(self) -> str:
        return self.render()


def run_program(program: Program, stderr: TextIO | None = None) -> int:
    """Run `program`, reporting a CinderError as a diagnostic.

    Returns the exit status: 0 on success, 1 when the run failed.
    """
    stream = stderr if stderr is not None else sys.stderr
    try:
        program.run()
    except CinderError as e:
        logger.debug("Run failed", exc_info=True)
        stream.write(f"error: {type(e).__name__}: {e}\n")
        return 1
    return 0
