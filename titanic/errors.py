""" Fatal error kinds of the titanic pipeline.

Every failure here ends the run: the CLI reports the message and exits,
nothing is retried. """

import textwrap
from typing import Optional


class TitanicError(RuntimeError):
    """ Base error for all pipeline failures. """

    def __init__(self, message: str, *, hint: Optional[str] = None) -> None:
        final_message = message
        if hint:
            final_message = f'{message}\n{textwrap.indent(f"Hint: {hint}", prefix="  ")}'
        super().__init__(final_message)
        self.message = message
        self.hint = hint


class LoadError(TitanicError):
    """ A data file or model snapshot is missing or unreadable. """


class ParseError(TitanicError):
    """ A cell cannot be converted to its declared column type. """


class ShapeMismatch(TitanicError):
    """ A stored model architecture disagrees with the requested one. """


class EmptyDatasetError(TitanicError):
    """ A batch was requested over zero rows. """


__all__ = [
    'TitanicError',
    'LoadError',
    'ParseError',
    'ShapeMismatch',
    'EmptyDatasetError',
]
