"""
Exceptions raised by the domain, search and service layers.

Two families:
* InvalidActionError: the user asked for something the rules do not allow right now. The state is left untouched, so just try again.
* GameStateError: the caller did not respect the contract (move before select, undo on an empty history, ...). Programming error.
"""


class CheckersError(Exception):
    """Base class for all errors raised by this package."""


# --- USER INPUT (recoverable) ---
class InvalidActionError(CheckersError):
    """Action not allowed in the current position. Nothing was changed."""


class IllegalSelectionError(InvalidActionError):
    """Square is empty, holds an opponent's piece, or holds a piece that cannot move."""


class IllegalMoveError(InvalidActionError):
    """Destination is not among the legal destinations of the selected piece."""


# --- PRECONDITION VIOLATIONS ---
class GameStateError(CheckersError):
    """Operation called in a state that does not permit it."""


class InvalidBoardSizeError(GameStateError):
    """Board size must be even and at least 6."""


class InvalidNotationError(CheckersError):
    """Board notation string cannot be parsed."""


# --- SERVICE / API ---
class InvalidRequestError(CheckersError):
    """Raised by the request models when the input does not make sense."""


class GameNotFoundError(CheckersError):
    """No game is registered under the requested id."""
