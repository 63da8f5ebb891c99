"""Exceptions raised while building a board from a move history."""

from __future__ import annotations


class MoveError(ValueError):
    """Base class for rejected board sizes, move strings and placements."""


class InvalidSize(MoveError):
    pass


class MalformedMove(MoveError):
    pass


class InvalidSymbol(MoveError):
    pass


class InvalidPlayer(InvalidSymbol):
    """Player-to-move is not one of the two symbol literals."""


class InvalidCoordinate(MoveError):
    pass


class OutOfBounds(MoveError):
    pass


class CellOccupied(MoveError):
    pass
