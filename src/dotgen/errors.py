"""Exceptions raised by dotgen.

Value constructors raise the built-in ValueError and division by zero raises
ZeroDivisionError; the classes below cover attribute tables and the context.
"""

from __future__ import annotations


class DotError(Exception):
    """Base error for the DOT object model."""


class UnsupportedAttributeError(DotError):
    """Raised when an attribute is not legal for the entity it is added to."""


class TypeMismatchError(DotError, TypeError):
    """Raised when an attribute receives a value of the wrong kind."""


class RangeError(DotError, ValueError):
    """Raised when an attribute value lies outside its documented bounds."""


class DuplicateIdError(DotError):
    """Raised when a name is registered twice."""
