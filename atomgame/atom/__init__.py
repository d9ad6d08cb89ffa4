"""Atom models and element data."""

from .builder import AtomBuilder
from .models import NumberAtom

__all__ = ["AtomBuilder", "NumberAtom"]
