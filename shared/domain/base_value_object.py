"""
Base value object class.
"""
from abc import ABC
from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base value object class.
    Value objects are immutable and compared by their declared fields.
    """

    def _values(self) -> tuple:
        return tuple(getattr(self, f.name) for f in fields(self))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self._values() == other._values()

    def __hash__(self) -> int:
        return hash(self._values())

    def as_dict(self) -> Dict[str, Any]:
        """Shallow mapping of field name to value."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
