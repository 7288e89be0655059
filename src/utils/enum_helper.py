"""Enum conversion utilities"""

from enum import Enum
from typing import TypeVar, Type, Optional, List, Any

# Generic type for any Enum subclass
E = TypeVar("E", bound=Enum)

class EnumHelper:
    """
    Utility class for working with Enums:
    - Parse strings from YAML/CLI back to enum members (case-insensitive)
    - List member names for help texts and error messages
    """

    @staticmethod
    def from_string(enum_class: Type[E], name: str, case_insensitive: bool = True,
                    default: Optional[E] = None) -> E:
        """
        Parse string to Enum member.

        Args:
            enum_class: Enum class to parse into
            name: String name (case-insensitive by default)
            case_insensitive: If True, matches ignoring case
            default: Return value if not found (None = raise)

        Returns:
            Enum member or default if provided

        Raises:
            ValueError: Unknown name and no default
        """
        if not issubclass(enum_class, Enum):
            raise TypeError(f"{enum_class} is not an Enum class")

        text = str(name).strip()
        if case_insensitive:
            text = text.upper()

        for member in enum_class:
            if (member.name.upper() if case_insensitive else member.name) == text:
                return member

        if default is not None:
            return default
        raise ValueError(
            f"Invalid {enum_class.__name__} name: {name} "
            f"(expected one of {EnumHelper.list_names(enum_class, lowercase=True)})"
        )

    @staticmethod
    def list_names(enum_class: Type[E], lowercase: bool = False) -> List[str]:
        """
        List all Enum member names.

        Args:
            enum_class: Enum class to inspect
            lowercase: Return lowercase names

        Returns:
            List of member names (strings)
        """
        if not issubclass(enum_class, Enum):
            raise TypeError(f"{enum_class} is not an Enum class")

        if lowercase:
            return [member.name.lower() for member in enum_class]
        return [member.name for member in enum_class]

    @staticmethod
    def to_enum(enum_class: Type[E], value: Any) -> E:
        """Convert string or enum instance to enum instance"""
        if isinstance(value, enum_class):
            return value
        if isinstance(value, str):
            return EnumHelper.from_string(enum_class, value)
        raise TypeError(f"Expected str or {enum_class.__name__}, got {type(value).__name__}")
