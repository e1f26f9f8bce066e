"""
Closed tagged unions for contract messages.

A family (e.g. the name-minter execute messages) is a direct subclass of
ContractMsg declared without a tag. Each variant subclasses its family with
a ``tag=`` class keyword and declares its fields as a frozen dataclass:

    @dataclass(frozen=True)
    class Pause(NameMinterExecuteMsg, tag="pause"):
        pause: bool

    Pause(pause=True).to_wire()  # {"pause": {"pause": True}}

Fields defaulting to UNSET are dropped from the wire form when the caller
leaves them out. An explicit None is sent as null.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Mapping


class _Unset:
    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


class ContractMsg:
    """Base of every message family. Never instantiated directly."""

    tag = ""
    # Published JSON schema for the family, relative to the schema root
    schema_file = ""

    def __init_subclass__(cls, tag: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if tag is None:
            if ContractMsg not in cls.__bases__:
                raise TypeError(f"{cls.__name__} must declare a tag")
            cls._variants = {}
            return

        if ContractMsg in cls.__bases__:
            raise TypeError(f"{cls.__name__} is a family root and cannot take a tag")
        if tag in cls._variants:
            existing = cls._variants[tag].__name__
            raise TypeError(f"Duplicate tag {tag!r}: {cls.__name__} and {existing}")
        cls.tag = tag
        cls._variants[tag] = cls

    @classmethod
    def variants(cls) -> dict[str, type["ContractMsg"]]:
        """Registered variants of this family, keyed by wire tag."""
        return dict(cls._variants)

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> "ContractMsg":
        """
        Parse a single-key wire message into its variant.

        Raises:
            ValueError: If the payload is not a one-key object naming a
                variant of this family, or its body does not fit the variant
        """
        if not isinstance(payload, Mapping) or len(payload) != 1:
            raise ValueError(f"Expected a single-key message object, got: {payload!r}")

        tag, body = next(iter(payload.items()))
        variant = cls._variants.get(tag)
        if variant is None:
            raise ValueError(f"Unknown {cls.__name__} variant: {tag!r}")
        if not isinstance(body, Mapping):
            raise ValueError(f"Body of {tag!r} must be an object, got: {body!r}")

        names = {f.name for f in fields(variant)}
        extra = set(body) - names
        if extra:
            raise ValueError(f"Unexpected fields for {tag!r}: {sorted(extra)}")
        try:
            return variant(**body)
        except TypeError as exc:
            raise ValueError(f"Invalid body for {tag!r}: {exc}") from exc

    def to_wire(self) -> dict[str, dict[str, Any]]:
        body = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }
        return {self.tag: body}
