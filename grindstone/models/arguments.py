"""Launch arguments, plain or guarded by rules."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..errors import DataFormatError
from .files import _field, _list, _mapping, _str, _str_list
from .rules import Rule

_SKIPPED_ARGUMENTS = frozenset({"--clientId", "--xuid", "${clientid}", "${auth_xuid}"})


@dataclass
class ComplexArgument:
    """An argument, or several, used only where its rules allow."""

    rules: list[Rule]
    value: str | list[str]

    def check_use(self) -> bool:
        """Whether every rule allows the argument on this machine."""
        return all(rule.allows() for rule in self.rules)

    def values(self) -> list[str]:
        """The argument values as a list."""
        return [self.value] if isinstance(self.value, str) else list(self.value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ComplexArgument:
        data = _mapping(data, "argument")
        rules = _list(_field(data, "rules", "compatibilityRules"), "rules")
        raw_value = _field(data, "value")
        value = raw_value if isinstance(raw_value, str) else _str_list(raw_value, "value")
        return cls(rules=[Rule.from_dict(rule) for rule in rules], value=value)

    def to_dict(self) -> dict[str, Any]:
        value = self.value if isinstance(self.value, str) else list(self.value)
        return {"rules": [rule.to_dict() for rule in self.rules], "value": value}


Argument = str | ComplexArgument


def parse_argument(data: Any) -> Argument:
    """Read an argument that is either a string or a ruled object."""
    if isinstance(data, str):
        return data
    if isinstance(data, Mapping):
        return ComplexArgument.from_dict(data)
    raise DataFormatError(f"argument must be a string or an object, got {type(data).__name__}")


def collect_arguments(args: Iterable[Argument]) -> list[str]:
    """Flatten arguments, dropping disallowed ones and account identifiers."""
    collected: list[str] = []
    for argument in args:
        if isinstance(argument, str):
            candidates = [argument]
        elif argument.check_use():
            candidates = argument.values()
        else:
            continue
        collected.extend(arg for arg in candidates if arg not in _SKIPPED_ARGUMENTS)
    return collected


def _argument_to_data(argument: Argument) -> Any:
    return argument if isinstance(argument, str) else argument.to_dict()


@dataclass
class Arguments:
    """Game and JVM arguments for launching."""

    game: list[Argument] = field(default_factory=list)
    jvm: list[Argument] = field(default_factory=list)

    def jvm_arguments(self) -> list[str]:
        return collect_arguments(self.jvm)

    def game_arguments(self) -> list[str]:
        return collect_arguments(self.game)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Arguments:
        data = _mapping(data, "arguments")
        return cls(
            game=[parse_argument(a) for a in _list(_field(data, "game"), "game")],
            jvm=[parse_argument(a) for a in _list(_field(data, "jvm"), "jvm")],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "game": [_argument_to_data(a) for a in self.game],
            "jvm": [_argument_to_data(a) for a in self.jvm],
        }


__all_arguments_types__ = (_str,)