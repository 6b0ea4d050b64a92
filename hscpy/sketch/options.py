"""Parser modes and configuration options."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Mapping

from hscpy.sketch.model import DEFAULT_GROUP_KINDS, GroupKind


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Grouping-kind lookup and reporting flags for the sketch parser."""

    mode: ParseMode = ParseMode.STRICT
    group_kinds: Mapping[str, GroupKind] = field(default_factory=lambda: DEFAULT_GROUP_KINDS)
    report_ignored_modifiers: bool = True

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.PERMISSIVE:
            return ParserOptions(mode=mode, report_ignored_modifiers=False)

        return ParserOptions(mode=mode, report_ignored_modifiers=True)


def resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()
