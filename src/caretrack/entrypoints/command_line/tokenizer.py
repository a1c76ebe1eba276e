"""Split command arguments into a preamble and prefixed values.

Arguments look like ``1 d/2099-01-01 t/09:00 type/medication notes/check vitals``.
A prefix only counts where it starts a whitespace-separated word, so
``type/`` is never mistaken for ``t/`` and a slash inside a value is left
alone. Everything before the first prefix is the preamble.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ArgumentMultimap:
    """Prefixed values in the order they appeared, plus the preamble."""

    preamble: str
    values: dict[str, list[str]] = field(default_factory=dict)

    def get_value(self, prefix: str) -> str | None:
        """Return the last value given for *prefix*, or None if absent."""
        found = self.values.get(prefix)
        return found[-1] if found else None

    def get_all_values(self, prefix: str) -> list[str]:
        """Return every value given for *prefix* (possibly empty)."""
        return list(self.values.get(prefix, []))

    def has(self, *prefixes: str) -> bool:
        """True if every one of *prefixes* was given at least once."""
        return all(prefix in self.values for prefix in prefixes)


def tokenize(args: str, *prefixes: str) -> ArgumentMultimap:
    """Tokenize *args* against the recognised *prefixes*.

    Args:
        args: Argument text following the command word.
        prefixes: Recognised prefixes, e.g. ``"d/"``, ``"type/"``.

    Returns:
        ArgumentMultimap: The trimmed preamble and the trimmed value(s) of
        each prefix that occurred.
    """
    if not prefixes:
        return ArgumentMultimap(preamble=args.strip())

    # longest first so "type/" wins over any shorter prefix it starts with
    alternatives = "|".join(
        re.escape(p) for p in sorted(prefixes, key=len, reverse=True)
    )
    pattern = re.compile(rf"(?:(?<=\s)|^)({alternatives})")

    matches = list(pattern.finditer(args))
    if not matches:
        return ArgumentMultimap(preamble=args.strip())

    values: dict[str, list[str]] = {}
    for match, following in _pairwise_with_end(matches):
        end = following.start() if following is not None else len(args)
        values.setdefault(match.group(1), []).append(args[match.end() : end].strip())

    return ArgumentMultimap(preamble=args[: matches[0].start()].strip(), values=values)


def _pairwise_with_end(
    matches: list[re.Match[str]],
) -> Iterable[tuple[re.Match[str], re.Match[str] | None]]:
    following: list[re.Match[str] | None] = [*matches[1:], None]
    return zip(matches, following)
