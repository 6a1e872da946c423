"""Normalize argv by unbundling short options and splitting ``--name=value``.

Example:
    >>> normalize(["-abc1", "--foo=bar"], niladic="ab", monadic="c", long_names=["foo"])
    ['-a', '-b', '-c', '1', '--foo', 'bar']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from argsmith.config import OptionSpec

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

log = logging.getLogger(__name__)


def looks_like_option(arg: str) -> bool:
    """Return True for ``-x``/``--x`` style arguments; a lone dash is a value."""
    return len(arg) > 1 and arg.startswith("-")


@dataclass(slots=True)
class _Scan:
    """Local state for one pass over argv."""

    argv: Sequence[str]
    niladic: frozenset[str]
    monadic: frozenset[str]
    long_names: frozenset[str]
    out: list[str] = field(default_factory=list)
    index: int = 0
    # Set by the first unbundled flag; later unknown-led bundles are expanded too.
    sticky: bool = False

    def take_value(self, flag: str) -> None:
        """Emit a value-taking flag with the following argument, when there is one."""
        self.out.append(flag)
        if self.index + 1 >= len(self.argv):
            return
        # An option-like follower is not unbundled or split: it passes through as-is.
        self.index += 1
        self.out.append(self.argv[self.index])

    def long_option(self, arg: str) -> None:
        name, sep, value = arg[2:].partition("=")
        if name not in self.long_names:
            self.out.append(arg)
        elif sep:
            self.out.extend((f"--{name}", value))
        else:
            self.take_value(arg)

    def bundle(self, arg: str) -> None:
        chars = arg[1:]
        if chars[0] not in self.niladic and chars[0] not in self.monadic and not self.sticky:
            self.out.append(arg)
            return

        for position, char in enumerate(chars):
            if char in self.monadic and char not in self.niladic:
                self.sticky = True
                rest = chars[position + 1 :]
                if rest:
                    self.out.extend((f"-{char}", rest))
                else:
                    self.take_value(f"-{char}")
                return
            if char in self.niladic:
                self.sticky = True
            self.out.append(f"-{char}")

    def run(self) -> list[str]:
        while self.index < len(self.argv):
            arg = self.argv[self.index]
            if arg.startswith("--"):
                self.long_option(arg)
            elif looks_like_option(arg):
                self.bundle(arg)
            else:
                self.out.append(arg)
            self.index += 1
        return self.out


def normalize(
    argv: Sequence[str] | str | None = None,
    niladic: Iterable[str] | None = "",
    monadic: Iterable[str] | None = "",
    long_names: Iterable[str] | str | None = (),
) -> list[str]:
    """Expand bundled short options and split recognised ``--name=value`` arguments.

    Args:
        argv: Arguments to normalize. A bare string is treated as a
            one-element argv; ``None`` or an empty value gives ``[]``.
        niladic: Short flags that never take a value, e.g. ``"abc"``.
        monadic: Short flags that take exactly one value, from the rest of
            their bundle or from the next argument.
        long_names: Value-taking long options as pipe-delimited alias
            groups, e.g. ``["foo|bar"]``.

    Returns:
        A new list; ``argv`` is never modified.
    """
    spec = OptionSpec(niladic=niladic, monadic=monadic, long_names=long_names)
    return normalize_with(argv, spec)


def normalize_with(argv: Sequence[str] | str | None, spec: OptionSpec) -> list[str]:
    """Same as :func:`normalize`, driven by a prebuilt :class:`OptionSpec`."""
    if not argv:
        return []
    if isinstance(argv, str):
        argv = [argv]

    scan = _Scan(
        argv=tuple(argv),
        niladic=frozenset(spec.niladic),
        monadic=frozenset(spec.monadic),
        long_names=spec.names,
    )
    result = scan.run()
    log.debug("Normalized %d arguments into %d", len(scan.argv), len(result))
    return result
