# topmark:header:start
#
#   project      : PragmaScan
#   file         : file.py
#   file_relpath : src/pragmascan/pragma/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""A scanned fixture: its comment prefixes and pragma table."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from pragmascan.dialects.registry import prefixes_for_path
from pragmascan.pragma.scanner import scan
from pragmascan.reader import read_fixture_text

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from pragmascan.config.model import Config
    from pragmascan.pragma.model import Pragma


@dataclass
class PragmaFile:
    """Pragma table of one fixture.

    Attributes:
        pragmas (dict[int, Pragma]): 1-based line number to attached pragma.
        comment_prefixes (tuple[str, ...]): Prefixes the fixture was scanned with.
        path (Path | None): Source path when read from disk.
    """

    pragmas: dict[int, Pragma] = field(default_factory=lambda: {})
    comment_prefixes: tuple[str, ...] = ()
    path: Path | None = None

    @classmethod
    def from_content(
        cls,
        content: str,
        comment_prefixes: Sequence[str],
        *,
        path: Path | None = None,
    ) -> PragmaFile:
        """Scan ``content`` with the given comment prefixes."""
        prefixes = tuple(comment_prefixes)
        return cls(pragmas=scan(content, prefixes), comment_prefixes=prefixes, path=path)

    @classmethod
    def from_path(
        cls,
        path: Path | str,
        comment_prefixes: Sequence[str] | None = None,
        *,
        config: Config | None = None,
    ) -> PragmaFile:
        """Read and scan a fixture file.

        Args:
            path (Path | str): Fixture path.
            comment_prefixes (Sequence[str] | None): Explicit prefixes; resolved
                from the dialect registry (and ``config``) when None.
            config (Config | None): Configuration providing extra dialects.

        Returns:
            PragmaFile: The scanned fixture.

        Raises:
            UnknownDialectError: If no prefixes were given and none can be resolved.
            FixtureReadError: If the file cannot be read.
        """
        p = Path(path)
        prefixes = (
            tuple(comment_prefixes)
            if comment_prefixes is not None
            else prefixes_for_path(p, config)
        )
        return cls.from_content(read_fixture_text(p), prefixes, path=p)

    def pragma_at(self, line: int) -> Pragma | None:
        """Return the pragma attached to ``line``, if any."""
        return self.pragmas.get(line)

    def __iter__(self) -> Iterator[tuple[int, Pragma]]:
        """Iterate ``(line, pragma)`` pairs in line order."""
        return iter(sorted(self.pragmas.items()))

    def __len__(self) -> int:
        return len(self.pragmas)
