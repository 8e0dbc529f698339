# topmark:header:start
#
#   project      : PragmaScan
#   file         : model.py
#   file_relpath : src/pragmascan/pragma/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types for parsed pragmas.

A fixture line that carries expectations is described by a [`Pragma`][]: a
mapping from issue code to the ordered [`Issue`][] instances declared for it,
plus a ``hit`` map owned by the test harness. [`PragmaDeclaration`][] is the raw
unit produced by the grammar before declarations are attached to a line.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Issue:
    """One expected finding.

    Attributes:
        message (str): Expected message text; empty means unconstrained.
        column (int): Expected column; ``0`` means unspecified.
    """

    message: str = ""
    column: int = 0


@dataclass(frozen=True)
class PragmaDeclaration:
    """A single ``[CODE]: entries`` declaration as found in a comment.

    Attributes:
        code (str): Issue code, e.g. ``"GO-W1000"``.
        issues (tuple[Issue, ...]): Declared entries in source order. Empty when
            the declaration has no entry list.
    """

    code: str
    issues: tuple[Issue, ...] = ()


@dataclass
class Pragma:
    """All expectations attached to one source line.

    ``issues`` and ``hit`` always share the same key set; use
    [`declare`][pragmascan.pragma.model.Pragma.declare] rather than writing
    ``issues`` directly.

    Attributes:
        issues (dict[str, tuple[Issue, ...]]): Issue code to declared issues.
        hit (dict[str, bool]): Issue code to "observed during the analyzer run".
            Initialized to ``False``; flipped by the harness only.
    """

    issues: dict[str, tuple[Issue, ...]] = field(default_factory=lambda: {})
    hit: dict[str, bool] = field(default_factory=lambda: {})

    def declare(self, code: str, issues: tuple[Issue, ...]) -> None:
        """Declare ``code`` on this line, replacing any earlier declaration of it."""
        self.issues[code] = issues
        self.hit[code] = False

    @property
    def codes(self) -> list[str]:
        """Declared codes in declaration order."""
        return list(self.issues)

    def mark_hit(self, code: str) -> None:
        """Record that a finding for ``code`` was observed.

        Raises:
            KeyError: If ``code`` was never declared on this line.
        """
        if code not in self.issues:
            raise KeyError(code)
        self.hit[code] = True

    def unhit_codes(self) -> list[str]:
        """Return declared codes that were not observed, in declaration order."""
        return [code for code, was_hit in self.hit.items() if not was_hit]
