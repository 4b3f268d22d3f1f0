"""
Regex building blocks shared by the transform families.

A PatternTransform chains operations over the text:

- Rewrite: substitute every match, one ``replace`` record per altered match
- InsertComment: put a ``" TODO(S/4): ...`` line above each matching line
- Flag: report each matching line without touching the text

Operations run in order, each on the output of the previous one.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple, Union

from s4migrate.shared.domain.exceptions import TransformError
from s4migrate.transforms.base import ITransform
from s4migrate.transforms.domain.models import ChangeRecord, TransformResult

Replacement = Union[str, Callable[["re.Match[str]"], str]]

TODO_PREFIX = "TODO(S/4): "
_COMMENT_LINE = re.compile(r'^\s*["*]')
_INDENT = re.compile(r"^\s*")


def _compile(pattern: str, case_sensitive: bool = False) -> "re.Pattern[str]":
    flags = re.MULTILINE if case_sensitive else re.IGNORECASE | re.MULTILINE
    return re.compile(pattern, flags)


def _line_of(match: "re.Match[str]") -> int:
    return match.string.count("\n", 0, match.start()) + 1


class Operation(ABC):
    """One step of a PatternTransform."""

    @abstractmethod
    def run(self, source: str) -> Tuple[str, List[ChangeRecord]]:
        """Return the new text and the records narrating the edit."""


class Rewrite(Operation):
    """
    Substitute every match of ``pattern``.

    Args:
        pattern: Regular expression (case-insensitive unless ``case_sensitive``)
        replacement: Template using group references (``\\1``) or a callable
            receiving the match. Matches whose replacement equals the matched
            text are left alone and produce no record.
    """

    def __init__(self, pattern: str, replacement: Replacement, case_sensitive: bool = False):
        self.regex = _compile(pattern, case_sensitive)
        self.replacement = replacement

    def _expand(self, match: "re.Match[str]") -> str:
        if callable(self.replacement):
            return self.replacement(match)
        return match.expand(self.replacement)

    def run(self, source: str) -> Tuple[str, List[ChangeRecord]]:
        changes: List[ChangeRecord] = []

        def substitute(match: "re.Match[str]") -> str:
            new_text = self._expand(match)
            if new_text != match.group(0):
                changes.append(ChangeRecord.replace(match.group(0), new_text, line=_line_of(match)))
            return new_text

        return self.regex.sub(substitute, source), changes


class InsertComment(Operation):
    """
    Insert a TODO comment line above every line matching ``pattern``.

    The comment reuses the indentation of the target line. A line whose
    contiguous comment block above already carries the same note is skipped.

    Args:
        pattern: Regular expression searched within each line
        note: Comment text after the TODO prefix, or a callable on the match
        suggestion: Optional replacement API carried as ``to_text`` in the record
    """

    def __init__(
        self,
        pattern: str,
        note: Union[str, Callable[["re.Match[str]"], str]],
        suggestion: Optional[str] = None,
    ):
        self.regex = _compile(pattern)
        self.note = note
        self.suggestion = suggestion

    def run(self, source: str) -> Tuple[str, List[ChangeRecord]]:
        lines = source.split("\n")
        output: List[str] = []
        changes: List[ChangeRecord] = []

        for number, line in enumerate(lines, start=1):
            match = self.regex.search(line)
            if match:
                text = TODO_PREFIX + (self.note(match) if callable(self.note) else self.note)
                if not _already_commented(output, text):
                    indent = _INDENT.match(line).group(0)
                    output.append(f'{indent}" {text}')
                    changes.append(
                        ChangeRecord.comment(
                            note=text, target=match.group(0).strip(), line=number, to_text=self.suggestion
                        )
                    )
            output.append(line)

        return "\n".join(output), changes


def _already_commented(output: List[str], text: str) -> bool:
    """Check the comment block directly above the current line for ``text``."""
    for previous in reversed(output):
        if not _COMMENT_LINE.match(previous):
            return False
        if text in previous:
            return True
    return False


class Flag(Operation):
    """Report every match of ``pattern`` without changing the text."""

    def __init__(self, pattern: str, note: str):
        self.regex = _compile(pattern)
        self.note = note

    def run(self, source: str) -> Tuple[str, List[ChangeRecord]]:
        changes = [
            ChangeRecord.flag(target=match.group(0), note=self.note, line=_line_of(match))
            for match in self.regex.finditer(source)
        ]
        return source, changes


class PatternTransform(ITransform):
    """
    Transform made of regex operations applied in sequence.

    Usage:
        PatternTransform(
            "SIMPL-FIN-004",
            "Replace cost element tables with GL account master",
            Rewrite(r"\\bCSKA\\b", "SKA1"),
            Rewrite(r"\\bCSKB\\b", "SKB1"),
        )
    """

    def __init__(self, rule_id: str, description: str, *operations: Operation):
        if not operations:
            raise ValueError(f"Transform {rule_id} needs at least one operation")
        self._id = rule_id
        self._description = description
        self.operations = list(operations)

    @property
    def id(self) -> str:
        return self._id

    @property
    def description(self) -> str:
        return self._description

    def apply(self, source: str, finding=None) -> TransformResult:
        changes: List[ChangeRecord] = []
        for operation in self.operations:
            try:
                source, step_changes = operation.run(source)
            except (TypeError, IndexError, re.error) as e:
                raise TransformError(
                    f"Transform {self.id} failed in {type(operation).__name__}: {e}",
                    context={"transform_id": self.id},
                ) from e
            changes.extend(step_changes)
        return TransformResult(source=source, changes=changes)
