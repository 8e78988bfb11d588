"""Result protocol shared by all layout algorithms.

Layout algorithms are generators of ``ConstructionResult`` values. Each value
is one of three variants:

    ElementResult   a construction element was created
    WarningResult   a non-blocking diagnostic
    ErrorResult     a blocking diagnostic

Diagnostics always arrive after the elements they reference. Callers either
consume the sequence lazily or collect it with ``aggregate_results``.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Literal, Mapping

from .elements import ConstructionElement, element_id_scope
from .value_objects import Bounds3D

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """A warning or error raised about a set of elements.

    Attributes:
        description: Human-readable message.
        elements: Ids of the elements the diagnostic was raised about.
        bounds: Merged bounds of those elements.
        group_key: Key consumers may use to report repeated diagnostics once.
        message_key: Stable key for translating the message.
        params: Values interpolated into the translated message.
    """

    description: str
    elements: tuple[str, ...]
    bounds: Bounds3D = Bounds3D.EMPTY
    group_key: str | None = None
    message_key: str | None = None
    params: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not self.elements:
            raise ValueError("A diagnostic must reference at least one element")


@dataclass(frozen=True)
class ElementResult:
    element: ConstructionElement
    kind: Literal["element"] = field(default="element", init=False)


@dataclass(frozen=True)
class WarningResult:
    diagnostic: Diagnostic
    kind: Literal["warning"] = field(default="warning", init=False)


@dataclass(frozen=True)
class ErrorResult:
    diagnostic: Diagnostic
    kind: Literal["error"] = field(default="error", init=False)


ConstructionResult = ElementResult | WarningResult | ErrorResult
ResultSequence = Iterator[ConstructionResult]


def yield_element(element: ConstructionElement) -> ElementResult:
    return ElementResult(element)


def diagnostic_for(
    elements: Iterable[ConstructionElement],
    description: str,
    group_key: str | None = None,
    message_key: str | None = None,
    params: Mapping[str, Any] | None = None,
) -> Diagnostic:
    """Build a diagnostic referencing elements, with their merged bounds."""
    elements = list(elements)
    return Diagnostic(
        description=description,
        elements=tuple(e.id for e in elements),
        bounds=Bounds3D.merge(*(e.bounds for e in elements)),
        group_key=group_key,
        message_key=message_key,
        params=dict(params or {}),
    )


def yield_warning(
    elements: Iterable[ConstructionElement],
    description: str,
    group_key: str | None = None,
    message_key: str | None = None,
    params: Mapping[str, Any] | None = None,
) -> WarningResult:
    return WarningResult(
        diagnostic_for(elements, description, group_key, message_key, params)
    )


def yield_error(
    elements: Iterable[ConstructionElement],
    description: str,
    group_key: str | None = None,
    message_key: str | None = None,
    params: Mapping[str, Any] | None = None,
) -> ErrorResult:
    return ErrorResult(
        diagnostic_for(elements, description, group_key, message_key, params)
    )


def numbered_results(results: Iterator[ConstructionResult]) -> ResultSequence:
    """Re-yield a layout's results with element ids counted from one.

    Each advance of the sequence runs in an id scope owned by this layout
    call. Layouts nested inside another scope (an infill wall's posts and
    bays, or every wall of a project) share the outer counter instead.
    """
    counter = itertools.count(1)
    while True:
        with element_id_scope(counter):
            try:
                result = next(results)
            except StopIteration:
                return
        yield result


def yield_and_collect_element_ids(
    results: Iterable[ConstructionResult], element_ids: list[str]
) -> ResultSequence:
    """Re-yield results while appending every emitted element id."""
    for result in results:
        if isinstance(result, ElementResult):
            element_ids.append(result.element.id)
        yield result


def yield_and_collect_elements(
    results: Iterable[ConstructionResult], elements: list[ConstructionElement]
) -> ResultSequence:
    """Re-yield results while appending every emitted element."""
    for result in results:
        if isinstance(result, ElementResult):
            elements.append(result.element)
        yield result


@dataclass
class AggregatedResults:
    """A fully drained result sequence, partitioned by variant."""

    elements: list[ConstructionElement] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)
    errors: list[Diagnostic] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when no errors were reported."""
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        """Process exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    @property
    def bounds(self) -> Bounds3D:
        """Bounds enclosing all elements."""
        return Bounds3D.merge(*(e.bounds for e in self.elements))

    def extend(self, other: AggregatedResults) -> None:
        self.elements.extend(other.elements)
        self.warnings.extend(other.warnings)
        self.errors.extend(other.errors)

    def group_diagnostics(self) -> tuple[list[Diagnostic], list[Diagnostic]]:
        """Collapse diagnostics sharing a group key.

        The first diagnostic of each group is kept with the element ids and
        bounds of the whole group merged into it. Diagnostics without a group
        key are kept as they are.

        Returns:
            Tuple of (warnings, errors).
        """
        return _group(self.warnings), _group(self.errors)


def _group(diagnostics: list[Diagnostic]) -> list[Diagnostic]:
    grouped: list[Diagnostic] = []
    index_by_key: dict[str, int] = {}
    for diagnostic in diagnostics:
        key = diagnostic.group_key
        if key is None:
            grouped.append(diagnostic)
            continue
        if key not in index_by_key:
            index_by_key[key] = len(grouped)
            grouped.append(diagnostic)
            continue
        first = grouped[index_by_key[key]]
        merged_ids = first.elements + tuple(
            i for i in diagnostic.elements if i not in first.elements
        )
        grouped[index_by_key[key]] = Diagnostic(
            description=first.description,
            elements=merged_ids,
            bounds=Bounds3D.merge(first.bounds, diagnostic.bounds),
            group_key=key,
            message_key=first.message_key,
            params=first.params,
        )
    return grouped


def aggregate_results(results: Iterable[ConstructionResult]) -> AggregatedResults:
    """Drain a result sequence into elements, warnings and errors.

    Emission order is preserved within each bucket.
    """
    aggregated = AggregatedResults()
    for result in results:
        match result:
            case ElementResult(element=element):
                aggregated.elements.append(element)
            case WarningResult(diagnostic=diagnostic):
                aggregated.warnings.append(diagnostic)
            case ErrorResult(diagnostic=diagnostic):
                aggregated.errors.append(diagnostic)
            case _:
                raise TypeError(f"Unknown construction result: {result!r}")
    logger.debug(
        f"Aggregated {len(aggregated.elements)} elements, "
        f"{len(aggregated.warnings)} warnings, {len(aggregated.errors)} errors"
    )
    return aggregated
