"""Compare the documented contract with the tgwire binding.

:func:`compare` walks every parsed :class:`~docsync.parser.DocSection` and
reports what the binding is missing, what it has that the reference no
longer documents, and where requiredness or union variant order differ.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Iterable, List, Mapping, Optional

from docsync.parser import DocSection
from tgwire.codec import union_codec
from tgwire.models import wire_models, wire_unions
from tgwire.registry import MethodRegistry


@dataclasses.dataclass(frozen=True)
class DriftIssue:
    """One difference between the reference and the binding."""
    kind: str       # e.g. "missing-method", "extra-field", "union-variants"
    subject: str    # method, type or union name
    detail: str = ""

    def __str__(self) -> str:
        return f"{self.kind}: {self.subject}" + (f" ({self.detail})" if self.detail else "")


@dataclasses.dataclass
class DriftReport:
    issues: List[DriftIssue] = dataclasses.field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not self.issues

    def add(self, kind: str, subject: str, detail: str = "") -> None:
        self.issues.append(DriftIssue(kind, subject, detail))

    def kinds(self) -> List[str]:
        return [issue.kind for issue in self.issues]

    def lines(self) -> List[str]:
        """Human-readable report, one issue per line."""
        return [str(issue) for issue in self.issues]

    def __len__(self) -> int:
        return len(self.issues)


def _model_fields(model: Any) -> Dict[str, bool]:
    """Map wire names of *model* to whether the wire requires them."""
    return {field.alias or name: field.is_required() for name, field in model.model_fields.items()}


def _compare_fields(
    report: DriftReport,
    subject: str,
    documented: Dict[str, bool],
    bound: Dict[str, bool],
    noun: str,
) -> None:
    for name in documented:
        if name not in bound:
            report.add(f"missing-{noun}", subject, name)
    for name in bound:
        if name not in documented:
            report.add(f"extra-{noun}", subject, name)
    for name, required in documented.items():
        if name in bound and bound[name] != required:
            expected = "required" if required else "optional"
            report.add(f"{noun}-requiredness", subject, f"{name} should be {expected}")


def _compare_methods(report: DriftReport, sections: List[DocSection], registry: MethodRegistry) -> None:
    documented = {section.name: section for section in sections}
    for name, section in documented.items():
        entry = registry.get(name)
        if entry is None:
            report.add("missing-method", name)
            continue
        _compare_fields(
            report,
            name,
            {field.name: field.required for field in section.fields},
            dict(entry.params),
            "param",
        )
    for name in registry.names():
        if name not in documented:
            report.add("extra-method", name)


def _compare_types(
    report: DriftReport,
    sections: List[DocSection],
    models: Mapping[str, Any],
    unions: Mapping[str, Any],
) -> None:
    documented = set()
    for section in sections:
        documented.add(section.name)
        if section.is_union:
            alias = unions.get(section.name)
            codec = union_codec(alias) if alias is not None else None
            if codec is None:
                report.add("missing-union", section.name)
                continue
            bound = [getattr(candidate, "__name__", repr(candidate)) for candidate in codec.candidates]
            if bound != section.variants:
                report.add(
                    "union-variants",
                    section.name,
                    f"documented {', '.join(section.variants)}; bound {', '.join(bound)}",
                )
            continue
        model = models.get(section.name)
        if model is None:
            report.add("missing-type", section.name)
            continue
        _compare_fields(
            report,
            section.name,
            {field.name: field.required for field in section.fields},
            _model_fields(model),
            "field",
        )
    for name in models:
        if name not in documented:
            report.add("extra-type", name)


def compare(
    sections: Iterable[DocSection],
    registry: MethodRegistry,
    models: Optional[Mapping[str, Any]] = None,
    unions: Optional[Mapping[str, Any]] = None,
) -> DriftReport:
    """Return every difference between *sections* and the binding.

    *models* and *unions* default to everything declared in
    :mod:`tgwire.models`.
    """
    sections = list(sections)
    models = wire_models() if models is None else models
    unions = wire_unions() if unions is None else unions

    report = DriftReport()
    _compare_methods(report, [s for s in sections if s.is_method], registry)
    _compare_types(report, [s for s in sections if not s.is_method], models, unions)
    return report
