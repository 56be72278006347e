"""ValidateService — check, parse, and resolve NSIDs and references.

Wraps the pure domain parsers so that malformed input becomes a failed
:class:`ServiceResult` instead of an exception. Stateless apart from the
``[check]`` config section.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from nsidctl.config.models import CheckConfig
from nsidctl.domain.errors import ParseError
from nsidctl.domain.fragment import Fragment
from nsidctl.domain.nsid import Nsid
from nsidctl.domain.reference import FullReference, Reference
from nsidctl.domain.types import InputKind
from nsidctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

_PARSERS: dict[InputKind, Callable[[str], object]] = {
    InputKind.NSID: Nsid,
    InputKind.FRAGMENT: Fragment,
    InputKind.REFERENCE: Reference.parse,
}


def describe_reference(reference: Reference) -> dict[str, Any]:
    """Break a parsed reference into a JSON-friendly dict of its parts."""
    data: dict[str, Any] = {"input": str(reference), "kind": str(reference.kind)}
    value = reference.value
    if not isinstance(value, FullReference):
        data["fragment"] = value.text
        data["fragment_name"] = value.name
        return data

    nsid = value.clone_nsid()
    fragment = value.clone_fragment()
    data.update(
        nsid=nsid.text,
        authority=nsid.authority,
        domain_authority=nsid.domain_authority,
        name=nsid.name,
        segments=list(nsid.segments()),
        fragment=fragment.text if fragment else None,
        fragment_name=value.fragment_name(),
    )
    return data


class ValidateService:
    """Validation operations for the CLI and other front ends."""

    def __init__(self, config: CheckConfig | None = None) -> None:
        self._config = config or CheckConfig()

    def check(self, values: Sequence[str], *, kind: InputKind | None = None) -> ServiceResult:
        """Validate every value in *values* as *kind*.

        Defaults to ``[check] default_kind``. The result fails if any value
        is invalid; the per-input breakdown is in ``data["items"]`` either way.
        """
        kind = InputKind(kind) if kind is not None else self._config.default_kind
        if not values:
            return ServiceResult(
                ok=False,
                op="check",
                error=ServiceError(code="NO_INPUT", message="No inputs to check"),
            )

        parser = _PARSERS[kind]
        items: list[dict[str, Any]] = []
        for value in values:
            try:
                parser(value)
            except ParseError as exc:
                logger.debug("Rejected %s %r: %s", kind, value, exc.reason)
                items.append({"input": value, "valid": False, "reason": str(exc.reason)})
                if self._config.stop_on_error:
                    break
            else:
                items.append({"input": value, "valid": True, "reason": None})

        warnings: list[str] = []
        skipped = len(values) - len(items)
        if skipped:
            warnings.append(f"Stopped at first invalid input; {skipped} not checked")

        invalid = [item["input"] for item in items if not item["valid"]]
        data = {
            "kind": str(kind),
            "items": items,
            "count": len(items),
            "valid": len(items) - len(invalid),
            "invalid": len(invalid),
        }
        logger.debug("Checked %d inputs as %s, %d invalid", len(items), kind, len(invalid))

        if invalid:
            return ServiceResult(
                ok=False,
                op="check",
                data=data,
                warnings=warnings,
                error=ServiceError(
                    code="INVALID_INPUT",
                    message=f"{len(invalid)} of {len(items)} inputs are invalid",
                    detail={"invalid": invalid},
                ),
            )
        return ServiceResult(ok=True, op="check", data=data, warnings=warnings)

    def parse(self, text: str) -> ServiceResult:
        """Parse *text* as a reference and report its parts."""
        try:
            reference = Reference.parse(text)
        except ParseError as exc:
            logger.debug("Failed to parse reference %r: %s", text, exc.reason)
            return ServiceResult(
                ok=False,
                op="parse_reference",
                error=ServiceError.from_parse_error(exc),
            )
        return ServiceResult(ok=True, op="parse_reference", data=describe_reference(reference))

    def resolve(self, base: str, reference: str) -> ServiceResult:
        """Resolve *reference* against the NSID *base*."""
        try:
            base_nsid = Nsid(base)
            parsed = Reference.parse(reference)
        except ParseError as exc:
            logger.debug("Failed to resolve %r against %r: %s", reference, base, exc.reason)
            return ServiceResult(
                ok=False,
                op="resolve_reference",
                error=ServiceError.from_parse_error(exc),
            )

        resolved = parsed.resolve(base_nsid)
        return ServiceResult(
            ok=True,
            op="resolve_reference",
            data={
                "base": base_nsid.text,
                "reference": str(parsed),
                "kind": str(parsed.kind),
                "resolved": str(resolved),
            },
        )
