"""Stand-alone name check, for UIs that validate while the user types."""

from __future__ import annotations

from collections.abc import Iterable

from renamectl.domain.validation import validate_name
from renamectl.services._helpers import fail
from renamectl.services.result import ServiceResult
from renamectl.services.telemetry import traced


@traced
def check_name(
    draft: str,
    *,
    existing_names: Iterable[str] = (),
    reject_duplicates: bool = False,
) -> ServiceResult:
    """Run the validator on *draft* without touching any workspace."""
    op = "check_name"
    vr = validate_name(draft, existing_names=existing_names, reject_duplicates=reject_duplicates)
    if not vr.valid:
        return fail(
            op,
            str(vr.error),
            vr.message or "Invalid name",
            category="validation",
            name=vr.name,
        )
    return ServiceResult(ok=True, op=op, data={"name": vr.name, "trimmed": vr.name != draft})
