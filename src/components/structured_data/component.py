"""
Structured-data component - schema.org JSON-LD builder.

Produces the application/ld+json payloads embedded in public pages.

Invariants:
- I1: Absent or empty optional fields are omitted from the output
- I2: The business is referenced by @id, never duplicated
- I3: Output is JSON-native and survives a serialize/parse round trip
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import BusinessProfile

from ._impl import build_local_business, build_schema, render_json_ld_script
from .models import JsonLd, SchemaSubject


@dataclass(frozen=True)
class BuildSchemaInput:
    """Input for building one schema; no subject means the LocalBusiness schema."""

    business: BusinessProfile
    subject: SchemaSubject | None = None


# --- Component Entry Points ---


def run(inp: BuildSchemaInput) -> JsonLd:
    """
    Main entry point for the structured-data component.

    Dispatches on the subject's record type.

    Args:
        inp: Business profile and optional subject record.

    Returns:
        JSON-LD object for the subject, or for the business itself.
    """
    if inp.subject is None:
        return build_local_business(inp.business)
    return build_schema(inp.subject, inp.business)


def run_scripts(business: BusinessProfile, *subjects: SchemaSubject | None) -> list[str]:
    """
    Render script elements for a page, in order.

    None stands for the LocalBusiness schema.
    """
    return [
        render_json_ld_script(run(BuildSchemaInput(business=business, subject=subject)))
        for subject in subjects
    ]
