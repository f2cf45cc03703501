"""Seed script: load the baseline en-US reference data into the Inception database.

Creates:
1. General reference data (countries, languages, regions, measurement systems,
   unit types and units)
2. Shared party reference data (genders, marital statuses, marriage types,
   employment statuses and types, titles, races, next of kin types,
   occupations, party external reference types)
3. Shared operations external reference types

Idempotent: reference rows are merged by primary key and existing external
reference types are left alone, so the script is safe to run repeatedly.

Usage:
    python -m scripts.seed          # against DATABASE_URL from .env
    pytest tests/scripts/test_seed.py  # against aiosqlite in-memory
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from inception.db.tables import ReferenceColumns
from inception.models.common import ObjectType
from inception.repositories.operations_reference import ExternalReferenceTypeRepository
from inception.repositories.reference import (
    PARTY_REFERENCE_ROWS,
    REFERENCE_ROWS,
    ReferenceRepository,
)

LOCALE_ID = "en-US"

# ---------------------------------------------------------------------------
# General reference data
# ---------------------------------------------------------------------------

REFERENCE_DATA: dict[str, list[dict]] = {
    "countries": [
        {"code": "GB", "name": "United Kingdom", "short_name": "United Kingdom",
         "sovereign_state": "GB", "nationality": "British"},
        {"code": "US", "name": "United States of America", "short_name": "United States",
         "sovereign_state": "US", "nationality": "American"},
        {"code": "ZA", "name": "South Africa", "short_name": "South Africa",
         "sovereign_state": "ZA", "nationality": "South African"},
    ],
    "languages": [
        {"code": "AF", "name": "Afrikaans", "short_name": "Afrikaans"},
        {"code": "EN", "name": "English", "short_name": "English"},
        {"code": "ZU", "name": "Zulu", "short_name": "Zulu"},
    ],
    "regions": [
        {"code": "EC", "country": "ZA", "name": "Eastern Cape"},
        {"code": "GP", "country": "ZA", "name": "Gauteng"},
        {"code": "KZN", "country": "ZA", "name": "KwaZulu-Natal"},
        {"code": "WC", "country": "ZA", "name": "Western Cape"},
    ],
    "measurementSystems": [
        {"code": "metric", "name": "Metric"},
        {"code": "imperial", "name": "Imperial"},
        {"code": "us_customary", "name": "US Customary"},
    ],
    "measurementUnitTypes": [
        {"code": "length", "name": "Length"},
        {"code": "mass", "name": "Mass"},
        {"code": "volume", "name": "Volume"},
    ],
    "measurementUnits": [
        {"code": "metric_centimeter", "system": "metric", "type": "length", "name": "Centimeter"},
        {"code": "metric_kilogram", "system": "metric", "type": "mass", "name": "Kilogram"},
        {"code": "metric_litre", "system": "metric", "type": "volume", "name": "Litre"},
        {"code": "imperial_inch", "system": "imperial", "type": "length", "name": "Inch"},
        {"code": "imperial_pound", "system": "imperial", "type": "mass", "name": "Pound"},
    ],
}

# ---------------------------------------------------------------------------
# Party reference data (shared: tenant_id NULL)
# ---------------------------------------------------------------------------

PARTY_REFERENCE_DATA: dict[str, list[dict]] = {
    "genders": [
        {"code": "female", "name": "Female"},
        {"code": "male", "name": "Male"},
        {"code": "non_binary", "name": "Non-binary"},
        {"code": "unknown", "name": "Unknown"},
    ],
    "maritalStatuses": [
        {"code": "single", "name": "Single"},
        {"code": "married", "name": "Married"},
        {"code": "divorced", "name": "Divorced"},
        {"code": "widowed", "name": "Widowed"},
    ],
    "marriageTypes": [
        {"code": "in_community", "marital_status": "married",
         "name": "In Community Of Property"},
        {"code": "anc_with_accrual", "marital_status": "married",
         "name": "ANC With Accrual"},
        {"code": "anc_without_accrual", "marital_status": "married",
         "name": "ANC Without Accrual"},
    ],
    "employmentStatuses": [
        {"code": "employed", "name": "Employed"},
        {"code": "unemployed", "name": "Unemployed"},
        {"code": "retired", "name": "Retired"},
    ],
    "employmentTypes": [
        {"code": "full_time", "employment_status": "employed", "name": "Full-time"},
        {"code": "part_time", "employment_status": "employed", "name": "Part-time"},
        {"code": "self_employed", "employment_status": "employed", "name": "Self-employed"},
    ],
    "titles": [
        {"code": "mr", "abbreviation": "Mr", "name": "Mister"},
        {"code": "mrs", "abbreviation": "Mrs", "name": "Missus"},
        {"code": "ms", "abbreviation": "Ms", "name": "Miss"},
        {"code": "dr", "abbreviation": "Dr", "name": "Doctor"},
    ],
    "races": [
        {"code": "black", "name": "Black"},
        {"code": "coloured", "name": "Coloured"},
        {"code": "indian", "name": "Indian or Asian"},
        {"code": "white", "name": "White"},
        {"code": "unknown", "name": "Unknown"},
    ],
    "nextOfKinTypes": [
        {"code": "spouse", "name": "Spouse"},
        {"code": "parent", "name": "Parent"},
        {"code": "sibling", "name": "Sibling"},
        {"code": "child", "name": "Child"},
    ],
    "occupations": [
        {"code": "accountant", "name": "Accountant"},
        {"code": "engineer", "name": "Engineer"},
        {"code": "nurse", "name": "Nurse"},
        {"code": "unknown", "name": "Unknown"},
    ],
    "externalReferenceTypes": [
        {"code": "za_id_number", "name": "South African ID Number",
         "party_types": ["person"], "pattern": r"\d{13}"},
        {"code": "passport_number", "name": "Passport Number",
         "party_types": ["person"], "pattern": None},
        {"code": "company_registration", "name": "Company Registration Number",
         "party_types": ["organization"], "pattern": None},
    ],
    "identificationTypes": [
        {"code": "za_id_book", "name": "South African ID Book"},
        {"code": "za_id_card", "name": "South African ID Card"},
        {"code": "passport", "name": "Passport"},
    ],
    "taxNumberTypes": [
        {"code": "za_income_tax_number", "name": "South African Income Tax Number"},
        {"code": "za_vat_number", "name": "South African VAT Number"},
    ],
    "residencyStatuses": [
        {"code": "citizen", "name": "Citizen"},
        {"code": "permanent_resident", "name": "Permanent Resident"},
        {"code": "foreign_national", "name": "Foreign National"},
    ],
    "residencePermitTypes": [
        {"code": "za_general_work", "name": "General Work Visa"},
        {"code": "za_study", "name": "Study Visa"},
        {"code": "za_permanent", "name": "Permanent Residence Permit"},
    ],
    "residentialTypes": [
        {"code": "owner", "name": "Owner"},
        {"code": "renter", "name": "Renter"},
        {"code": "living_with_family", "name": "Living With Family"},
    ],
    "sourceOfFundsTypes": [
        {"code": "salary", "name": "Salary"},
        {"code": "savings", "name": "Savings"},
        {"code": "pension", "name": "Pension"},
    ],
    "sourceOfWealthTypes": [
        {"code": "inheritance", "name": "Inheritance"},
        {"code": "business", "name": "Business Income"},
        {"code": "investments", "name": "Investments"},
    ],
    "contactMechanismTypes": [
        {"code": "mobile_number", "name": "Mobile Number"},
        {"code": "email_address", "name": "Email Address"},
        {"code": "phone_number", "name": "Phone Number"},
    ],
    "contactMechanismPurposes": [
        {"code": "billing", "name": "Billing"},
        {"code": "marketing", "name": "Marketing"},
        {"code": "security", "name": "Security"},
    ],
    "contactMechanismRoles": [
        {"code": "personal", "name": "Personal"},
        {"code": "work", "name": "Work"},
        {"code": "main", "name": "Main"},
    ],
    "physicalAddressTypes": [
        {"code": "street", "name": "Street"},
        {"code": "complex", "name": "Complex"},
        {"code": "farm", "name": "Farm"},
        {"code": "international", "name": "International"},
    ],
    "physicalAddressPurposes": [
        {"code": "billing", "name": "Billing"},
        {"code": "correspondence", "name": "Correspondence"},
        {"code": "delivery", "name": "Delivery"},
    ],
    "physicalAddressRoles": [
        {"code": "residential", "name": "Residential"},
        {"code": "work", "name": "Work"},
        {"code": "main", "name": "Main"},
    ],
    "qualificationTypes": [
        {"code": "matric", "name": "Matric"},
        {"code": "diploma", "name": "Diploma"},
        {"code": "degree", "name": "Degree"},
    ],
    "fieldsOfStudy": [
        {"code": "accounting", "name": "Accounting"},
        {"code": "engineering", "name": "Engineering"},
        {"code": "law", "name": "Law"},
    ],
    "timesToContact": [
        {"code": "anytime", "name": "Anytime"},
        {"code": "morning", "name": "Morning"},
        {"code": "afternoon", "name": "Afternoon"},
        {"code": "evening", "name": "Evening"},
    ],
    "consentTypes": [
        {"code": "marketing", "name": "Marketing"},
        {"code": "credit_check", "name": "Credit Check"},
    ],
    "preferenceTypes": [
        {"code": "correspondence_language", "name": "Correspondence Language"},
        {"code": "contact_mechanism", "name": "Preferred Contact Mechanism"},
    ],
}

# ---------------------------------------------------------------------------
# Operations external reference types
# ---------------------------------------------------------------------------

OPERATIONS_EXTERNAL_REFERENCE_TYPES: list[dict] = [
    {"code": "account_number", "name": "Account Number",
     "object_type": ObjectType.DOCUMENT, "value_pattern": r"[0-9]{6,12}"},
    {"code": "case_number", "name": "Case Number",
     "object_type": ObjectType.WORKFLOW, "value_pattern": None},
    {"code": "ticket_number", "name": "Ticket Number",
     "object_type": ObjectType.INTERACTION, "value_pattern": None},
]


async def _seed_rows(session: AsyncSession, rows: dict[str, type[ReferenceColumns]],
                     data: dict[str, list[dict]]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for kind, entries in data.items():
        row_type = rows[kind]
        repo = ReferenceRepository(session, row_type)
        for sort_index, entry in enumerate(entries, start=1):
            await repo.save(
                row_type(locale_id=LOCALE_ID, sort_index=sort_index, description="", **entry)
            )
        counts[kind] = len(entries)
    return counts


async def seed_reference_data(session: AsyncSession) -> dict[str, int]:
    """Merge the general reference rows. Returns rows written per kind."""
    return await _seed_rows(session, REFERENCE_ROWS, REFERENCE_DATA)


async def seed_party_reference_data(session: AsyncSession) -> dict[str, int]:
    """Merge the shared party reference rows. Returns rows written per kind."""
    return await _seed_rows(session, PARTY_REFERENCE_ROWS, PARTY_REFERENCE_DATA)


async def seed_external_reference_types(session: AsyncSession) -> int:
    """Create missing operations external reference types. Returns how many were created."""
    repo = ExternalReferenceTypeRepository(session)
    created = 0
    for entry in OPERATIONS_EXTERNAL_REFERENCE_TYPES:
        if await repo.exists(entry["code"]):
            continue
        await repo.create(
            code=entry["code"], name=entry["name"], description="",
            object_type=entry["object_type"].value, tenant_id=None,
            value_pattern=entry["value_pattern"],
        )
        created += 1
    return created


async def seed_all(session: AsyncSession) -> dict[str, int]:
    counts = await seed_reference_data(session)
    counts.update(
        {f"party.{kind}": n for kind, n in (await seed_party_reference_data(session)).items()}
    )
    counts["operations.externalReferenceTypes"] = await seed_external_reference_types(session)
    return counts


# ---------------------------------------------------------------------------
# CLI entry point: python -m scripts.seed
# ---------------------------------------------------------------------------


async def _run_seed() -> None:
    """Run the full seed against the real database."""
    from inception.db.session import async_session_factory

    async with async_session_factory() as session:
        counts = await seed_all(session)
        await session.commit()

    print("Seed complete.")
    for kind, n in counts.items():
        print(f"  {kind:<40} {n:>4}")


if __name__ == "__main__":
    asyncio.run(_run_seed())
