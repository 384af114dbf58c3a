"""Field routing for each merge pass.

Each policy names the output fields one input schema contributes and how
a record referencing an unknown ID is treated. Pass order matters: AM is
the only schema that creates merged records.
"""

from __future__ import annotations

from core.schemas import AM_SCHEMA, CO_SCHEMA, EN_SCHEMA, HD_SCHEMA
from core.types import IngestionPolicy


def _same_names(*field_names: str) -> tuple[tuple[str, str], ...]:
    return tuple((field_name, field_name) for field_name in field_names)


AM_POLICY = IngestionPolicy(
    schema=AM_SCHEMA,
    creates_entries=True,
    tolerate_missing_id=False,
    copy_fields=_same_names(
        "CALLSIGN",
        "OPERATOR_CLASS",
        "GROUP_CODE",
        "REGION_CODE",
        "TRUSTEE_CALLSIGN",
        "TRUSTEE_INDICATOR",
        "SYSTEMATIC_CALLSIGN_CHANGE",
        "VANITY_CALLSIGN_CHANGE",
        "VANITY_RELATIONSHIP",
        "PREVIOUS_CALLSIGN",
        "PREVIOUS_OPERATOR_CLASS",
        "TRUSTEE_NAME",
    ),
)

# Comments must always reference a license AM already introduced.
CO_POLICY = IngestionPolicy(
    schema=CO_SCHEMA,
    creates_entries=False,
    tolerate_missing_id=False,
    copy_fields=(
        ("DESCRIPTION", "DESCRIPTION"),
        ("CO_STATUS_CODE", "STATUS_CODE"),
    ),
    date_fields=(
        ("COMMENT_DATE", "COMMENT_DATE"),
        ("CO_STATUS_DATE", "STATUS_DATE"),
    ),
)

# Registry extracts are refreshed independently, so EN and HD may lag AM.
EN_POLICY = IngestionPolicy(
    schema=EN_SCHEMA,
    creates_entries=False,
    tolerate_missing_id=True,
    copy_fields=_same_names(
        "ENTITY_NAME",
        "FIRST_NAME",
        "MIDDLE_INITIAL",
        "LAST_NAME",
        "SUFFIX",
        "PHONE",
        "FAX",
        "EMAIL",
        "STREET_ADDRESS",
        "CITY",
        "STATE",
        "ZIP_CODE",
        "PO_BOX",
        "ATTENTION_LINE",
        "FRN",
        "APPLICANT_TYPE_CODE",
        "APPLICANT_TYPE_CODE_OTHER",
        "LINKED_ID",
        "LINKED_CALLSIGN",
    )
    + (("EN_STATUS_CODE", "STATUS_CODE"),),
    date_fields=(("EN_STATUS_DATE", "STATUS_DATE"),),
)

HD_POLICY = IngestionPolicy(
    schema=HD_SCHEMA,
    creates_entries=False,
    tolerate_missing_id=True,
    copy_fields=_same_names(
        "LICENSE_STATUS",
        "RADIO_SERVICE_CODE",
        "ELIGIBILITY_RULE_NUM",
        "REVOKED",
        "CONVICTED",
        "ADJUDGED",
        "LICENSEE_NAME_CHANGE",
    ),
    date_fields=_same_names(
        "GRANT_DATE",
        "EXPIRED_DATE",
        "CANCELLATION_DATE",
        "EFFECTIVE_DATE",
        "LAST_ACTION_DATE",
    ),
)
