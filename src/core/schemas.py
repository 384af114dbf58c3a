"""ULS public access file layouts.

Field lists follow the FCC public access database definitions for the
amateur AM, CO, EN and HD files, plus the merged FCC output layout.
Output fields that exist in several inputs carry the input name as prefix.
"""

from __future__ import annotations

from core.types import SchemaDescriptor

AM_SCHEMA = SchemaDescriptor(
    name="AM",
    field_names=(
        "RECORD_TYPE",
        "ID",
        "ULS_NUMBER",
        "EBF_NUMBER",
        "CALLSIGN",
        "OPERATOR_CLASS",
        "GROUP_CODE",
        "REGION_CODE",
        "TRUSTEE_CALLSIGN",
        "TRUSTEE_INDICATOR",
        "PHYSICIAN_CERTIFICATION",
        "VE_SIGNATURE",
        "SYSTEMATIC_CALLSIGN_CHANGE",
        "VANITY_CALLSIGN_CHANGE",
        "VANITY_RELATIONSHIP",
        "PREVIOUS_CALLSIGN",
        "PREVIOUS_OPERATOR_CLASS",
        "TRUSTEE_NAME",
    ),
)

CO_SCHEMA = SchemaDescriptor(
    name="CO",
    field_names=(
        "RECORD_TYPE",
        "ID",
        "ULS_NUMBER",
        "CALLSIGN",
        "COMMENT_DATE",
        "DESCRIPTION",
        "STATUS_CODE",
        "STATUS_DATE",
    ),
)

EN_SCHEMA = SchemaDescriptor(
    name="EN",
    field_names=(
        "RECORD_TYPE",
        "ID",
        "ULS_NUMBER",
        "EBF_NUMBER",
        "CALLSIGN",
        "ENTITY_TYPE",
        "LICENSE_ID",
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
        "SGIN",
        "FRN",
        "APPLICANT_TYPE_CODE",
        "APPLICANT_TYPE_CODE_OTHER",
        "STATUS_CODE",
        "STATUS_DATE",
        "LICENSE_TYPE_37",
        "LINKED_ID",
        "LINKED_CALLSIGN",
    ),
)

HD_SCHEMA = SchemaDescriptor(
    name="HD",
    field_names=(
        "RECORD_TYPE",
        "ID",
        "ULS_NUMBER",
        "EBF_NUMBER",
        "CALLSIGN",
        "LICENSE_STATUS",
        "RADIO_SERVICE_CODE",
        "GRANT_DATE",
        "EXPIRED_DATE",
        "CANCELLATION_DATE",
        "ELIGIBILITY_RULE_NUM",
        "RESERVED_1",
        "ALIEN",
        "ALIEN_GOVERNMENT",
        "ALIEN_CORPORATION",
        "ALIEN_OFFICER",
        "ALIEN_CONTROL",
        "REVOKED",
        "CONVICTED",
        "ADJUDGED",
        "RESERVED_2",
        "COMMON_CARRIER",
        "NON_COMMON_CARRIER",
        "PRIVATE_COMM",
        "FIXED",
        "MOBILE",
        "RADIOLOCATION",
        "SATELLITE",
        "DEVELOPMENTAL_STA_DEMONSTRATION",
        "INTERCONNECTED_SERVICE",
        "CERTIFIER_FIRST_NAME",
        "CERTIFIER_MIDDLE_INITIAL",
        "CERTIFIER_LAST_NAME",
        "CERTIFIER_SUFFIX",
        "CERTIFIER_TITLE",
        "FEMALE",
        "BLACK_AFRICAN_AMERICAN",
        "NATIVE_AMERICAN",
        "HAWAIIAN",
        "ASIAN",
        "WHITE",
        "HISPANIC",
        "EFFECTIVE_DATE",
        "LAST_ACTION_DATE",
        "AUCTION_ID",
        "BROADCAST_SERVICES_REGULATORY_STATUS",
        "BAND_MANAGER_REGULATORY_STATUS",
        "BROADCAST_SERVICES_SERVICE_TYPE",
        "ALIEN_RULING",
        "LICENSEE_NAME_CHANGE",
        "WHITESPACE_INDICATOR",
        "REQUIREMENT_CHOICE",
        "REQUIREMENT_ANSWER",
        "DISCONTINUED_SERVICE",
        "REGULATORY_COMPLIANCE",
        "ELIGIBILITY_900_MHZ",
        "TRANSITION_PLAN_900_MHZ",
        "RETURN_SPECTRUM_900_MHZ",
        "PAYMENT_900_MHZ",
    ),
)

FCC_SCHEMA = SchemaDescriptor(
    name="FCC",
    field_names=(
        "ID",
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
        "COMMENT_DATE",
        "DESCRIPTION",
        "CO_STATUS_CODE",
        "CO_STATUS_DATE",
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
        "EN_STATUS_CODE",
        "EN_STATUS_DATE",
        "LICENSE_STATUS",
        "RADIO_SERVICE_CODE",
        "GRANT_DATE",
        "EXPIRED_DATE",
        "CANCELLATION_DATE",
        "ELIGIBILITY_RULE_NUM",
        "REVOKED",
        "CONVICTED",
        "ADJUDGED",
        "EFFECTIVE_DATE",
        "LAST_ACTION_DATE",
        "LICENSEE_NAME_CHANGE",
        "LINKED_ID",
        "LINKED_CALLSIGN",
    ),
)

INPUT_SCHEMAS = (AM_SCHEMA, CO_SCHEMA, EN_SCHEMA, HD_SCHEMA)
