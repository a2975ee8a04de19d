"""Document categories kept by the CRM."""

from enum import StrEnum


class DocumentType(StrEnum):
    """Supported document types."""

    AGREEMENT = "agreement"
    FORM_ADV = "form_adv"
    DISCLOSURE = "disclosure"
    CORRESPONDENCE = "correspondence"
    STATEMENT = "statement"
    TAX_DOC = "tax_doc"
    MEETING_NOTES = "meeting_notes"
    COMPLIANCE_REVIEW = "compliance_review"
