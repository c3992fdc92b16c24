"""
Static paragraph scripts for the four claim documents.

Each script is an ordered list of ParagraphBlock records whose text is a
Jinja2 string. Only literal interpolation is used; the available variables
are name, email, phone_number, identification_number and date.
"""

from typing import Dict, List

from src.documents.schemas import (
    HEADER_FONT_SIZE,
    Alignment,
    DocumentType,
    ParagraphBlock,
)


def _header(text: str) -> ParagraphBlock:
    return ParagraphBlock(
        text=text,
        bold=True,
        heading_level=1,
        alignment=Alignment.CENTER,
        font_size=HEADER_FONT_SIZE,
        space_after=400,
    )


def _para(text: str = "", bold: bool = False) -> ParagraphBlock:
    return ParagraphBlock(text=text, bold=bold)


def _bold(text: str) -> ParagraphBlock:
    return _para(text, bold=True)


DATE_LINE = ParagraphBlock(
    text="Date: {{ date }}",
    alignment=Alignment.RIGHT,
    space_after=400,
)

SIGNATURE_LINE = ParagraphBlock(
    text="________________________",
    space_before=600,
    space_after=200,
)

BLANK = _para()


def _client_details(heading: str = "CLIENT DETAILS:") -> List[ParagraphBlock]:
    return [
        _bold(heading),
        _para("Full Name: {{ name }}"),
        _para("ID Number: {{ identification_number }}"),
        _para("Email: {{ email }}"),
        _para("Phone: {{ phone_number }}"),
    ]


WARRANT_TO_ACT: List[ParagraphBlock] = [
    _header("WARRANT TO ACT"),
    DATE_LINE,
    _bold("TO: [LAW FIRM NAME]"),
    BLANK,
    _bold("RE: MOTOR VEHICLE ACCIDENT CLAIM"),
    BLANK,
    _para(
        "I, {{ name }}, holder of ID Number {{ identification_number }}, hereby "
        "authorize and instruct you to act on my behalf in connection with my "
        "motor vehicle accident claim."
    ),
    _para("I hereby warrant and authorize you to:"),
    _para("1. Investigate the circumstances of the accident"),
    _para("2. Obtain all necessary medical reports and documentation"),
    _para("3. Negotiate with insurance companies and third parties"),
    _para("4. Institute legal proceedings if necessary"),
    _para("5. Take all steps necessary to recover damages on my behalf"),
    BLANK,
    *_client_details(),
    BLANK,
    _para("I confirm that I have read and understood the terms of this warrant."),
    SIGNATURE_LINE,
    _para("{{ name }}"),
    _para("CLIENT SIGNATURE"),
]

MEDICAL_CONSENT: List[ParagraphBlock] = [
    _header("CONSENT FOR RELEASE OF MEDICAL INFORMATION"),
    DATE_LINE,
    _bold("TO: ALL MEDICAL PRACTITIONERS AND HEALTHCARE PROVIDERS"),
    BLANK,
    _para(
        "I, {{ name }}, ID Number {{ identification_number }}, hereby give my full "
        "and informed consent for the release of all medical information, reports, "
        "records, and documentation relating to my treatment following the motor "
        "vehicle accident."
    ),
    _para("This consent specifically authorizes the release of:"),
    _para("1. All medical reports and clinical notes"),
    _para("2. Diagnostic test results including X-rays, MRI, CT scans"),
    _para("3. Treatment records and rehabilitation reports"),
    _para("4. Specialist consultation reports"),
    _para("5. Any other medical documentation relevant to my claim"),
    BLANK,
    _para("This information may be released to:"),
    _para("• My legal representatives"),
    _para("• Insurance companies involved in the claim"),
    _para("• Medical experts appointed for assessment"),
    _para("• Court officials if legal proceedings are instituted"),
    BLANK,
    *_client_details(),
    BLANK,
    _para("I understand that this consent remains valid until revoked by me in writing."),
    SIGNATURE_LINE,
    _para("{{ name }}"),
    _para("CLIENT SIGNATURE"),
]

LETTER_OF_DEMAND: List[ParagraphBlock] = [
    _header("LETTER OF DEMAND"),
    DATE_LINE,
    _bold("TO: [THIRD PARTY/INSURANCE COMPANY]"),
    BLANK,
    _bold("RE: MOTOR VEHICLE ACCIDENT - CLAIM FOR DAMAGES"),
    _bold("OUR CLIENT: {{ name | upper }}"),
    BLANK,
    _para(
        "We act on behalf of the above-named client in connection with a motor "
        "vehicle accident that occurred on [DATE] at [LOCATION]."
    ),
    _bold("FACTS:"),
    _para(
        "Our client was involved in a motor vehicle accident caused by the negligent "
        "driving of your insured. As a result of this accident, our client sustained "
        "injuries and suffered damages."
    ),
    BLANK,
    _bold("DAMAGES CLAIMED:"),
    _para("1. General damages for pain, suffering and loss of amenities of life"),
    _para("2. Medical expenses incurred and to be incurred"),
    _para("3. Loss of income/earning capacity"),
    _para("4. Vehicle damage and related expenses"),
    _para("5. Any other damages that may be proven"),
    BLANK,
    _bold("DEMAND:"),
    _para(
        "We hereby demand that you settle our client's claim within 30 (thirty) days "
        "of receipt of this letter. Failing settlement within the stipulated period, "
        "we shall institute action against your insured without further notice."
    ),
    BLANK,
    *_client_details(),
    BLANK,
    _para("We await your urgent response."),
    BLANK,
    _para("Yours faithfully,"),
    BLANK,
    _para("[LAW FIRM NAME]"),
    _para("Attorneys for Plaintiff"),
]

STATUTORY_NOTICE: List[ParagraphBlock] = [
    _header("STATUTORY NOTICE"),
    DATE_LINE,
    _bold("TO: [THIRD PARTY DRIVER]"),
    BLANK,
    _bold("RE: MOTOR VEHICLE ACCIDENT - STATUTORY NOTICE"),
    _bold("PLAINTIFF: {{ name | upper }}"),
    BLANK,
    _para(
        "TAKE NOTICE that our client intends to institute action against you in the "
        "High Court/Magistrate's Court for damages arising from a motor vehicle accident."
    ),
    BLANK,
    _bold("PARTICULARS OF CLAIM:"),
    _para("Date of Accident: [DATE]"),
    _para("Place of Accident: [LOCATION]"),
    _para("Cause of Action: Negligent driving resulting in motor vehicle collision"),
    BLANK,
    _bold("NATURE OF DAMAGES:"),
    _para("1. General damages for pain, suffering and loss of amenities of life"),
    _para("2. Special damages including medical expenses"),
    _para("3. Loss of income and earning capacity"),
    _para("4. Vehicle damage"),
    _para("5. Interest and costs"),
    BLANK,
    _para(
        "This notice is served in terms of the relevant statutory provisions and court "
        "rules. Since no amicable resolution has been forthcoming despite our previous "
        "correspondence, legal proceedings will be instituted shortly."
    ),
    BLANK,
    *_client_details("PLAINTIFF DETAILS:"),
    BLANK,
    _para("You are advised to forward this notice to your insurance company immediately."),
    BLANK,
    _para("DATED at [CITY] on this _____ day of _________, 2024."),
    BLANK,
    _para("[LAW FIRM NAME]"),
    _para("Attorneys for Plaintiff"),
]


DOCUMENT_SCRIPTS: Dict[DocumentType, List[ParagraphBlock]] = {
    DocumentType.WARRANT: WARRANT_TO_ACT,
    DocumentType.CONSENT: MEDICAL_CONSENT,
    DocumentType.DEMAND: LETTER_OF_DEMAND,
    DocumentType.NOTICE: STATUTORY_NOTICE,
}


def get_script(doc_type: DocumentType) -> List[ParagraphBlock]:
    """Return the paragraph script for a document type."""
    return DOCUMENT_SCRIPTS[doc_type]
