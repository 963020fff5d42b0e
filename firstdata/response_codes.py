"""
firstdata/response_codes.py
---------------------------

Bank / processor response codes returned by Global Gateway e4 in
``bank_resp_code``.

Each entry is classified by its ``response`` letter:

* ``S`` : successful response codes
* ``R`` : reject response codes (the request itself must be fixed)
* ``D`` : decline response codes (issuer or network refused)

The table is read-only and shared by every client.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

SUCCESS = "S"
REJECT = "R"
DECLINE = "D"

# Generic code reported for every processor-side failure and for unmapped codes
UNMAPPED_CODE = 42
UNMAPPED_MESSAGE = "Miscellaneous error"


class ResponseCode(NamedTuple):
    response: str
    code: str
    name: str
    action: str
    comments: str


BANK_RESPONSE_CODES: Mapping[int, ResponseCode] = MappingProxyType({
    0: ResponseCode(
        response="D",
        code="000",
        name="No Answer",
        action="Resend",
        comments="First Data received no answer from auth network",
    ),
    100: ResponseCode(
        response="S",
        code="100",
        name="Approved",
        action="N/A",
        comments="Successfully approved",
    ),
    101: ResponseCode(
        response="S",
        code="101",
        name="Validated",
        action="N/A",
        comments="Account Passed edit checks",
    ),
    102: ResponseCode(
        response="S",
        code="102",
        name="Verified",
        action="N/A",
        comments="Account Passed external negative file",
    ),
    103: ResponseCode(
        response="S",
        code="103",
        name="Pre-Noted",
        action="N/A",
        comments="Passed Pre-Note",
    ),
    104: ResponseCode(
        response="S",
        code="104",
        name="No Reason to Decline",
        action="N/A",
        comments="Successfully approved",
    ),
    105: ResponseCode(
        response="S",
        code="105",
        name="Received and Stored",
        action="N/A",
        comments="Successfully approved",
    ),
    106: ResponseCode(
        response="S",
        code="106",
        name="Provided Auth",
        action="N/A",
        comments="Successfully approved Note: Indicates customized code was used in processing",
    ),
    107: ResponseCode(
        response="S",
        code="107",
        name="Request Received",
        action="N/A",
        comments="Successfully approved Note: Indicates customized code was used in processing",
    ),
    108: ResponseCode(
        response="S",
        code="108",
        name="Approved for Activation",
        action="N/A",
        comments="Successfully Activated",
    ),
    109: ResponseCode(
        response="S",
        code="109",
        name="Previously&nbsp;Processed Transaction",
        action="N/A",
        comments="Transaction was not re-authorized with the Debit Network because it was previously processed",
    ),
    110: ResponseCode(
        response="S",
        code="110",
        name="BIN Alert",
        action="N/A",
        comments="Successfully approved Note: Indicates customized code was used in processing",
    ),
    111: ResponseCode(
        response="S",
        code="111",
        name="Approved for Partial",
        action="N/A",
        comments="Successfully approved Note: Indicates customized code was used in processing",
    ),
    164: ResponseCode(
        response="S",
        code="164",
        name="Conditional Approval",
        action="Wait",
        comments="Conditional Approval - Hold shipping for 24 hours",
    ),
    201: ResponseCode(
        response="R",
        code="201",
        name="Invalid CC Number",
        action="Cust",
        comments="Bad check digit, length, or other credit card problem",
    ),
    202: ResponseCode(
        response="R",
        code="202",
        name="Bad Amount Nonnumeric Amount",
        action="If",
        comments="Amount sent was zero, unreadable, over ceiling limit, or exceeds maximum allowable amount.",
    ),
    203: ResponseCode(
        response="R",
        code="203",
        name="Zero Amount",
        action="Fix",
        comments="Amount sent was zero",
    ),
    204: ResponseCode(
        response="R",
        code="204",
        name="Other Error",
        action="Fix",
        comments="Unidentifiable error",
    ),
    205: ResponseCode(
        response="R",
        code="205",
        name="Bad Total Auth Amount",
        action="Fix",
        comments="The sum of the authorization amount from extended data information does not equal detail record authorization Amount. Amount sent was zero, unreadable, over ceiling limit, or exceeds Maximum allowable amount.",
    ),
    218: ResponseCode(
        response="R",
        code="218",
        name="Invalid SKU Number",
        action="Fix",
        comments="Non‐numeric value was sent",
    ),
    219: ResponseCode(
        response="R",
        code="219",
        name="Invalid Credit Plan",
        action="Fix",
        comments="Non‐numeric value was sent",
    ),
    220: ResponseCode(
        response="R",
        code="220",
        name="Invalid Store Number",
        action="Fix",
        comments="Non‐numeric value was sent",
    ),
    225: ResponseCode(
        response="R",
        code="225",
        name="Invalid Field Data",
        action="Fix",
        comments="Data within transaction is incorrect",
    ),
    227: ResponseCode(
        response="R",
        code="227",
        name="Missing Companion Data",
        action="Fix",
        comments="Specific and relevant data within transaction is absent",
    ),
    229: ResponseCode(
        response="R",
        code="229",
        name="Percents do not total 100",
        action="Fix",
        comments="FPO monthly payments do not total 100 Note: FPO only",
    ),
    230: ResponseCode(
        response="R",
        code="230",
        name="Payments do not total 100",
        action="Fix",
        comments="FPO monthly payments do not total 100 Note: FPO only",
    ),
    231: ResponseCode(
        response="R",
        code="231",
        name="Invalid Division Number",
        action="Fix",
        comments="Division number incorrect",
    ),
    233: ResponseCode(
        response="R",
        code="233",
        name="Does not match MOP",
        action="Fix",
        comments="Credit card number does not match method of payment type or invalid BIN",
    ),
    234: ResponseCode(
        response="R",
        code="234",
        name="Duplicate Order Number",
        action="Fix",
        comments="Unique to authorization recycle transactions. Order number already exists in system Note: Auth Recycle only",
    ),
    235: ResponseCode(
        response="R",
        code="235",
        name="FPO Locked",
        action="Resend",
        comments="FPO change not allowed Note: FPO only",
    ),
    236: ResponseCode(
        response="R",
        code="236",
        name="Auth Recycle Host System Down",
        action="Resend",
        comments="Authorization recycle host system temporarily unavailable Note: Auth Recycle only",
    ),
    237: ResponseCode(
        response="R",
        code="237",
        name="FPO Not Approved",
        action="Call",
        comments="Division does not participate in FPO. Contact your First Data Representative for information on getting set up for FPO Note: FPO only",
    ),
    238: ResponseCode(
        response="R",
        code="238",
        name="Invalid Currency",
        action="Fix",
        comments="Currency does not match First Data merchant setup for division",
    ),
    239: ResponseCode(
        response="R",
        code="239",
        name="Invalid MOP for Division",
        action="Fix",
        comments="Method of payment is invalid for the division",
    ),
    240: ResponseCode(
        response="R",
        code="240",
        name="Auth Amount for Division",
        action="Fix",
        comments="Used by FPO",
    ),
    241: ResponseCode(
        response="R",
        code="241",
        name="Illegal Action",
        action="Fix",
        comments="Invalid action attempted",
    ),
    243: ResponseCode(
        response="R",
        code="243",
        name="Invalid Purchase Level 3",
        action="Fix",
        comments="Data is inaccurate or missing, or the BIN is ineligible for P‐card",
    ),
    244: ResponseCode(
        response="R",
        code="244",
        name="Invalid Encryption Format",
        action="Fix",
        comments="Invalid encryption flag. Data is Inaccurate.",
    ),
    245: ResponseCode(
        response="R",
        code="245",
        name="Missing or Invalid Secure Payment Data",
        action="Fix",
        comments="Visa or MasterCard authentication data not in appropriate Base 64 encoding format or data provided on A non‐e‐Commerce transaction.",
    ),
    246: ResponseCode(
        response="R",
        code="246",
        name="Merchant not MasterCard Secure code Enabled",
        action="Call",
        comments="Division does not participate in MasterCard Secure Code. Contact your First Data Representative for information on getting setup for MasterCard SecureCode.",
    ),
    247: ResponseCode(
        response="R",
        code="247",
        name="Check conversion Data Error",
        action="Fix",
        comments="Proper data elements were not sent",
    ),
    248: ResponseCode(
        response="R",
        code="248",
        name="Blanks not passed in reserved field",
        action="Fix",
        comments="Blanks not passed in Reserved Field",
    ),
    249: ResponseCode(
        response="R",
        code="249",
        name="Invalid (MCC)",
        action="Fix",
        comments="Invalid Merchant Category (MCC) sent",
    ),
    251: ResponseCode(
        response="R",
        code="251",
        name="Invalid Start Date",
        action="Fix",
        comments="Incorrect start date or card may require an issue number, but a start date was submitted.",
    ),
    252: ResponseCode(
        response="R",
        code="252",
        name="Invalid Issue Number",
        action="Fix",
        comments="Issue number invalid for this BIN.",
    ),
    253: ResponseCode(
        response="R",
        code="253",
        name="Invalid Tran. Type",
        action="Fix",
        comments="If an “R” (Retail Indicator) is sent for a transaction with a MOTO Merchant Category Code (MCC)",
    ),
    257: ResponseCode(
        response="R",
        code="257",
        name="Missing Cust Service Phone",
        action="Fix",
        comments="Card was authorized, but AVS did not match. The 100 was overwritten with a 260 per the merchant’s request Note: Conditional deposits only",
    ),
    258: ResponseCode(
        response="R",
        code="258",
        name="Not Authorized to Send Record",
        action="Call",
        comments="Division does not participate in Soft Merchant Descriptor. Contact your First Data Representative for information on getting set up for Soft Merchant Descriptor.",
    ),
    260: ResponseCode(
        response="D",
        code="260",
        name="Soft AVS",
        action="Cust.",
        comments="Authorization network could not reach the bank which issued the card",
    ),
    261: ResponseCode(
        response="R",
        code="261",
        name="Account Not Eligible For Division’s Setup",
        action="N/A",
        comments="Account number not eligible for division’s Account Updater program setup",
    ),
    262: ResponseCode(
        response="R",
        code="262",
        name="Authorization Code Response Date Invalid",
        action="Fix",
        comments="Authorization code and/or response date are invalid. Note: MOP = MC, MD, VI only",
    ),
    263: ResponseCode(
        response="R",
        code="263",
        name="Partial Authorization Not Allowed or Partial Authorization Request Note Valid",
        action="Fix",
        comments="Action code or division does not allow partial authorizations or partial authorization request is not valid.",
    ),
    264: ResponseCode(
        response="R",
        code="264",
        name="Duplicate Deposit Transaction",
        action="N/A",
        comments="Transaction is a duplicate of a previously deposited transaction. Transaction will not be processed.",
    ),
    265: ResponseCode(
        response="R",
        code="265",
        name="Missing QHP Amount",
        action="Fix",
        comments="Missing QHP Amount",
    ),
    266: ResponseCode(
        response="R",
        code="266",
        name="Invalid QHP Amount",
        action="Fix",
        comments="QHP amount greater than transaction amount",
    ),
    274: ResponseCode(
        response="R",
        code="274",
        name="Transaction Not Supported",
        action="N/A",
        comments="The requested transaction type is blocked from being used with this card. Note:&nbsp; This may be the result of either an association rule, or a merchant boarding option.",
    ),
    301: ResponseCode(
        response="D",
        code="301",
        name="Issuer unavailable",
        action="Resend",
        comments="Authorization network could not reach the bank which issued the card",
    ),
    302: ResponseCode(
        response="D",
        code="302",
        name="Credit Floor",
        action="Wait",
        comments="Insufficient funds",
    ),
    303: ResponseCode(
        response="D",
        code="303",
        name="Processor Decline",
        action="Cust.",
        comments="Generic decline – No other information is being provided by the Issuer",
    ),
    304: ResponseCode(
        response="D",
        code="304",
        name="Not On File",
        action="Cust.",
        comments="No card record, or invalid/nonexistent to account specified",
    ),
    305: ResponseCode(
        response="D",
        code="305",
        name="Already Reversed",
        action="N/A",
        comments="Transaction previously reversed. Note: MOP = any Debit MOP, SV, MC, MD, VI only",
    ),
    306: ResponseCode(
        response="D",
        code="306",
        name="Amount Mismatch",
        action="Fix",
        comments="Requested reversal amount does not match original approved authorization amount. Note: MOP = MC, MD, VI only",
    ),
    307: ResponseCode(
        response="D",
        code="307",
        name="Authorization Not Found",
        action="Fix",
        comments="Transaction cannot be matched to an authorization that was stored in the database. Note: MOP = MC, MD, VI only",
    ),
    351: ResponseCode(
        response="R",
        code="351",
        name="TransArmor Service Unavailable",
        action="Resend",
        comments="TransArmor Service temporarily unavailable.",
    ),
    352: ResponseCode(
        response="D",
        code="352",
        name="Expired Lock",
        action="Cust.",
        comments="ValueLink - Lock on funds has expired.",
    ),
    353: ResponseCode(
        response="R",
        code="353",
        name="TransArmor Invalid Token or PAN",
        action="Fix",
        comments="TransArmor Service encountered a problem converting the given Token or PAN with the given Token Type.",
    ),
    354: ResponseCode(
        response="R",
        code="354",
        name="TransArmor Invalid Result",
        action="Cust",
        comments="TransArmor Service encountered a problem with the resulting Token/PAN.",
    ),
    401: ResponseCode(
        response="D",
        code="401",
        name="Call",
        action="Voice",
        comments="Issuer wants voice contact with cardholder",
    ),
    402: ResponseCode(
        response="D",
        code="402",
        name="Default Call",
        action="Voice",
        comments="Decline",
    ),
    501: ResponseCode(
        response="D",
        code="501",
        name="Pickup",
        action="Cust",
        comments="Card Issuer wants card returned",
    ),
    502: ResponseCode(
        response="D",
        code="502",
        name="Lost/Stolen",
        action="Cust",
        comments="Card reported as lost/stolen Note: Does not apply to American Express",
    ),
    503: ResponseCode(
        response="D",
        code="503",
        name="Fraud/ Security Violation",
        action="Cust",
        comments="CID did not match Note: Discover only",
    ),
    505: ResponseCode(
        response="D",
        code="505",
        name="Negative File",
        action="Cust",
        comments="On negative file",
    ),
    508: ResponseCode(
        response="D",
        code="508",
        name="Excessive PIN try",
        action="Cust",
        comments="Allowable number of PIN tries exceeded",
    ),
    509: ResponseCode(
        response="D",
        code="509",
        name="Over the limit",
        action="Cust",
        comments="Exceeds withdrawal or activity amount limit",
    ),
    510: ResponseCode(
        response="D",
        code="510",
        name="Over Limit Frequency",
        action="Cust",
        comments="Exceeds withdrawal or activity count limit",
    ),
    519: ResponseCode(
        response="D",
        code="519",
        name="On negative file",
        action="Cust",
        comments="Account number appears on negative file",
    ),
    521: ResponseCode(
        response="D",
        code="521",
        name="Insufficient funds",
        action="Cust",
        comments="Insufficient funds/over credit limit",
    ),
    522: ResponseCode(
        response="D",
        code="522",
        name="Card is expired",
        action="Cust",
        comments="Card has expired",
    ),
    524: ResponseCode(
        response="D",
        code="524",
        name="Altered Data",
        action="Fix",
        comments="Altered Data\\Magnetic stripe incorrect",
    ),
    530: ResponseCode(
        response="D",
        code="530",
        name="Do Not Honor",
        action="Cust",
        comments="Generic Decline – No other information is being provided by the issuer. Note: This is a hard decline for BML (will never pass with recycle attempts)",
    ),
    531: ResponseCode(
        response="D",
        code="531",
        name="CVV2/VAK Failure",
        action="Cust",
        comments="Issuer has declined auth request because CVV2 or VAK failed",
    ),
    534: ResponseCode(
        response="D",
        code="534",
        name="Do Not Honor - High Fraud",
        action="Cust",
        comments="The transaction has failed PayPal or Google Checkout risk models",
    ),
    570: ResponseCode(
        response="D ",
        code="570 ",
        name="Stop payment order one time recurring/ installment",
        action="Fix",
        comments="Cardholder has requested this one recurring/installment payment be stopped.",
    ),
    571: ResponseCode(
        response="D",
        code="571",
        name="Revocation of Authorization for All Recurring / Installments",
        action="Cust",
        comments="Cardholder has requested all recurring/installment payments be stopped",
    ),
    572: ResponseCode(
        response="D",
        code="572",
        name="Revocation of All Authorizations – Closed Account",
        action="Cust",
        comments="Cardholder has requested that all authorizations be stopped for this account due to closed account. Note: Visa only",
    ),
    580: ResponseCode(
        response="D",
        code="580",
        name="Account previously activated",
        action="Cust",
        comments="Account previously activated",
    ),
    581: ResponseCode(
        response="D",
        code="581",
        name="Unable to void",
        action="Fix",
        comments="Unable to void",
    ),
    582: ResponseCode(
        response="D",
        code="582",
        name="Block activation failed",
        action="Fix",
        comments="Reserved for Future Use",
    ),
    583: ResponseCode(
        response="D",
        code="583",
        name="Block Activation Failed",
        action="Fix",
        comments="Reserved for Future Use",
    ),
    584: ResponseCode(
        response="D",
        code="584",
        name="Issuance Does Not Meet Minimum Amount",
        action="Fix",
        comments="Issuance does not meet minimum amount",
    ),
    585: ResponseCode(
        response="D",
        code="585",
        name="No Original Authorization Found",
        action="N/A",
        comments="No original authorization found",
    ),
    586: ResponseCode(
        response="D",
        code="586",
        name="Outstanding Authorization, Funds on Hold",
        action="N/A",
        comments="Outstanding Authorization, funds on hold",
    ),
    587: ResponseCode(
        response="D",
        code="587",
        name="Activation Amount Incorrect",
        action="Fix",
        comments="Activation amount incorrect",
    ),
    588: ResponseCode(
        response="D",
        code="588",
        name="Block Activation Failed",
        action="Fix",
        comments="Reserved for Future Use",
    ),
    589: ResponseCode(
        response="D",
        code="589",
        name="CVD Value Failure",
        action="Cust",
        comments="Magnetic stripe CVD value failure",
    ),
    590: ResponseCode(
        response="D",
        code="590",
        name="Maximum Redemption Limit Met",
        action="Cust",
        comments="Maximum redemption limit met",
    ),
    591: ResponseCode(
        response="D",
        code="591",
        name="Invalid CC Number",
        action="Cust",
        comments="Bad check digit, length or other credit card problem. Issuer generated",
    ),
    592: ResponseCode(
        response="D",
        code="592",
        name="Bad Amount",
        action="Fix",
        comments="Amount sent was zero or unreadable. Issuer generated",
    ),
    594: ResponseCode(
        response="D",
        code="594",
        name="Other Error",
        action="Fix",
        comments="Unidentifiable error. Issuer generated",
    ),
    595: ResponseCode(
        response="D",
        code="595",
        name="New Card Issued",
        action="Cust",
        comments="New Card Issued",
    ),
    596: ResponseCode(
        response="D",
        code="596",
        name="Suspected Fraud",
        action="Cust",
        comments="Issuer has flagged account as suspected fraud",
    ),
    599: ResponseCode(
        response="D",
        code="599",
        name="Refund Not Allowed",
        action="N/A",
        comments="Refund Not Allowed",
    ),
    602: ResponseCode(
        response="D",
        code="602",
        name="Invalid Institution Code",
        action="Fix",
        comments="Card is bad, but passes MOD 10 check digit routine, wrong BIN",
    ),
    603: ResponseCode(
        response="D",
        code="603",
        name="Invalid Institution",
        action="Cust",
        comments="Institution not valid (i.e. possible merger)",
    ),
    605: ResponseCode(
        response="D",
        code="605",
        name="Invalid Expiration Date",
        action="Cust",
        comments="Card has expired or bad date sent. Confirm proper date",
    ),
    606: ResponseCode(
        response="D",
        code="606",
        name="Invalid Transaction Type",
        action="Cust",
        comments="Issuer does not allow this type of transaction",
    ),
    607: ResponseCode(
        response="D",
        code="607",
        name="Invalid Amount",
        action="Fix",
        comments="Amount not accepted by network",
    ),
    610: ResponseCode(
        response="D",
        code="610",
        name="BIN Block",
        action="Cust",
        comments="Merchant has requested First Data not process credit cards with this BIN",
    ),
    704: ResponseCode(
        response="S",
        code="704",
        name="FPO Accepted",
        action="N/A",
        comments="Stored in FPO database",
    ),
    740: ResponseCode(
        response="R",
        code="740",
        name="Match Failed",
        action="Fix",
        comments="Unable to validate the debit. Authorization Record - based on amount, action code, and MOP (Batch response reason code for Debit Only)",
    ),
    741: ResponseCode(
        response="R/D",
        code="741",
        name="Validation Failed",
        action="Fix",
        comments="Unable to validate the Debit Authorization Record - based on amount, action code, and MOP (Batch response reason code for Debit Only)",
    ),
    750: ResponseCode(
        response="R/D",
        code="750",
        name="Invalid Transit Routing Number",
        action="Fix",
        comments="EC - ABA transit routing number is invalid, failed check digit",
    ),
    751: ResponseCode(
        response="R/D",
        code="751",
        name="Transit Routing Number Unknown",
        action="Fix",
        comments="Transit routing number not on list of current acceptable numbers.",
    ),
    752: ResponseCode(
        response="R",
        code="752",
        name="Missing Name",
        action="Fix",
        comments="Pertains to deposit transactions only",
    ),
    753: ResponseCode(
        response="R",
        code="753",
        name="Invalid Account Type",
        action="Fix",
        comments="Pertains to deposit transactions only",
    ),
    754: ResponseCode(
        response="R/D",
        code="754",
        name="Account Closed",
        action="Cust",
        comments="Bank account has been closed For PayPal and GoogleCheckout – the customer’s account was closed / restricted",
    ),
    802: ResponseCode(
        response="D",
        code="802",
        name="Positive ID",
        action="Voice",
        comments="Issuer requires further information",
    ),
    806: ResponseCode(
        response="D",
        code="806",
        name="Restraint",
        action="Cust",
        comments="Card has been restricted",
    ),
    811: ResponseCode(
        response="D",
        code="811",
        name="Invalid Security Code",
        action="Fix",
        comments="American Express CID is incorrect",
    ),
    813: ResponseCode(
        response="D",
        code="813",
        name="Invalid PIN",
        action="Cust",
        comments="PIN for online debit transactions is incorrect",
    ),
    825: ResponseCode(
        response="D",
        code="825",
        name="No Account",
        action="Cust",
        comments="Account does not exist",
    ),
    833: ResponseCode(
        response="D",
        code="833",
        name="Invalid Merchant",
        action="Fix",
        comments="Service Established (SE) number is incorrect, closed or Issuer does not allow this type of transaction",
    ),
    834: ResponseCode(
        response="R",
        code="834",
        name="Unauthorized User",
        action="Fix",
        comments="Method of payment is invalid for the division",
    ),
    902: ResponseCode(
        response="D",
        code="902",
        name="Process Unavailable",
        action="Resend/ Call/ Cust.",
        comments="System error/malfunction with Issuer For Debit – The link is down or setup issue; contact your First Data Representative.",
    ),
    903: ResponseCode(
        response="D",
        code="903",
        name="Invalid Expiration",
        action="Cust",
        comments="Invalid or expired expiration date",
    ),
    904: ResponseCode(
        response="D",
        code="904",
        name="Invalid Effective",
        action="Cust./ Resend",
        comments="Card not active",
    ),
})


def get_response_code(code) -> Optional[ResponseCode]:
    """Return the table entry for ``code`` (int or numeric string), or None."""
    try:
        return BANK_RESPONSE_CODES.get(int(code))
    except (TypeError, ValueError, OverflowError):
        return None


def classification_of(code) -> Optional[str]:
    entry = get_response_code(code)
    return entry.response if entry else None
