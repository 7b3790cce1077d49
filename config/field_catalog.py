"""
Canonical import fields for the Data Center upload.

Every spreadsheet column is mapped onto one of these fields. Alias order
matters: on equal scores the earlier alias (and the earlier field) wins.
"""

from dataclasses import dataclass
from typing import Literal

FileType = Literal["invoice_aging", "payments", "accounts"]


@dataclass(frozen=True)
class FieldDefinition:
    """A canonical target field."""
    key: str
    label: str
    grouping: str
    aliases: tuple[str, ...]
    required: bool = False

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "key": self.key,
            "label": self.label,
            "grouping": self.grouping,
            "aliases": list(self.aliases),
            "required": self.required,
        }


def _fields(grouping: str, *rows: tuple) -> tuple[FieldDefinition, ...]:
    return tuple(
        FieldDefinition(
            key=key,
            label=label,
            grouping=grouping,
            aliases=tuple(aliases),
            required=bool(extra and extra[0]),
        )
        for key, label, aliases, *extra in rows
    )


# =============================================================================
# CUSTOMER
# =============================================================================

CUSTOMER_FIELDS = _fields(
    "customer",
    ("customer_name", "Customer Name", ["company", "company name", "business name", "account name", "customer name", "client name", "name"], True),
    ("customer_id", "Customer ID", ["account id", "billing id", "customer id", "external id", "qb id", "quickbooks id"]),
    ("customer_email", "Customer Email", ["email", "contact email", "customer email", "primary email", "email address"]),
    ("customer_phone", "Customer Phone", ["phone", "contact phone", "telephone", "phone number", "mobile"]),
    ("billing_address", "Billing Address", ["address", "address 1", "address line 1", "street", "street address"]),
    ("contact_name", "Contact Name", ["contact", "contact name", "primary contact", "contact person", "full name", "name"]),
)


# =============================================================================
# INVOICE
# =============================================================================

INVOICE_FIELDS = _fields(
    "invoice",
    ("invoice_number", "Invoice Number", ["invoice", "inv", "invoice no", "invoice number", "inv no", "inv #", "invoice #", "document number", "doc no"], True),
    ("invoice_date", "Invoice Date", ["invoice date", "inv date", "date", "issue date", "document date"], True),
    ("due_date", "Due Date", ["due date", "due", "payment due", "due by", "payment date due"], True),
    ("amount_original", "Original Amount", ["amount", "total", "invoice amount", "original amount", "total amount", "invoice total", "gross amount"]),
    ("amount_outstanding", "Outstanding Amount", ["outstanding", "balance", "amount due", "remaining", "open amount", "outstanding amount", "balance due"]),
    ("currency", "Currency", ["currency", "curr", "ccy"]),
    ("invoice_status", "Invoice Status", ["status", "invoice status", "state"]),
    ("po_number", "PO Number", ["po", "po number", "purchase order", "po #"]),
    ("product_description", "Product Description", ["description", "product", "service", "item", "line item", "product description"]),
    ("external_invoice_id", "External Invoice ID", ["external id", "system id", "reference"]),
)


# =============================================================================
# PAYMENT
# =============================================================================

PAYMENT_FIELDS = _fields(
    "payment",
    ("payment_date", "Payment Date", ["payment date", "pay date", "date paid", "received date", "deposit date"], True),
    ("payment_amount", "Payment Amount", ["payment", "amount", "payment amount", "amount paid", "paid amount"], True),
    ("payment_reference", "Payment Reference", ["reference", "check number", "check no", "check #", "transaction id", "confirmation"]),
    ("payment_method", "Payment Method", ["method", "payment method", "pay method", "type"]),
    ("payment_notes", "Payment Notes", ["notes", "memo", "comments", "payment notes"]),
)


# =============================================================================
# META
# =============================================================================

META_FIELDS = _fields(
    "meta",
    ("notes", "Notes", ["notes", "comments", "remarks"]),
    ("source_system", "Source System", ["source", "system", "origin"]),
)


FIELD_DEFINITIONS: dict[str, tuple[FieldDefinition, ...]] = {
    "customer": CUSTOMER_FIELDS,
    "invoice": INVOICE_FIELDS,
    "payment": PAYMENT_FIELDS,
    "meta": META_FIELDS,
}

# Field groups offered as mapping candidates, in scoring order
FILE_TYPE_GROUPS: dict[str, tuple[str, ...]] = {
    "invoice_aging": ("customer", "invoice", "meta"),
    "payments": ("customer", "payment", "meta"),
    "accounts": ("customer", "meta"),
}

# Groups whose required fields must be mapped before an import can run
REQUIRED_GROUPS: dict[str, tuple[str, ...]] = {
    "invoice_aging": ("customer", "invoice"),
    "payments": ("customer", "payment"),
    "accounts": ("customer",),
}

FILE_TYPES = tuple(FILE_TYPE_GROUPS)


def fields_for_groups(groups: tuple[str, ...]) -> list[FieldDefinition]:
    """Flatten the given groups into one ordered field list."""
    return [f for group in groups for f in FIELD_DEFINITIONS.get(group, ())]


def find_field(key: str) -> FieldDefinition | None:
    """Look up a field definition by key across all groups."""
    for group in FIELD_DEFINITIONS.values():
        for f in group:
            if f.key == key:
                return f
    return None
