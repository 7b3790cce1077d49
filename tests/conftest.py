"""
Shared test fixtures.
"""

import sys
from pathlib import Path

# Add backend directory to Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

import pytest

from config import fields_for_groups, FILE_TYPE_GROUPS
from services.column_mapping_service import ColumnMappingService


# ===================
# FIELD CATALOG
# ===================

@pytest.fixture
def invoice_aging_fields():
    """Candidate fields for an invoice aging upload, in scoring order."""
    return fields_for_groups(FILE_TYPE_GROUPS["invoice_aging"])


@pytest.fixture
def payments_fields():
    """Candidate fields for a payments upload, in scoring order."""
    return fields_for_groups(FILE_TYPE_GROUPS["payments"])


@pytest.fixture
def mapping_service() -> ColumnMappingService:
    """Fresh service with the default header cap."""
    return ColumnMappingService()


# ===================
# SAMPLE DATA
# ===================

@pytest.fixture
def aging_headers() -> list:
    """Headers of a typical invoice aging export."""
    return ["Customer Name", "Invoice Number", "Due Date", "Amount", "Random Column"]


@pytest.fixture
def aging_rows() -> list:
    """Sample rows matching aging_headers."""
    return [
        {
            "Customer Name": "Acme Corp",
            "Invoice Number": "INV-1001",
            "Due Date": "2025-01-31",
            "Amount": "$1,250.00",
            "Random Column": "x",
        },
        {
            "Customer Name": "Globex",
            "Invoice Number": "INV-1002",
            "Due Date": "2025-02-15",
            "Amount": "980.50",
            "Random Column": None,
        },
    ]


# ===================
# API TEST CLIENT
# ===================

@pytest.fixture
def test_client():
    """
    Create FastAPI test client.

    Usage:
        def test_endpoint(test_client):
            response = test_client.get("/health")
            assert response.status_code == 200
    """
    from fastapi.testclient import TestClient
    from main import app

    return TestClient(app)
