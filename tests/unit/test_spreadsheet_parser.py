"""
Unit tests for the spreadsheet parser.

Tests parse_spreadsheet with Excel and CSV uploads.
"""

from datetime import datetime
from io import BytesIO
import pytest
import pandas as pd

from parsers.spreadsheet_parser import parse_spreadsheet, ParsedSpreadsheet
from exceptions import SpreadsheetParseError


def create_excel_file(rows: list[dict], columns: list[str]) -> bytes:
    """Helper to create test Excel files in memory."""
    output = BytesIO()

    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        pd.DataFrame(rows, columns=columns).to_excel(writer, sheet_name="Aging", index=False)

    return output.getvalue()


def create_csv_file(text: str) -> bytes:
    return text.encode("utf-8")


# ===================
# VALID FILE TESTS
# ===================

class TestExcelParsing:
    """Tests for .xlsx uploads."""

    def test_headers_and_rows(self):
        content = create_excel_file(
            [
                {"Customer Name": "Acme Corp", "Invoice Number": "INV-1", "Due Date": datetime(2025, 1, 31), "Amount": 1250.5},
                {"Customer Name": "Globex", "Invoice Number": "INV-2", "Due Date": datetime(2025, 2, 15), "Amount": 980.25},
            ],
            ["Customer Name", "Invoice Number", "Due Date", "Amount"],
        )

        result = parse_spreadsheet(content, "aging.xlsx")

        assert isinstance(result, ParsedSpreadsheet)
        assert result.headers == ["Customer Name", "Invoice Number", "Due Date", "Amount"]
        assert result.total_rows == 2
        assert result.rows[0]["Customer Name"] == "Acme Corp"
        assert result.rows[1]["Amount"] == 980.25

    def test_dates_become_datetimes(self):
        content = create_excel_file(
            [{"Invoice": "INV-1", "Due Date": datetime(2025, 1, 31)}],
            ["Invoice", "Due Date"],
        )

        result = parse_spreadsheet(content, "aging.xlsx")

        assert result.rows[0]["Due Date"] == datetime(2025, 1, 31)
        assert type(result.rows[0]["Due Date"]) is datetime

    def test_empty_rows_are_skipped(self):
        content = create_excel_file(
            [
                {"Customer": "Acme", "Amount": 10},
                {"Customer": None, "Amount": None},
                {"Customer": "Globex", "Amount": 20},
            ],
            ["Customer", "Amount"],
        )

        result = parse_spreadsheet(content, "aging.xlsx")

        assert [r["Customer"] for r in result.rows] == ["Acme", "Globex"]

    def test_extension_is_case_insensitive(self):
        content = create_excel_file([{"Customer": "Acme"}], ["Customer"])

        result = parse_spreadsheet(content, "AGING.XLSX")

        assert result.headers == ["Customer"]


class TestCsvParsing:
    """Tests for .csv uploads."""

    def test_headers_are_trimmed(self):
        content = create_csv_file(" Customer , Amount \nAcme,10\n")

        result = parse_spreadsheet(content, "accounts.csv")

        assert result.headers == ["Customer", "Amount"]
        assert result.rows == [{"Customer": "Acme", "Amount": "10"}]

    def test_blank_header_columns_are_dropped(self):
        content = create_csv_file("Customer,,Amount\nAcme,ignored,10\n")

        result = parse_spreadsheet(content, "accounts.csv")

        assert result.headers == ["Customer", "Amount"]
        assert "ignored" not in result.rows[0].values()

    def test_rows_of_empty_cells_are_skipped(self):
        content = create_csv_file("Customer,Amount\nAcme,10\n,\nGlobex,20\n")

        result = parse_spreadsheet(content, "accounts.csv")

        assert result.total_rows == 2

    def test_trailing_commas(self):
        content = create_csv_file("Customer Name,Amount\nAcme,100,\nGlobex,200\nInitech,300,x,y\n")

        result = parse_spreadsheet(content, "aging.csv")

        assert result.headers == ["Customer Name", "Amount"]
        assert result.rows == [
            {"Customer Name": "Acme", "Amount": "100"},
            {"Customer Name": "Globex", "Amount": "200"},
            {"Customer Name": "Initech", "Amount": "300"},
        ]

    def test_short_rows_are_padded(self):
        content = create_csv_file("Customer Name,Amount,Notes\nAcme,100\n")

        result = parse_spreadsheet(content, "aging.csv")

        assert result.rows[0]["Customer Name"] == "Acme"
        assert not result.rows[0]["Notes"]

    def test_byte_order_mark(self):
        content = "Customer,Amount\nAcme,10\n".encode("utf-8-sig")

        result = parse_spreadsheet(content, "accounts.csv")

        assert result.headers[0] == "Customer"

    def test_sample_rows(self):
        lines = ["Customer,Amount"] + [f"C{i},{i}" for i in range(8)]
        result = parse_spreadsheet(create_csv_file("\n".join(lines)), "accounts.csv")

        assert len(result.sample_rows(5)) == 5
        assert result.sample_rows(5)[0] == {"Customer": "C0", "Amount": "0"}


# ===================
# ERROR TESTS
# ===================

class TestParseErrors:
    """Tests for rejected uploads."""

    def test_unsupported_extension(self):
        with pytest.raises(SpreadsheetParseError) as exc_info:
            parse_spreadsheet(b"%PDF-1.4", "aging.pdf")

        assert "Unsupported file type" in exc_info.value.message
        assert exc_info.value.status_code == 422

    def test_missing_extension(self):
        with pytest.raises(SpreadsheetParseError):
            parse_spreadsheet(b"Customer\nAcme\n", "aging")

    def test_too_large(self):
        with pytest.raises(SpreadsheetParseError) as exc_info:
            parse_spreadsheet(create_csv_file("Customer\nAcme\n"), "a.csv", max_bytes=5)

        assert exc_info.value.message == "File is too large"

    def test_empty_file(self):
        with pytest.raises(SpreadsheetParseError) as exc_info:
            parse_spreadsheet(b"", "a.csv")

        assert exc_info.value.message == "File is empty"

    def test_headers_only(self):
        with pytest.raises(SpreadsheetParseError) as exc_info:
            parse_spreadsheet(create_csv_file("Customer,Amount\n"), "a.csv")

        assert "at least one data row" in exc_info.value.message

    def test_blank_header_row(self):
        with pytest.raises(SpreadsheetParseError) as exc_info:
            parse_spreadsheet(create_csv_file(",\nAcme,10\n"), "a.csv")

        assert exc_info.value.message == "No column headers found in first row"

    def test_corrupt_workbook(self):
        with pytest.raises(SpreadsheetParseError) as exc_info:
            parse_spreadsheet(b"definitely not a zip archive", "aging.xlsx")

        assert exc_info.value.message == "Failed to read spreadsheet"
