"""
Google Sheets v4 backend for the trade ledger.
Authenticates as a service account; the spreadsheet must be shared with it.
"""

import json
from typing import Any, Dict, List, Optional

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from config import (
    GOOGLE_SHEETS_PRIVATE_KEY,
    GOOGLE_SHEETS_SERVICE_ACCOUNT_EMAIL,
    GOOGLE_SHEETS_SPREADSHEET_ID,
)
from core.errors import BackingStoreError, ConfigMissing, LedgerError, PermissionDenied, SheetNotFound

from .base import SheetProperties, SheetStore

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
_TOKEN_URI = "https://oauth2.googleapis.com/token"


def _error_details(error: Exception) -> Dict[str, Any]:
    """Pull HTTP status, API status and message out of a transport error."""
    status = getattr(error, "status_code", None)
    resp = getattr(error, "resp", None)
    if status is None and resp is not None:
        status = getattr(resp, "status", None)

    api_status = api_message = None
    content = getattr(error, "content", None)
    if content:
        try:
            body = json.loads(content.decode("utf-8") if isinstance(content, bytes) else content)
            api_error = body.get("error", {}) if isinstance(body, dict) else {}
            api_status = api_error.get("status")
            api_message = api_error.get("message")
        except (ValueError, AttributeError):
            pass
    return {"status": int(status) if status else None, "api_status": api_status, "api_message": api_message}


class GoogleSheetStore(SheetStore):
    """SheetStore over the Google Sheets REST API."""

    def __init__(self, spreadsheet_id: str, client_email: str, service: Any):
        self.spreadsheet_id = spreadsheet_id
        self.client_email = client_email
        self._service = service

    @classmethod
    def from_env(cls) -> "GoogleSheetStore":
        """Build a store from the GOOGLE_SHEETS_* settings."""
        for name, value in (
            ("GOOGLE_SHEETS_SERVICE_ACCOUNT_EMAIL", GOOGLE_SHEETS_SERVICE_ACCOUNT_EMAIL),
            ("GOOGLE_SHEETS_PRIVATE_KEY", GOOGLE_SHEETS_PRIVATE_KEY),
            ("GOOGLE_SHEETS_SPREADSHEET_ID", GOOGLE_SHEETS_SPREADSHEET_ID),
        ):
            if not value:
                raise ConfigMissing(name)

        credentials = service_account.Credentials.from_service_account_info(
            {
                "type": "service_account",
                "client_email": GOOGLE_SHEETS_SERVICE_ACCOUNT_EMAIL,
                "private_key": GOOGLE_SHEETS_PRIVATE_KEY,
                "token_uri": _TOKEN_URI,
            },
            scopes=SCOPES,
        )
        service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
        return cls(GOOGLE_SHEETS_SPREADSHEET_ID, GOOGLE_SHEETS_SERVICE_ACCOUNT_EMAIL, service)

    # ── SheetStore ───────────────────────────────────────────────────────
    def read_values(self, range_a1: str) -> List[List[Any]]:
        response = (
            self._service.spreadsheets()
            .values()
            .get(spreadsheetId=self.spreadsheet_id, range=range_a1)
            .execute()
        )
        return response.get("values", [])

    def write_values(self, range_a1: str, rows: List[List[str]], value_input_option: str = "USER_ENTERED") -> None:
        (
            self._service.spreadsheets()
            .values()
            .update(
                spreadsheetId=self.spreadsheet_id,
                range=range_a1,
                valueInputOption=value_input_option,
                body={"values": rows},
            )
            .execute()
        )

    def list_sheets(self) -> List[SheetProperties]:
        response = (
            self._service.spreadsheets()
            .get(
                spreadsheetId=self.spreadsheet_id,
                fields="sheets.properties(sheetId,title,gridProperties(rowCount,columnCount))",
            )
            .execute()
        )
        sheets = []
        for entry in response.get("sheets", []):
            props = entry.get("properties", {})
            grid = props.get("gridProperties", {})
            sheets.append(
                SheetProperties(
                    sheet_id=props.get("sheetId", 0),
                    title=props.get("title", ""),
                    row_count=grid.get("rowCount", 0),
                    column_count=grid.get("columnCount", 0),
                )
            )
        return sheets

    def resize_sheet(self, sheet_id: int, row_count: int, column_count: int) -> None:
        body = {
            "requests": [
                {
                    "updateSheetProperties": {
                        "properties": {
                            "sheetId": sheet_id,
                            "gridProperties": {"rowCount": row_count, "columnCount": column_count},
                        },
                        "fields": "gridProperties(rowCount,columnCount)",
                    }
                }
            ]
        }
        self._service.spreadsheets().batchUpdate(spreadsheetId=self.spreadsheet_id, body=body).execute()

    def translate_error(self, error: Exception, action: str) -> LedgerError:
        return translate_sheets_error(error, self.spreadsheet_id, self.client_email, action)


def translate_sheets_error(
    error: Exception,
    spreadsheet_id: str,
    client_email: str,
    action: str,
) -> LedgerError:
    """Map a Google API failure onto the ledger error taxonomy."""
    details = _error_details(error)
    status = details["status"]
    api_status = details["api_status"]

    if status == 403 or api_status == "PERMISSION_DENIED":
        return PermissionDenied(spreadsheet_id, action, client_email)
    if status == 404 or api_status == "NOT_FOUND":
        return SheetNotFound.spreadsheet(spreadsheet_id, action)

    message: Optional[str] = details["api_message"]
    if message is None and not isinstance(error, HttpError):
        message = str(error) or None
    suffix = f": {message}" if message else "."
    return BackingStoreError(
        f"Google Sheets error while {action} for spreadsheet {spreadsheet_id}{suffix}",
        spreadsheet_id,
    )
