"""
Errors shared by the conversation pipeline and the trade ledger.
Every ledger transport failure carries the spreadsheet id and a remediation hint.
"""

import openai


class AssistantError(Exception):
    """Base class for errors raised by the trade log assistant."""


class ConfigMissing(AssistantError):
    """A required credential or setting is absent."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing required env var: {name}")


class CredentialAuthError(AssistantError):
    """The completion service rejected (or never received) our credential."""


class SearchUnavailable(AssistantError):
    """The search tool is not configured or the call failed."""

    def __init__(self, status: str, message: str = ""):
        self.status = status
        super().__init__(message or f"Web search unavailable ({status})")


# Fragments the OpenAI API (and our own config check) put in auth failures
_AUTH_ERROR_MARKERS = (
    "Missing OPENAI_API_KEY",
    "Incorrect API key",
    "invalid_api_key",
    "API key expired",
    "API_KEY_INVALID",
)


def is_llm_auth_error(error: BaseException | None) -> bool:
    """Return True when *error* means the language model cannot be used at all."""
    if error is None:
        return False
    if isinstance(error, CredentialAuthError):
        return True
    if isinstance(error, openai.AuthenticationError):
        return True
    message = str(error)
    return any(marker in message for marker in _AUTH_ERROR_MARKERS)


# ── Ledger ───────────────────────────────────────────────────────────────────


class LedgerError(AssistantError):
    """Base class for trade-ledger failures."""

    def __init__(self, message: str, spreadsheet_id: str = ""):
        self.message = message
        self.spreadsheet_id = spreadsheet_id
        super().__init__(message)


class PermissionDenied(LedgerError):
    """The service identity cannot read or write the spreadsheet."""

    def __init__(self, spreadsheet_id: str, action: str, client_email: str = ""):
        identity = client_email or "the configured service account"
        super().__init__(
            f"Google Sheets permission denied while {action} for spreadsheet {spreadsheet_id}. "
            f"Share the sheet with the service account {identity}.",
            spreadsheet_id,
        )


class SheetNotFound(LedgerError):
    """The spreadsheet, or the named tab inside it, does not exist."""

    @classmethod
    def spreadsheet(cls, spreadsheet_id: str, action: str) -> "SheetNotFound":
        return cls(
            f"Google Sheets spreadsheet not found while {action}. "
            f"Check GOOGLE_SHEETS_SPREADSHEET_ID ({spreadsheet_id}).",
            spreadsheet_id,
        )

    @classmethod
    def tab(cls, spreadsheet_id: str, sheet_label: str) -> "SheetNotFound":
        return cls(
            f"Sheet '{sheet_label}' not found in spreadsheet {spreadsheet_id}. "
            f"Check sheetName in the trade log config.",
            spreadsheet_id,
        )


class BackingStoreError(LedgerError):
    """Any other failure reported by the backing store."""


class NoMatchingHeaders(LedgerError):
    """None of the configured column names exist in the live header row."""

    def __init__(self, configured: list[str], sheet_headers: list[str]):
        self.configured = configured
        self.sheet_headers = sheet_headers
        self.missing = [h for h in configured if h not in sheet_headers]
        super().__init__("No matching headers found. Check trade_log.json column names.")


class InvalidTransactionType(LedgerError):
    """The trade's side is not one of the ledger's transaction types.

    Only reachable for TradeRecords built without validation.
    """
