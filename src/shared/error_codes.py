# src/shared/error_codes.py
# Central mapping that aligns with the error contract.
# Keep keys stable: API clients rely on these.
ERROR_CODES = {
    # ─── Validation & Requests ──────────────────────────────────────────────
    "validation_error": {
        "http": 422,
        "message": "Validation failed for one or more fields."
    },
    "invalid_operation": {
        "http": 409,
        "message": "The operation is not allowed in the current state."
    },
    # ─── Resources ─────────────────────────────────────────────────────────
    "not_found": {
        "http": 404,
        "message": "Resource not found."
    },
    # ─── Server ────────────────────────────────────────────────────────────
    "internal_error": {
        "http": 500,
        "message": "An unexpected error occurred."
    },
}
