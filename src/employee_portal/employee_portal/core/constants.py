"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"
ALL_DATES_LABEL = "All"

DEFAULT_SESSION_DAYS = 7

# Installed into an empty default_tasks table on first start-up.
DEFAULT_TASK_TEMPLATES = (
    ("Check and respond to emails", "Review inbox and reply to priority messages"),
    ("Review pending invoices", "Check for any outstanding client invoices and load into melio"),
    ("Follow up on Collection Invoices", "Ensure all client customers are emailed and collected on"),
    ("Daily reconciliation check", "Review daily transactions and balances in QBO"),
    (
        "Post incoming payments for FCCLA and Utah TSA",
        "Ensure all incoming payments have been properly posted and bank transactions cleared",
    ),
)
