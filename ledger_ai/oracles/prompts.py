"""System prompt sent alongside the rendered categorization prompt."""

SYSTEM_PROMPT = (
    "You are a bookkeeping assistant that assigns bank transactions to budget categories. "
    "Reply with exactly one category ID from the allowed list and nothing else: "
    "no explanations, no quotes, no category names."
)

CANDIDATES_TEMPLATE = "Allowed category IDs: {candidates}"
