"""Per-owner limits shared by validation and the repository."""

MAX_LABEL_LENGTH = 100
MAX_LABELED_ACCOUNTS = 20
MAX_TAXONOMY_ENTRIES = 50

# u64 bound for transaction ids and amounts
MAX_U64 = 2**64 - 1
