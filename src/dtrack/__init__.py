"""dtrack: per-user tracking of labeled accounts and custom transactions."""
