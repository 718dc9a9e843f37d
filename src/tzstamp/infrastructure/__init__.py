"""Infrastructure layer — host clock and IANA timezone database access."""
