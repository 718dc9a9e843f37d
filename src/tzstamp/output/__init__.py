"""Output layer — render ServiceResult as Rich text, bare values, or JSON."""
