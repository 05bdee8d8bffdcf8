"""Output layer — turns ServiceResult into human or machine text."""
