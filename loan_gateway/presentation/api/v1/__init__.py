"""Version 1 of the loan decision API."""
