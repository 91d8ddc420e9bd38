"""HTTP API for the payroll calculator."""
