"""
Bancario

A small banking domain model: CPF/CNPJ validation, client authentication
with a strong-password policy, and basic account balance operations.
"""

__version__ = "1.0.0"
