#!/usr/bin/env python3
"""
Bancario Demonstration Entry Point

Creates sample clients and accounts and prints the outcome of each operation.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from bancario.accounts import BankAccount
from bancario.clients import CorporateClient, IndividualClient
from bancario.logging_config import setup_logging


def check(ok: bool) -> str:
    return "✓" if ok else "✗"


def main():
    setup_logging(level="WARNING")

    print("=== Bancario - Demonstration ===\n")

    print("1. Creating an individual client:")
    try:
        individual = IndividualClient(
            id=1,
            name="João da Silva",
            cpf="123.456.789-09",
            password="Senh@Segura123"
        )
        print(f"{check(True)} Individual client created: {individual.name} (CPF: {individual.cpf})")

        print("\n2. Authenticating the individual client:")
        ok = individual.authenticate("123.456.789-09", "Senh@Segura123")
        print(f"   Correct credentials: {check(ok)}")
        refused = not individual.authenticate("123.456.789-09", "wrongpassword")
        print(f"   Wrong password refused: {check(refused)}")
    except ValueError as e:
        print(f"{check(False)} Could not create client: {e}")

    print("\n3. Creating a corporate client:")
    try:
        corporate = CorporateClient(
            id=1,
            legal_name="Empresa XYZ Ltda",
            cnpj="11.222.333/0001-81",
            password="Empres@Segura456"
        )
        print(f"{check(True)} Corporate client created: {corporate.legal_name} (CNPJ: {corporate.cnpj})")

        print("\n4. Authenticating the corporate client:")
        ok = corporate.authenticate("11222333000181", "Empres@Segura456")
        print(f"   Unformatted CNPJ: {check(ok)}")
    except ValueError as e:
        print(f"{check(False)} Could not create client: {e}")

    print("\n5. Creating a client with an invalid CPF:")
    try:
        IndividualClient(id=2, name="Maria Santos", cpf="111.111.111-11", password="Senh@Forte789")
        print(f"{check(False)} Invalid CPF should have been rejected")
    except ValueError as e:
        print(f"{check(True)} Invalid CPF rejected: {e}")

    print("\n6. Password strength:")
    client = IndividualClient(id=3, name="Pedro Oliveira", cpf="987.654.321-00", password="S3nh@Fort3Valid@")
    print(f"   Strong password accepted: {check(client.is_strong_password('S3nh@Fort3Valid@'))}")
    print(f"   Short password rejected: {check(not client.is_strong_password('Sen@1'))}")
    print(f"   Password without special character rejected: "
          f"{check(not client.is_strong_password('SenhaForte123'))}")

    print("\n7. Opening an account:")
    account = BankAccount.create("João da Silva", 1000)
    print(f"{check(True)} Account {account.number} - holder: {account.holder}")
    print(f"   Opening balance: R$ {account.balance:.2f}")

    account.deposit(500)
    print(f"   After depositing R$ 500: R$ {account.balance:.2f}")

    account.withdraw(200)
    print(f"   After withdrawing R$ 200: R$ {account.balance:.2f}")

    print("\n=== Demonstration finished ===")


if __name__ == "__main__":
    main()
