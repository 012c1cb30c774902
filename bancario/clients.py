"""
Client Authentication Module

Individual (CPF) and corporate (CNPJ) clients that can authenticate with
their taxpayer document and a strong password.

Construction validates every invariant and raises ValueError, so a client
instance always holds a valid document. Authentication never raises: it
answers True or False and does not reveal which factor failed.

Passwords are kept as plain values and compared directly; there is no
hashing here.
"""

import logging
import secrets
from abc import ABC, abstractmethod
from dataclasses import InitVar, dataclass
from typing import Union

from .documents import is_formatted_cnpj, is_valid_cnpj, is_valid_cpf, only_digits
from .logging_config import log_action
from .passwords import is_strong_password

logger = logging.getLogger(__name__)

# Advisory: lockout after this many failures is left to the caller
MAX_ATTEMPTS = 3


class Authenticatable(ABC):
    """
    Authentication capability shared by every client kind.

    Subclasses only provide the stored document; the password policy and
    the authentication steps live here.
    """

    @property
    def max_attempts(self) -> int:
        """Maximum authentication attempts before the caller should lock out"""
        return MAX_ATTEMPTS

    @property
    @abstractmethod
    def document(self) -> str:
        """Stored taxpayer document, as given at construction"""

    def is_strong_password(self, password: str) -> bool:
        """Check a password against the strong-password policy"""
        return is_strong_password(password)

    def _password_matches(self, password: str) -> bool:
        return secrets.compare_digest(
            self._password.encode("utf-8", "surrogatepass"),
            password.encode("utf-8", "surrogatepass")
        )

    def authenticate(self, identifier: str, password: str) -> bool:
        """
        Authenticate with a document and a password

        Args:
            identifier: CPF or CNPJ, with or without formatting
            password: Password, which must also satisfy the strength policy

        Returns:
            True only if the password is strong, the document matches the
            stored one after normalization and the password matches
        """
        if not self.is_strong_password(password):
            reason = "weak_password"
        elif only_digits(identifier) != only_digits(self.document):
            reason = "identifier_mismatch"
        elif not self._password_matches(password):
            reason = "password_mismatch"
        else:
            log_action(
                logger, "info", "Client authenticated",
                client_id=self.id, action="authenticate",
                resource=type(self).__name__
            )
            return True

        log_action(
            logger, "info", "Client authentication failed",
            client_id=self.id, action="authenticate_failed",
            resource=type(self).__name__, extra={"reason": reason}
        )
        return False


def _store_password(client: Authenticatable, password: str) -> None:
    # Frozen dataclass: set directly, outside the dataclass fields
    object.__setattr__(client, '_password', password)


def _validate_identity(client_id: int, name: str, name_label: str) -> None:
    if isinstance(client_id, bool) or not isinstance(client_id, int) or client_id <= 0:
        raise ValueError("ID must be positive")
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"{name_label} must not be blank")


@dataclass(frozen=True)
class IndividualClient(Authenticatable):
    """
    Individual client identified by CPF

    The CPF may be formatted or not; it only has to be valid.
    """
    id: int
    name: str
    cpf: str
    password: InitVar[str]

    def __post_init__(self, password: str):
        _validate_identity(self.id, self.name, "Name")
        if not is_valid_cpf(self.cpf):
            raise ValueError("Invalid CPF")
        _store_password(self, password)

    @property
    def document(self) -> str:
        return self.cpf


@dataclass(frozen=True)
class CorporateClient(Authenticatable):
    """
    Corporate client identified by CNPJ

    The CNPJ must be written as NN.NNN.NNN/NNNN-NN at construction.
    Authentication still accepts it unformatted.
    """
    id: int
    legal_name: str
    cnpj: str
    password: InitVar[str]

    def __post_init__(self, password: str):
        _validate_identity(self.id, self.legal_name, "Legal name")
        if not is_formatted_cnpj(self.cnpj):
            raise ValueError("Invalid CNPJ: expected format NN.NNN.NNN/NNNN-NN")
        if not is_valid_cnpj(self.cnpj):
            raise ValueError("Invalid CNPJ: check digits do not match")
        _store_password(self, password)

    @property
    def document(self) -> str:
        return self.cnpj


Client = Union[IndividualClient, CorporateClient]
