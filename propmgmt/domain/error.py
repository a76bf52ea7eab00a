"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class BadRequestAlertError(DomainError):
    """Raised when a request can't be applied to an entity as submitted.

    Carries the entity name and a machine-readable error key so the
    interface layer can build a problem response and failure alert headers.
    """

    def __init__(self, message: str, entity_name: str, error_key: str):
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key
        super().__init__(message)


class AgreementReferenceError(BadRequestAlertError):
    """Raised when an entity can't be linked to the agreement it names.

    The agreement must exist and may be linked to at most one entity of
    each kind.
    """

    @classmethod
    def not_found(
        cls, entity_name: str, agreement_id: int
    ) -> "AgreementReferenceError":
        return cls(
            f"Agreement {agreement_id} does not exist",
            entity_name,
            "agreementnotfound",
        )

    @classmethod
    def in_use(
        cls, entity_name: str, agreement_id: int
    ) -> "AgreementReferenceError":
        return cls(
            f"Agreement {agreement_id} is already linked to another {entity_name}",
            entity_name,
            "agreementinuse",
        )
