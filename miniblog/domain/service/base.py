"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the post rules that span the aggregate and its
    repository: visibility, reconciliation and file handling.
    """

    pass
