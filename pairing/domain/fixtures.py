"""Deterministic metadata records for tests and local tooling."""

from .models import AppMetadata, Redirect


def domain_app_metadata_stub() -> AppMetadata:
    """Return the canonical example identity record.

    Returns:
        AppMetadata: Record with an empty native redirect and link mode disabled.
    """

    return AppMetadata(
        name="Wallet Connect",
        description="A protocol to connect blockchain wallets to dapps.",
        url="https://walletconnect.com/",
        icons=(),
        redirect=Redirect(native="", universal=None),
    )
