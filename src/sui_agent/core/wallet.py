"""
Wallet: the active Sui address the agent acts for.

Private keys never enter this SDK. A wallet is built either from a plain
address (read-only monitoring) or from an external signer object that can
report its own address, e.g. a keypair from pysui or a hardware signer.
"""

from __future__ import annotations

from typing import Any

from sui_agent.core.address import AddressError, normalize_address


class WalletError(Exception):
    """Raised when the wallet address cannot be resolved."""
    pass


class Wallet:
    """
    Sui wallet address provider.

    Usage:
        wallet = Wallet.read_only("0x7d20...")
        wallet = Wallet.from_signer(keypair)  # keypair.to_sui_address()
    """

    def __init__(self, address: str, signer: Any | None = None, read_only: bool = True) -> None:
        self.address = address
        self._signer = signer
        self.read_only = read_only

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def read_only(cls, address: str) -> Wallet:
        """
        Read-only wallet -- can query balances and history, cannot sign.
        Useful for monitoring agents.
        """
        try:
            normalized = normalize_address(address)
        except AddressError as e:
            raise WalletError(f"Invalid Sui address: {e}") from None
        return cls(address=normalized, read_only=True)

    @classmethod
    def from_signer(cls, signer: Any) -> Wallet:
        """
        Wrap an external signer. The signer is opaque to the SDK; only its
        address is read, via ``to_sui_address()`` or an ``address`` attribute.
        """
        if hasattr(signer, "to_sui_address"):
            raw = signer.to_sui_address()
        else:
            raw = getattr(signer, "address", None)
        if not raw:
            raise WalletError("Signer did not report a Sui address.")
        try:
            normalized = normalize_address(str(raw))
        except AddressError as e:
            raise WalletError(f"Signer reported an invalid address: {e}") from None
        return cls(address=normalized, signer=signer, read_only=False)

    @property
    def signer(self) -> Any:
        if self._signer is None:
            raise WalletError("This wallet is read-only and has no signer.")
        return self._signer

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        mode = "read-only" if self.read_only else "signer"
        return f"Wallet(address={self.address!r}, mode={mode!r})"
