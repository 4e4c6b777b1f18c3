"""Value types of the standard RGB smart contract interfaces: amounts, names, NFTs and reserves."""

__version__ = "0.12.0"
__all__ = ["fungible", "names", "por", "nft"]