from __future__ import annotations

from dataclasses import dataclass

from .exceptions import UnknownPrefixError


@dataclass(frozen=True)
class Network:
    name: str
    bech32_hrp: str


Mainnet = Network(name="mainnet", bech32_hrp="yp")

Testnet = Network(name="testnet", bech32_hrp="rh")

ALL_NETWORKS = (Mainnet, Testnet)


def hrp_of(network: Network) -> str:
    """Human-readable part used for addresses on `network`."""
    return network.bech32_hrp


def network_from_hrp(hrp: str) -> Network:
    """Look up the network that uses `hrp`.

    Raises `UnknownPrefixError` if no known network matches.
    """
    for network in ALL_NETWORKS:
        if network.bech32_hrp == hrp:
            return network
    raise UnknownPrefixError(hrp)
