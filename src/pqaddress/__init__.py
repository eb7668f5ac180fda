from .address import (
    ADDRESS_LENGTH,
    AddressParams,
    DecodedAddress,
    decode_address,
    encode_address,
    is_valid_address,
)
from .exceptions import *
from .network import ALL_NETWORKS, Mainnet, Network, Testnet, hrp_of, network_from_hrp
from .tags import PUBKEY_TYPE_RANGE, VERSION_RANGE, PubKeyType, Version
