"""Configuration constants for vinuchain-networks library."""

# Secret file read at startup, kept out of version control
SECRET_FILENAME = ".secret"

# RPC endpoints may be plain HTTP(S) or websocket
ALLOWED_URL_SCHEMES = ("http", "https", "ws", "wss")

# Known Vinuchain networks
VINUCHAIN_NETWORKS = {
    "testnet": {
        "rpc_endpoint_url": "https://for-test.vinuchain-rpc.com",
        "network_id": 207207,
    },
    "mainnet": {
        "rpc_endpoint_url": "https://vinufoundation-rpc.com",
        "network_id": 206,
    },
}

# Both deployment configs historically registered their network as "private".
# Resolving them together raises DuplicateNetworkNameError.
LEGACY_PRIVATE_DESCRIPTORS = [
    {
        "name": "private",
        "rpc_endpoint_url": "https://for-test.vinuchain-rpc.com",
        "network_id": 207207,
    },
    {
        "name": "private",
        "rpc_endpoint_url": "https://vinufoundation-rpc.com",
        "network_id": 206,
    },
]
