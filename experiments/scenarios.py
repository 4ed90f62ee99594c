# message sizes in bytes
SCENARIOS = {
    "empty": {"message_bytes": 0},
    "small": {"message_bytes": 64},
    "transaction": {"message_bytes": 512},
    "block": {"message_bytes": 64 * 1024},
    "large": {"message_bytes": 1024 * 1024},
}
