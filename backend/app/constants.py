DEFAULTS = {
    # Service name reported by FastAPI
    "APP_NAME": "kraph-backend",
    # Prefix prepended to every router
    "API_PREFIX": "",
    # Waiting writers block new readers
    "STORE_PREFER_WRITERS": True,
    # JSON indentation for /graph/export (None for compact output)
    "SERIALIZATION_INDENT": None,
    # Sort node ids in serialized output
    "SERIALIZATION_SORT_KEYS": True,
    # Optional CSV edge list loaded into the store at startup
    "SEED_EDGES_PATH": None,
    # Root log level for the runner script
    "LOG_LEVEL": "INFO",
}
