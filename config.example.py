# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Nothing in the app is persisted; DATA_DIR only receives the log file.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "WATCHLIST_APP_NAME": "App name used in log lines (default: watchlist).",
    "WATCHLIST_TITLE": "Heading shown above the list (default: My WatchList).",
    "WATCHLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    "WATCHLIST_DATA_DIR": "Directory for watchlist.log (default: .local/watchlist).",
    "WATCHLIST_LOG_TO_FILE": "Write a DEBUG log file under DATA_DIR (true/false).",
    # Seed
    "WATCHLIST_SEED_COUNT": "Number of placeholder items a session starts with (default: 3).",
    "WATCHLIST_SEED_LABEL": "Placeholder label template, {i} is the id (default: Movie #{i}).",
    # Connectors
    "WATCHLIST_CONSOLE_ENABLED": "Enable console connector (true/false).",
}
