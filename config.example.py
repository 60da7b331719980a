# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TRIP_APP_NAME": "App display name (default: trip-planner).",
    "TRIP_LOG_LEVEL": "Console logging level (default: INFO).",
    "TRIP_LOG_TO_FILE": "Also write full logs to <data_dir>/trip_planner.log (true/false, default: true).",
    # Paths (gitignored)
    "TRIP_DATA_DIR": "Local data directory (default: .local/trip_planner).",
    "TRIP_PREFS_NAME": "Prefs file name inside the data dir, without .json (default: trip_planning_prefs).",
    "TRIP_TASKS_KEY": "Key holding the task JSON array in the prefs file (default: tasks_json).",
}
