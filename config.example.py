# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Keep .env local (gitignored).

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKMATE_APP_NAME": "Name the bot introduces itself with (default: taskmate).",
    "TASKMATE_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKMATE_FILE_LOGGING": "Also write full DEBUG logs to <log_dir>/taskmate.log (default: true).",
    # Paths (gitignored)
    "TASKMATE_DATA_DIR": "Local data directory (default: .local/taskmate).",
    "TASKMATE_TASKS_PATH": "Task list JSON file (default: <data_dir>/tasks.json).",
    "TASKMATE_LOG_DIR": "Log file directory (default: <data_dir>).",
}
