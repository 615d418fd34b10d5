# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKBOT_APP_NAME": "Bot display name used in the welcome banner (default: taskbot).",
    "TASKBOT_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKBOT_LOG_TO_FILE": "Write full DEBUG logs to <data_dir>/taskbot.log (true/false, default: true).",
    # Paths (gitignored)
    "TASKBOT_DATA_DIR": "Local data directory (default: .local/taskbot).",
    "TASKBOT_TASKS_PATH": "Task records file (default: <data_dir>/tasks.csv).",
    "TASKBOT_ARCHIVE_PATH": "Archive log file (default: <data_dir>/archive.csv).",
}
