"""
Console + file logger shared by services and middleware.
"""
import os
from datetime import datetime

from storefront.config import get_settings


def log(component: str, message: str):
    """Write a timestamped line to the console and to <LOG_DIR>/<component>.log."""
    ts = datetime.now().isoformat()
    line = f"{ts} - {component.upper()}: {message}"
    print(line)
    try:
        log_dir = get_settings().LOG_DIR
        os.makedirs(log_dir, exist_ok=True)
        with open(os.path.join(log_dir, f"{component.lower()}.log"), "a") as f:
            f.write(line + "\n")
    except OSError:
        pass
