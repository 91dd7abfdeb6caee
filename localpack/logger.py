#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# logger.py - Logging management for localpack
#

import os
from datetime import datetime
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.table import Table
from rich.box import ROUNDED

from .config import APP_NAME, APP_DESC, VERSION, LOG_DIR_BASE
from .translation_utils import _

class RichLogger:
    """Manages logs and formatted messages using the Rich library"""

    COLOR_MAP = {
        "cyan": "bright_cyan",
        "blue_dark": "blue",
        "light_blue": "cyan",
        "white": "white",
        "red": "red",
        "yellow": "yellow",
        "green": "green",
        "orange": "yellow",
        "purple": "magenta",
        "bold": "bold"
    }

    def __init__(self, use_colors: bool = True, console: Console = None):
        self.use_colors = use_colors
        self.log_file = None
        self.console = console or Console(no_color=not use_colors, highlight=False)

    def setup_log_file(self, project_name: str, log_dir: str = LOG_DIR_BASE):
        """Sets up the log file"""
        if project_name:
            log_dir = os.path.join(os.path.expanduser(log_dir), project_name)
            os.makedirs(log_dir, exist_ok=True)
            self.log_file = os.path.join(log_dir, "localpack.log")

    def log(self, style: str, message: str):
        """Displays formatted message and saves to log"""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        rich_style = self.COLOR_MAP.get(style, "white")

        # markup=False keeps paths and command output like "[x]" verbatim
        self.console.print(message, style=rich_style, markup=False, soft_wrap=True)

        # Save to log file (without colors)
        if self.log_file:
            with open(self.log_file, 'a') as f:
                f.write(f"[{timestamp}] {message}\n")

    def draw_app_header(self):
        """Draws the application header"""
        header_content = Text()
        header_content.append(f"{APP_NAME} v{VERSION}\n", style="white on blue bold")
        header_content.append(APP_DESC, style="bright_cyan")

        panel = Panel(
            header_content,
            box=ROUNDED,
            border_style="blue",
            padding=(0, 1),
            width=70
        )

        self.console.print(panel)

    def display_summary(self, title: str, data: list):
        """Displays a formatted summary in a Rich table"""
        table = Table(show_header=False, box=ROUNDED, border_style="blue", padding=(0, 1))
        table.add_column(_("Field"), style="white")
        table.add_column(_("Value"), style="bright_cyan")

        for key, value in data:
            table.add_row(key, value)

        panel = Panel(
            table,
            title=title,
            box=ROUNDED,
            border_style="blue",
            padding=(1, 1),
            width=70
        )

        self.console.print(panel)
