"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, timefield.toml only contains
overrides. A fresh install needs no config file at all.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from timefield.domain.intervals import ShortcutWords


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    tasks_file: str = "tasks.yaml"


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    month_style: Literal["number", "short", "long"] = "number"


class StringsConfig(BaseModel):
    """[strings] section — localizable command words and messages."""

    model_config = {"frozen": True}

    # Shortcut phrase vocabulary
    today: str = "today"
    prev: str = "prev"
    this: str = "this"
    next: str = "next"
    day: str = "day"
    week: str = "week"

    # Interactive shell
    application_title: str = "TimeField"
    command_prompt: str = "Enter a command (h for help)."
    invalid_command_error: str = "Invalid command."
    invalid_interval_error: str = "Invalid interval."
    invalid_input_error: str = "Invalid input."
    invalid_task_error: str = "Invalid task."
    save_error: str = "Could not save tasks."
    new_task_prompt: str = "New task:"
    title_prompt: str = "Title"
    notes_prompt: str = "Notes"
    interval_prompt: str = "Interval"
    duration_prompt: str = "Duration (H:M)"

    def shortcut_words(self) -> ShortcutWords:
        """The vocabulary the interval parser matches against."""
        return ShortcutWords(
            today=self.today,
            prev=self.prev,
            this=self.this,
            next=self.next,
            day=self.day,
            week=self.week,
        )
