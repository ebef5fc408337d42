"""Application services shared by several handlers."""

from src.application.services.task_notifier import TaskNotifier

__all__ = ["TaskNotifier"]
