from cullkit.multithread.task_pool import TaskPool

__all__ = ["TaskPool"]
