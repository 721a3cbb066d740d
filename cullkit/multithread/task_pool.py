# cullkit/multithread/task_pool.py
# ---------------------------------------------------------------
# Простой пул задач на основе concurrent.futures.
# Тесты видимости независимы между объектами, поэтому проход
# делится на чанки и раздаётся потокам; frustum только читается.
# ---------------------------------------------------------------

from concurrent.futures import ThreadPoolExecutor
import queue


class TaskPool:
    """Пул готового количества потоков; задачи принимаются как callables."""
    def __init__(self, max_workers=None):
        self.executor = ThreadPoolExecutor(max_workers=max_workers,
                                           thread_name_prefix="cullkit")
        self.tasks = queue.Queue()
        self._shutdown = False

    def submit(self, fn, *args, **kwargs):
        """Отправить задачу в пул, вернуть Future."""
        if self._shutdown:
            raise RuntimeError("TaskPool already shut down")
        future = self.executor.submit(fn, *args, **kwargs)
        self.tasks.put(future)
        return future

    def map(self, fn, items):
        """Выполнить fn для каждого элемента, результаты – в исходном порядке."""
        if self._shutdown:
            raise RuntimeError("TaskPool already shut down")
        return list(self.executor.map(fn, items))

    def wait_all(self):
        """Блокировать до завершения всех поставленных задач."""
        while not self.tasks.empty():
            future = self.tasks.get()
            future.result()  # пробрасывает исключения, если они возникли

    def shutdown(self, wait=True):
        self._shutdown = True
        self.executor.shutdown(wait=wait)
