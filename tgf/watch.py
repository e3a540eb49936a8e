"""File watching."""

import logging
from pathlib import Path
from typing import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer


class Watcher:

    """Watch a graph file and call a function whenever it changes."""

    def __init__(self, path: Path, on_change: Callable[[], None]):
        self.path = path
        self.handler = Handler(path, on_change)
        self.observer = Observer()

    def run(self):
        # Watch the directory, since editors often replace the file on save.
        directory = self.path.resolve().parent
        self.observer.schedule(self.handler, str(directory), recursive=False)
        logging.info("initial run")
        self.handler.on_change()
        logging.info("watching %s", self.path)
        self.observer.start()
        try:
            while self.observer.is_alive():
                self.observer.join(1)
        except KeyboardInterrupt:
            logging.info("quitting")
        finally:
            self.observer.stop()
            self.observer.join()


class Handler(FileSystemEventHandler):

    """Handler for file system events on the watched file."""

    def __init__(self, path: Path, on_change: Callable[[], None]):
        super().__init__()
        self.target = path.resolve()
        self.on_change = on_change

    def matches(self, event: FileSystemEvent) -> bool:
        if event.is_directory:
            return False
        paths = [event.src_path, getattr(event, "dest_path", "")]
        return any(p and Path(p).resolve() == self.target for p in paths)

    def on_any_event(self, event: FileSystemEvent):
        if event.event_type not in ("modified", "created", "moved"):
            return
        if not self.matches(event):
            return
        logging.info("%s %s: reload", event.src_path, event.event_type)
        self.on_change()
