"""Saving wallpapers to the camera roll.

PhotoSaver does the blocking work (download, decode check, write).
AsyncSaveWorker runs it off the UI thread and hands results back as
UI events that the frame loop drains with poll_ui_events().
"""

from __future__ import annotations
import io
import os
from collections import deque
from queue import Queue, Empty
from threading import Thread, Lock
from typing import Callable, Deque, List, Optional

import requests
from PIL import Image

from .config import CAMERA_ROLL_DIR, HTTP_TIMEOUT_S, SAVE_JPEG_QUALITY, SAVE_WORKERS
from .errors import SaveFailed
from .feed import photo_url
from .logging import log, now
from .types import PhotoDescriptor, SaveOutcome, SaveTask, UIEvent


def camera_roll_filename(photo: PhotoDescriptor) -> str:
    return f"splashwalls_{photo.id}_{photo.width}x{photo.height}.jpg"


class PhotoSaver:
    """Downloads a wallpaper and writes it as JPEG into the camera roll."""

    def __init__(self, target_dir: str = CAMERA_ROLL_DIR,
                 session: Optional[requests.Session] = None,
                 timeout: float = HTTP_TIMEOUT_S):
        self.target_dir = target_dir
        self.session = session
        self.timeout = timeout

    def download(self, photo: PhotoDescriptor) -> bytes:
        url = photo_url(photo)
        http = self.session if self.session is not None else requests
        try:
            response = http.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise SaveFailed(f"download failed: {e}") from e
        return response.content

    def save(self, photo: PhotoDescriptor) -> str:
        """Persist the photo and return its path. Raises SaveFailed."""
        data = self.download(photo)

        try:
            img = Image.open(io.BytesIO(data))
            img.load()
        except (OSError, Image.DecompressionBombError) as e:
            raise SaveFailed(f"not a valid image: {e}") from e

        # JPEG has no alpha or palette
        if img.mode in ('RGBA', 'LA', 'P'):
            background = Image.new('RGB', img.size, (255, 255, 255))
            if img.mode == 'P':
                img = img.convert('RGBA')
            background.paste(img, mask=img.split()[-1] if img.mode in ('RGBA', 'LA') else None)
            img = background
        elif img.mode != 'RGB':
            img = img.convert('RGB')

        path = os.path.join(self.target_dir, camera_roll_filename(photo))
        try:
            os.makedirs(self.target_dir, exist_ok=True)
            img.save(path, format='JPEG', quality=SAVE_JPEG_QUALITY, optimize=True)
        except OSError as e:
            raise SaveFailed(f"could not write {path}: {e}") from e

        log(f"[SAVE] Wrote {os.path.basename(path)}")
        return path


class AsyncSaveWorker:
    """Runs a save function on background threads."""

    def __init__(self, save_func: Callable[[PhotoDescriptor], str],
                 workers: int = SAVE_WORKERS):
        self.task_queue: "Queue[SaveTask]" = Queue()
        self.save_func = save_func
        self.running = True
        self.ui_events: Deque[UIEvent] = deque()
        self.ui_lock = Lock()
        self.workers: List[Thread] = []

        for _ in range(workers):
            worker = Thread(target=self._worker_loop, daemon=True)
            worker.start()
            self.workers.append(worker)

    def _worker_loop(self) -> None:
        while self.running:
            try:
                task = self.task_queue.get(timeout=0.1)
            except Empty:
                continue

            try:
                path = self.save_func(task.photo)
                outcome = SaveOutcome(task.photo, path=path)
            except SaveFailed as e:
                outcome = SaveOutcome(task.photo, error=e.reason)
            except Exception as e:
                log(f"[SAVE][ERR] Unexpected error saving {task.photo.id}: {e!r}")
                outcome = SaveOutcome(task.photo, error=str(e) or type(e).__name__)

            self._push_ui_event(task.callback, (outcome,))
            self.task_queue.task_done()

    def _push_ui_event(self, callback: Callable, args: tuple) -> None:
        with self.ui_lock:
            self.ui_events.append(UIEvent(callback, args))

    def poll_ui_events(self, max_events: int = 100) -> int:
        """Run queued completions on the calling thread. Returns how many ran."""
        events_to_process = []
        with self.ui_lock:
            while self.ui_events and len(events_to_process) < max_events:
                events_to_process.append(self.ui_events.popleft())

        for event in events_to_process:
            try:
                event.callback(*event.args)
            except Exception as e:
                log(f"[UI_EVENT][ERR] {e!r}")
        return len(events_to_process)

    def submit(self, photo: PhotoDescriptor, callback: Callable[[SaveOutcome], None]) -> None:
        self.task_queue.put(SaveTask(photo, callback, now()))

    def shutdown(self) -> None:
        self.running = False
        for worker in self.workers:
            worker.join(timeout=1.0)
