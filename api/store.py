"""
In-memory store for reference texts and scored readings.

Records are plain dicts so they can be returned with jsonify as they are.
Ids increase monotonically; "newest first" ordering is by id.
"""
from __future__ import annotations

import datetime
import threading
from typing import Any, Dict, List, Optional

from reading_fluency.models.alignment import AlignmentResult

_HISTORY_FIELDS = ("id", "text_id", "created_at", "words_read", "errors", "wpm", "title")


def _now() -> str:
    return datetime.datetime.now().isoformat()


class ReadingStore:
    """Texts and readings kept in process memory, guarded by one lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._texts: Dict[int, Dict[str, Any]] = {}
        self._readings: Dict[int, Dict[str, Any]] = {}
        self._next_text_id = 1
        self._next_reading_id = 1

    # ------------------------------------------------------------------ texts
    def add_text(self, title: str, content: str, duration_sec: int) -> Dict[str, Any]:
        with self._lock:
            text_id = self._next_text_id
            self._next_text_id += 1
            record = {
                "id": text_id,
                "title": title,
                "content": content,
                "duration_sec": duration_sec,
                "created_at": _now(),
            }
            self._texts[text_id] = record
            return dict(record)

    def get_text(self, text_id: int) -> Optional[Dict[str, Any]]:
        with self._lock:
            record = self._texts.get(text_id)
            return dict(record) if record else None

    def list_texts(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [dict(self._texts[k]) for k in sorted(self._texts, reverse=True)]

    def latest_text(self) -> Optional[Dict[str, Any]]:
        with self._lock:
            if not self._texts:
                return None
            return dict(self._texts[max(self._texts)])

    # --------------------------------------------------------------- readings
    def add_reading(
        self,
        student_name: str,
        text_id: int,
        transcript: str,
        result: AlignmentResult,
        words: List[Dict[str, Any]],
        detail_html: str,
    ) -> Dict[str, Any]:
        with self._lock:
            if text_id not in self._texts:
                raise KeyError(text_id)
            reading_id = self._next_reading_id
            self._next_reading_id += 1
            record = {
                "id": reading_id,
                "student_name": student_name,
                "text_id": text_id,
                "transcript": transcript,
                "words_read": result.hypothesis_count,
                "errors": result.error_count,
                "wpm": result.words_per_minute,
                "detail_html": detail_html,
                "words": words,
                "created_at": _now(),
            }
            self._readings[reading_id] = record
            return dict(record)

    def _joined(self, record: Dict[str, Any]) -> Dict[str, Any]:
        row = dict(record)
        row["title"] = self._texts[record["text_id"]]["title"]
        return row

    def list_readings(
        self, student_name: Optional[str] = None, text_id: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        with self._lock:
            rows = []
            for key in sorted(self._readings, reverse=True):
                record = self._readings[key]
                if student_name is not None and record["student_name"] != student_name:
                    continue
                if text_id is not None and record["text_id"] != text_id:
                    continue
                rows.append(self._joined(record))
            return rows

    def student_history(self, student_name: str) -> List[Dict[str, Any]]:
        return [
            {k: row[k] for k in _HISTORY_FIELDS}
            for row in self.list_readings(student_name=student_name)
        ]

    def reading_detail(self, reading_id: int) -> Optional[Dict[str, Any]]:
        with self._lock:
            record = self._readings.get(reading_id)
            if record is None:
                return None
            text = self._texts[record["text_id"]]
            return {
                "id": record["id"],
                "detail_html": record["detail_html"],
                "words": record["words"],
                "ref_text": text["content"],
                "title": text["title"],
                "transcript": record["transcript"],
                "student_name": record["student_name"],
                "wpm": record["wpm"],
                "errors": record["errors"],
                "words_read": record["words_read"],
                "created_at": record["created_at"],
            }
